"""Service public API - restart handle for managed Java services."""

from typing import Any

from ...utils.logger import get_logger
from .ServiceConfig import _BACKEND_REGISTRY, ServiceConfig
from ._AbstractImpl import _AbstractImpl

logger = get_logger("service")


class Service:
    """Public API for service operations."""

    def __init__(self, service_config: ServiceConfig):
        self.service_config = service_config
        self._impl: _AbstractImpl | None = None

    def __enter__(self):
        backend_type = self.service_config.type

        if backend_type not in _BACKEND_REGISTRY:
            raise ValueError(
                f"Unsupported backend type: {backend_type!r} (supported: {list(_BACKEND_REGISTRY.keys())})"
            )

        # Import implementation class directly from backend _Impl module
        module = __import__(f"jmxctl.api.service._{backend_type}._Impl", fromlist=[""])
        impl_class = module._Impl
        self._impl = impl_class(self.service_config)
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        return False

    def restart_service(self, unit: str) -> dict[str, Any]:
        """Restart a service via the configured service manager.

        Returns:
            Dictionary with restart result
        """
        if not self._impl:
            raise RuntimeError("Service not initialized. Use as context manager first.")
        logger.info("Restarting %s via %s", unit, self.service_config.type)
        result = self._impl.restart_service(unit)
        if not result.get("success"):
            logger.error("Restart of %s failed: %s", unit, result.get("error", "unknown error"))
        return result
