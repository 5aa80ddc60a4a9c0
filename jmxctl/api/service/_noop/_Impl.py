"""No-op restart implementation for hosts where something else restarts the service."""

from typing import Any

from .._AbstractImpl import _AbstractImpl
from ..ServiceConfig import ServiceConfig


class _Impl(_AbstractImpl):
    def __init__(self, service_config: ServiceConfig):
        self.config = service_config

    def restart_service(self, unit: str) -> dict[str, Any]:
        return {"success": True, "type": "noop", "unit": unit}
