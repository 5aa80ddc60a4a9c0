"""Abstract base class for restart backends."""

from abc import ABC, abstractmethod
from typing import Any


class _AbstractImpl(ABC):
    """Abstract base class for service-manager specific restart implementations."""

    @abstractmethod
    def restart_service(self, unit: str) -> dict[str, Any]:
        """Restart a service so it picks up new JMX configuration.

        Args:
            unit: Service (unit) name as known to the service manager

        Returns:
            Dictionary with restart result. Always has ``success``; ``error`` when it failed.
        """
        pass
