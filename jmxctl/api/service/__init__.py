"""Service module - restart handle for the managed Java services."""

from .Service import Service
from .ServiceConfig import ServiceConfig

__all__ = ["Service", "ServiceConfig"]
