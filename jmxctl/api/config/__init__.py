"""Config API module."""

from .JmxctlConfig import JmxctlConfig
from .LogConfig import LogConfig

__all__ = ["JmxctlConfig", "LogConfig"]
