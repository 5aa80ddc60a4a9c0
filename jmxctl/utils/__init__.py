"""Utility helpers shared by the API and CLI layers."""

from .logger import configure_logging, get_logger

__all__ = ["configure_logging", "get_logger"]
