"""Marker for services whose restart failed after their files changed."""

from pathlib import Path

from ..config.JmxctlConfig import JmxctlConfig


def _pending_restart_path(service: str) -> Path:
    """Return the marker path under the jmxctl home for ``service``.

    The marker outlives the run that wrote it, so the next apply restarts the service
    even when its files are already converged.
    """
    return JmxctlConfig.get_home_dir() / "restart-pending" / service
