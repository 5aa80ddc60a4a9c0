"""SysV init restart implementation."""

import shutil
import subprocess
from typing import Any

from .._AbstractImpl import _AbstractImpl
from ..ServiceConfig import ServiceConfig
from ._Data import _Data


class _Impl(_AbstractImpl):
    """Restart services through the ``service`` wrapper."""

    def __init__(self, service_config: ServiceConfig):
        if not isinstance(service_config.data, _Data):
            raise ValueError("sysv service config data is required")
        self.config = service_config
        self._data: _Data = service_config.data

    def restart_service(self, unit: str) -> dict[str, Any]:
        command = shutil.which(self._data.command)
        if not command:
            return {"success": False, "error": f"{self._data.command} command not found in PATH"}
        try:
            subprocess.run([command, unit, "restart"], check=True, capture_output=True, text=True)
        except subprocess.CalledProcessError as e:
            error_msg = e.stderr.strip() if e.stderr else "Unknown error"
            return {"success": False, "error": f"Failed to restart {unit}: {error_msg}"}
        return {"success": True, "type": "sysv", "unit": unit}
