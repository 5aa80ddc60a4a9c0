"""systemd restart implementation."""

import shutil
import subprocess
from typing import Any

from .._AbstractImpl import _AbstractImpl
from ..ServiceConfig import ServiceConfig
from ._Data import _Data


class _Impl(_AbstractImpl):
    """Restart services through systemctl."""

    def __init__(self, service_config: ServiceConfig):
        if not isinstance(service_config.data, _Data):
            raise ValueError("systemd service config data is required")
        self.config = service_config
        self._data: _Data = service_config.data

    def _unit_name(self, unit: str) -> str:
        if "." in unit:
            return unit
        return f"{unit}{self._data.unit_suffix}"

    def restart_service(self, unit: str) -> dict[str, Any]:
        """Restart a unit via ``systemctl restart``."""
        if not shutil.which("systemctl"):
            return {"success": False, "error": "systemctl command not found in PATH"}

        unit_name = self._unit_name(unit)
        cmd = ["systemctl"]
        if self._data.user:
            cmd.append("--user")
        cmd += ["restart", unit_name]
        try:
            subprocess.run(cmd, check=True, capture_output=True, text=True)
        except subprocess.CalledProcessError as e:
            error_msg = e.stderr.strip() if e.stderr else "Unknown error"
            return {"success": False, "error": f"Failed to restart {unit_name}: {error_msg}"}
        return {"success": True, "type": "systemd", "unit": unit_name}
