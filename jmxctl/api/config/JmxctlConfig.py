"""Top-level jmxctl configuration."""

import json
import os
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from ..jmx.JmxConfig import JmxConfig, validate_service_name
from ..service.ServiceConfig import ServiceConfig
from .LogConfig import LogConfig


class JmxctlConfig(BaseModel):
    """Top-level configuration: logging, restart backend and the managed services."""

    model_config = ConfigDict(extra="forbid")

    log: LogConfig = Field(default_factory=LogConfig)
    service: ServiceConfig = Field(default_factory=lambda: ServiceConfig(type="systemd", data={}))
    services: dict[str, JmxConfig] = Field(default_factory=dict)

    @field_validator("services")
    @classmethod
    def validate_service_names(cls, v: dict[str, JmxConfig]) -> dict[str, JmxConfig]:
        for name in v:
            validate_service_name(name)
        return v

    @classmethod
    def get_home_dir(cls) -> Path:
        """Get jmxctl home directory based on JMXCTL_HOME or default to ~/.jmxctl."""
        home_env = os.environ.get("JMXCTL_HOME")
        if home_env:
            return Path(home_env).expanduser().resolve()
        return Path.home() / ".jmxctl"

    @classmethod
    def get_config_path(cls) -> Path:
        """Get path to config file under the jmxctl home directory."""
        return cls.get_home_dir() / "config.json"

    @classmethod
    def load(cls) -> "JmxctlConfig":
        """Load and validate config from file.

        Raises:
            ValueError: If config file not found, invalid JSON, or validation error
        """
        path = cls.get_config_path()

        if not path.exists():
            raise ValueError(f"Configuration file not found at {path}")

        try:
            with path.open() as fh:
                raw = json.load(fh)
        except json.JSONDecodeError as e:
            raise ValueError(f"Invalid JSON in config file {path}: {e}") from e

        return cls.from_dict(raw)

    @classmethod
    def from_dict(cls, raw: Any) -> "JmxctlConfig":
        """Validate a raw config mapping, flattening pydantic errors into a ValueError."""
        try:
            return cls(**raw)
        except TypeError as e:
            raise ValueError(f"Configuration must be a JSON object: {e}") from e
        except ValidationError as e:
            error_list = e.errors() or [{"msg": str(e), "loc": ()}]
            first = error_list[0]
            error_msg = first.get("msg", str(e))
            loc = first.get("loc", ())
            field = ".".join(str(x) for x in loc) if isinstance(loc, (list, tuple)) else ""
            detail = f"{field}: {error_msg}" if field else error_msg
            raise ValueError(f"Configuration validation error: {detail}") from e

    def get_service(self, name: str) -> JmxConfig:
        """Return the JMX configuration for ``name``.

        Raises:
            KeyError: If the service is not configured
        """
        if name not in self.services:
            raise KeyError(f"Service {name!r} not configured (configured: {sorted(self.services)})")
        return self.services[name]
