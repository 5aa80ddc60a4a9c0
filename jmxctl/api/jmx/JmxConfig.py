"""Per-service JMX configuration with Pydantic validation."""

import re
from pathlib import Path
from typing import Any, Literal

from cryptography import x509
from pydantic import BaseModel, ConfigDict, Field, PrivateAttr, field_validator, model_validator

from .JmxSpec import JmxSpec
from .KeyPair import KeyPair
from .load_pem import load_certificate

SERVICE_NAME = re.compile(r"^[A-Za-z0-9_.@-]+$")
_SHELL_VARIABLE = re.compile(r"^[A-Za-z_][A-Za-z0-9_]*$")
_ACCESS_LEVEL = re.compile(r"^(readonly|readwrite)(\s+\S.*)?$")


def validate_service_name(name: str) -> str:
    if not SERVICE_NAME.match(name):
        raise ValueError(f"invalid service name {name!r} (letters, digits, '_', '.', '@', '-')")
    return name


def _no_whitespace(value: str, what: str) -> str:
    if not value or any(c.isspace() for c in value):
        raise ValueError(f"{what} must be non-empty and contain no whitespace, got {value!r}")
    return value


def _shell_word(value: str, what: str) -> str:
    _no_whitespace(value, what)
    if '"' in value or "'" in value:
        raise ValueError(f"{what} must not contain quotes, got {value!r}")
    return value


def _java_string(value: str | int | bool) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


class JmxConfig(BaseModel):
    """JMX options for one Java service; unset paths default from the service name."""

    model_config = ConfigDict(extra="forbid")

    ensure: Literal["present", "absent"] = Field("present", description="Whether JMX should be configured")
    env_file: Path | None = Field(None, description="Environment file, default /etc/sysconfig/<service>")
    java_args_var: str = Field("JAVA_ARGS", description="Variable holding the Java arguments")
    config_dir: Path | None = Field(None, description="Directory for generated files, default /etc/<service>")
    service_user: str | None = Field(None, description="Owner of generated files, default <service>")
    unit: str | None = Field(None, description="Name passed to the restart backend, default <service>")
    port: int | None = Field(None, ge=0, le=65535, description="JMX registry port")
    rmi_hostname: str | None = Field(None, description="Hostname advertised in RMI stubs")
    rmi_port: int | None = Field(None, ge=0, le=65535, description="RMI server port")
    local_only: bool = Field(True, description="Only accept connections from the local host")
    properties: dict[str, str | int | bool] = Field(default_factory=dict, description="Property overrides")
    users: dict[str, str] = Field(default_factory=dict, description="Username to password")
    roles: dict[str, str] = Field(default_factory=dict, description="Principal to access level")
    keypair: KeyPair | None = Field(None, description="TLS identity; empty disables SSL")
    client_certs: list[str] = Field(default_factory=list, description="Trusted client certificates")

    _client_certificates: list[x509.Certificate] = PrivateAttr(default_factory=list)

    @model_validator(mode="before")
    @classmethod
    def empty_keypair_is_none(cls, values: Any) -> Any:
        if isinstance(values, dict) and values.get("keypair") == {}:
            values = dict(values)
            values["keypair"] = None
        return values

    @field_validator("java_args_var")
    @classmethod
    def validate_java_args_var(cls, v: str) -> str:
        if not _SHELL_VARIABLE.match(v):
            raise ValueError(f"java_args_var must be a shell variable name, got {v!r}")
        return v

    @field_validator("rmi_hostname")
    @classmethod
    def validate_rmi_hostname(cls, v: str | None) -> str | None:
        if v is None:
            return v
        return _shell_word(v, "rmi_hostname")

    @field_validator("config_dir")
    @classmethod
    def validate_config_dir(cls, v: Path | None) -> Path | None:
        # Becomes part of a -D argument inside the env file variable
        if v is not None:
            _shell_word(str(v), "config_dir")
        return v

    @field_validator("service_user", "unit")
    @classmethod
    def validate_names(cls, v: str | None) -> str | None:
        if v is not None:
            _no_whitespace(v, "name")
        return v

    @field_validator("properties")
    @classmethod
    def validate_properties(cls, v: dict[str, str | int | bool]) -> dict[str, str | int | bool]:
        for key in v:
            _no_whitespace(key, "property name")
        return v

    @field_validator("users")
    @classmethod
    def validate_users(cls, v: dict[str, str]) -> dict[str, str]:
        for user, password in v.items():
            _no_whitespace(user, "user name")
            _no_whitespace(password, f"password for {user!r}")
        return v

    @field_validator("roles")
    @classmethod
    def validate_roles(cls, v: dict[str, str]) -> dict[str, str]:
        for principal, level in v.items():
            _no_whitespace(principal, "role principal")
            if not _ACCESS_LEVEL.match(level):
                raise ValueError(f"access level for {principal!r} must start with readonly or readwrite, got {level!r}")
        return v

    @model_validator(mode="after")
    def parse_client_certs(self) -> "JmxConfig":
        certificates = []
        for index, value in enumerate(self.client_certs):
            try:
                certificates.append(load_certificate(value))
            except ValueError as e:
                raise ValueError(f"client_certs[{index}]: {e}") from e
        self._client_certificates = certificates
        return self

    def resolve(self, service: str) -> JmxSpec:
        """Resolve defaults for ``service`` and return the target state.

        Raises:
            ValueError: If the service name or a resolved path is invalid
        """
        validate_service_name(service)
        env_file = (self.env_file or Path("/etc/sysconfig") / service).expanduser()
        config_dir = (self.config_dir or Path("/etc") / service).expanduser()
        for label, path in (("env_file", env_file), ("config_dir", config_dir)):
            if not path.is_absolute():
                raise ValueError(f"{label} must be an absolute path, got {str(path)!r}")
        _shell_word(str(config_dir), "config_dir")

        return JmxSpec(
            service=service,
            ensure=self.ensure,
            env_file=env_file,
            java_args_var=self.java_args_var,
            config_dir=config_dir,
            service_user=self.service_user or service,
            unit=self.unit or service,
            port=self.port,
            rmi_hostname=self.rmi_hostname,
            rmi_port=self.rmi_port,
            local_only=self.local_only,
            properties={key: _java_string(value) for key, value in self.properties.items()},
            users=dict(self.users),
            roles=dict(self.roles),
            certificate=self.keypair.certificate if self.keypair else None,
            private_key=self.keypair.private_key if self.keypair else None,
            client_certificates=tuple(self._client_certificates),
        )
