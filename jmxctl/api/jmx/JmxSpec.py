"""Resolved JMX target state for one service."""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from cryptography import x509

# Fixed store password for jmx.ks/jmx.ts; both stores are 0600 and owned by the service user.
STORE_PASSWORD = "changeit"

MANAGEMENT_FILE = "management.properties"
PASSWORD_FILE = "jmxremote.password"
ACCESS_FILE = "jmxremote.access"
SSL_FILE = "ssl.properties"
KEYSTORE_FILE = "jmx.ks"
TRUSTSTORE_FILE = "jmx.ts"


@dataclass(frozen=True)
class JmxSpec:
    """Every default resolved; built by ``JmxConfig.resolve`` on each run, never persisted."""

    service: str
    ensure: str
    env_file: Path
    java_args_var: str
    config_dir: Path
    service_user: str
    unit: str
    port: int | None = None
    rmi_hostname: str | None = None
    rmi_port: int | None = None
    local_only: bool = True
    properties: dict[str, str] = field(default_factory=dict)
    users: dict[str, str] = field(default_factory=dict)
    roles: dict[str, str] = field(default_factory=dict)
    certificate: x509.Certificate | None = None
    private_key: Any = None
    client_certificates: tuple[x509.Certificate, ...] = ()

    @property
    def present(self) -> bool:
        return self.ensure == "present"

    @property
    def has_keypair(self) -> bool:
        return self.certificate is not None

    @property
    def has_client_certs(self) -> bool:
        return len(self.client_certificates) > 0

    @property
    def management_file(self) -> Path:
        return self.config_dir / MANAGEMENT_FILE

    @property
    def password_file(self) -> Path:
        return self.config_dir / PASSWORD_FILE

    @property
    def access_file(self) -> Path:
        return self.config_dir / ACCESS_FILE

    @property
    def ssl_file(self) -> Path:
        return self.config_dir / SSL_FILE

    @property
    def keystore_file(self) -> Path:
        return self.config_dir / KEYSTORE_FILE

    @property
    def truststore_file(self) -> Path:
        return self.config_dir / TRUSTSTORE_FILE
