"""Derive the management property set from a resolved JmxSpec.

Each rule covers one concern and writes its own keys, so rules can be evaluated and
tested independently; the result is their merge, followed by user overrides.
"""

from collections.abc import Callable
from dataclasses import dataclass, field

from .JmxSpec import STORE_PASSWORD, JmxSpec

PREFIX = "com.sun.management.jmxremote"
SSL_PREFIX = "javax.net.ssl."
TLS_PROTOCOLS = "TLSv1.2,TLSv1.3"


def _bool(value: bool) -> str:
    return "true" if value else "false"


@dataclass(frozen=True)
class JmxProperties:
    """Full management mapping plus the subset that goes into ssl.properties."""

    management: dict[str, str] = field(default_factory=dict)

    @property
    def ssl(self) -> dict[str, str]:
        return {key: value for key, value in self.management.items() if key.startswith(SSL_PREFIX)}


def base_rule(spec: JmxSpec) -> dict[str, str]:
    props = {PREFIX: "true"}
    if spec.port is not None:
        props[f"{PREFIX}.port"] = str(spec.port)
    if spec.rmi_port is not None:
        props[f"{PREFIX}.rmi.port"] = str(spec.rmi_port)
    if spec.rmi_hostname is not None:
        props["java.rmi.server.hostname"] = spec.rmi_hostname
    props[f"{PREFIX}.local.only"] = _bool(spec.local_only)
    return props


def auth_rule(spec: JmxSpec) -> dict[str, str]:
    if not spec.users:
        return {f"{PREFIX}.authenticate": "false"}
    return {
        f"{PREFIX}.authenticate": "true",
        f"{PREFIX}.password.file": str(spec.password_file),
    }


def access_rule(spec: JmxSpec) -> dict[str, str]:
    if not spec.roles:
        return {}
    return {f"{PREFIX}.access.file": str(spec.access_file)}


def ssl_rule(spec: JmxSpec) -> dict[str, str]:
    if not spec.has_keypair:
        return {f"{PREFIX}.ssl": "false", f"{PREFIX}.registry.ssl": "false"}
    return {
        f"{PREFIX}.ssl": "true",
        f"{PREFIX}.registry.ssl": "true",
        f"{PREFIX}.ssl.enabled.protocols": TLS_PROTOCOLS,
        f"{SSL_PREFIX}keyStore": str(spec.keystore_file),
        f"{SSL_PREFIX}keyStorePassword": STORE_PASSWORD,
    }


def client_auth_rule(spec: JmxSpec) -> dict[str, str]:
    if not spec.has_client_certs:
        return {f"{PREFIX}.ssl.need.client.auth": "false"}
    return {
        f"{PREFIX}.ssl.need.client.auth": "true",
        f"{SSL_PREFIX}trustStore": str(spec.truststore_file),
        f"{SSL_PREFIX}trustStorePassword": STORE_PASSWORD,
    }


def ssl_config_rule(spec: JmxSpec) -> dict[str, str]:
    if not (spec.has_keypair or spec.has_client_certs):
        return {}
    return {f"{PREFIX}.ssl.config.file": str(spec.ssl_file)}


RULES: tuple[Callable[[JmxSpec], dict[str, str]], ...] = (
    base_rule,
    auth_rule,
    access_rule,
    ssl_rule,
    client_auth_rule,
    ssl_config_rule,
)


def derive_properties(spec: JmxSpec) -> JmxProperties:
    """Evaluate every rule for ``spec`` and merge overrides last.

    Returns an empty mapping for absent specs: nothing is rendered when tearing down.
    """
    if not spec.present:
        return JmxProperties()
    management: dict[str, str] = {}
    for rule in RULES:
        management.update(rule(spec))
    management.update(spec.properties)
    return JmxProperties(management=management)
