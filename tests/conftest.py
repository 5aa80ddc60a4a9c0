"""Shared pytest configuration and fixtures for all tests."""

import datetime
import json
import os
import pwd
from pathlib import Path

import pytest
from cryptography import x509
from cryptography.hazmat.primitives import hashes, serialization
from cryptography.hazmat.primitives.asymmetric import ec
from cryptography.x509.oid import NameOID


def pytest_configure(config):
    config.addinivalue_line("markers", "unit: fast tests of a single module")
    config.addinivalue_line("markers", "integration: tests that drive the CLI end to end")


def pytest_collection_modifyitems(config, items):
    """Automatically apply markers based on test file location."""
    for item in items:
        path_str = str(item.fspath)
        if "/unit/" in path_str:
            item.add_marker(pytest.mark.unit)
        else:
            item.add_marker(pytest.mark.integration)


# =============================================================================
# Key Material Helpers
# =============================================================================


def make_pem_pair(common_name: str = "jmx.test") -> tuple[str, str]:
    """Generate a self-signed certificate and its private key as PEM strings."""
    key = ec.generate_private_key(ec.SECP256R1())
    name = x509.Name([x509.NameAttribute(NameOID.COMMON_NAME, common_name)])
    now = datetime.datetime.now(datetime.timezone.utc)
    cert = (
        x509.CertificateBuilder()
        .subject_name(name)
        .issuer_name(name)
        .public_key(key.public_key())
        .serial_number(x509.random_serial_number())
        .not_valid_before(now - datetime.timedelta(days=1))
        .not_valid_after(now + datetime.timedelta(days=30))
        .sign(key, hashes.SHA256())
    )
    cert_pem = cert.public_bytes(serialization.Encoding.PEM).decode()
    key_pem = key.private_bytes(
        serialization.Encoding.PEM,
        serialization.PrivateFormat.PKCS8,
        serialization.NoEncryption(),
    ).decode()
    return cert_pem, key_pem


def current_user() -> str:
    return pwd.getpwuid(os.getuid()).pw_name


# =============================================================================
# Configuration Helpers
# =============================================================================


def minimal_service_dict(root: Path, **overrides) -> dict:
    """JMX options for a 'tomcat' service rooted under ``root`` and owned by the test user."""
    service = {
        "env_file": str(root / "sysconfig" / "tomcat"),
        "config_dir": str(root / "etc" / "tomcat"),
        "service_user": current_user(),
    }
    service.update(overrides)
    return service


def minimal_config_dict(root: Path, **service_overrides) -> dict:
    """Minimal valid jmxctl configuration dict with the no-op restart backend."""
    return {
        "log": {"level": "DEBUG"},
        "service": {"type": "noop", "data": {}},
        "services": {"tomcat": minimal_service_dict(root, **service_overrides)},
    }


def write_config(home: Path, config: dict) -> Path:
    home.mkdir(parents=True, exist_ok=True)
    path = home / "config.json"
    path.write_text(json.dumps(config, indent=2), encoding="utf-8")
    return path


def run_cmd(cmd_func, *args, **kwargs):
    """Execute a cmd function and return the result with progress_callback executed."""
    result = cmd_func(*args, **kwargs)
    list(result.progress_callback(result))
    return result


class FakeKeystore:
    """Records keystore calls and writes a fingerprint file in place of a real store."""

    def __init__(self):
        self.keypair_calls: list[tuple] = []
        self.trust_calls: list[tuple] = []

    def import_keypair(self, path, password, certificate, private_key, alias="jmx"):
        self.keypair_calls.append((path, password, certificate, private_key))
        data = certificate.fingerprint(hashes.SHA256())
        if path.is_file() and path.read_bytes() == data:
            return False
        path.write_bytes(data)
        return True

    def sync_trusted_certificates(self, path, password, certificates):
        self.trust_calls.append((path, password, list(certificates)))
        data = b"".join(sorted(c.fingerprint(hashes.SHA256()) for c in certificates))
        if path.is_file() and path.read_bytes() == data:
            return False
        path.write_bytes(data)
        return True


# =============================================================================
# Fixtures
# =============================================================================


@pytest.fixture
def pem_pair() -> tuple[str, str]:
    return make_pem_pair()


@pytest.fixture
def client_pem() -> str:
    return make_pem_pair("client.test")[0]


@pytest.fixture
def fake_keystore() -> FakeKeystore:
    return FakeKeystore()


@pytest.fixture
def jmxctl_home(tmp_path: Path, monkeypatch) -> Path:
    """Set up JMXCTL_HOME with a minimal config file.

    Returns:
        Path to the jmxctl home directory; managed files live under ``tmp_path``
    """
    home = tmp_path / ".jmxctl"
    monkeypatch.setenv("JMXCTL_HOME", str(home))
    write_config(home, minimal_config_dict(tmp_path))
    return home
