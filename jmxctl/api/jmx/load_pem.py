"""Load PEM certificates and private keys given inline or as a file path."""

from pathlib import Path

from cryptography import x509
from cryptography.hazmat.primitives import serialization


def read_pem(value: str) -> bytes:
    """Return PEM bytes from inline PEM text or from the file ``value`` points to."""
    if value.lstrip().startswith("-----BEGIN"):
        return value.encode()
    path = Path(value).expanduser()
    if not path.is_file():
        raise ValueError(f"not PEM data and no such file: {value!r}")
    return path.read_bytes()


def load_certificate(value: str) -> x509.Certificate:
    try:
        return x509.load_pem_x509_certificate(read_pem(value))
    except ValueError as e:
        raise ValueError(f"malformed PEM certificate: {e}") from e


def load_private_key(value: str):
    try:
        return serialization.load_pem_private_key(read_pem(value), password=None)
    except (ValueError, TypeError) as e:
        # TypeError: the key is encrypted; the JVM keystore import needs it in the clear
        raise ValueError(f"malformed or encrypted PEM private key: {e}") from e


def public_key_der(key) -> bytes:
    return key.public_bytes(serialization.Encoding.DER, serialization.PublicFormat.SubjectPublicKeyInfo)
