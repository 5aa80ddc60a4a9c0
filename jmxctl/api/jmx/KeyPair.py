"""Certificate/private key pair for the JMX connector's TLS identity."""

from typing import Any

from cryptography import x509
from pydantic import BaseModel, ConfigDict, Field, PrivateAttr, model_validator

from .load_pem import load_certificate, load_private_key, public_key_der


class KeyPair(BaseModel):
    """PEM certificate and matching private key (inline PEM or file paths)."""

    model_config = ConfigDict(extra="forbid")

    cert: str | None = Field(None, description="PEM certificate or path to it")
    key: str | None = Field(None, description="PEM private key or path to it")

    _certificate: x509.Certificate | None = PrivateAttr(default=None)
    _private_key: Any = PrivateAttr(default=None)

    @model_validator(mode="after")
    def validate_material(self) -> "KeyPair":
        missing = [name for name in ("cert", "key") if not getattr(self, name)]
        if missing:
            raise ValueError(f"keypair requires both 'cert' and 'key', missing: {', '.join(missing)}")
        certificate = load_certificate(self.cert)
        private_key = load_private_key(self.key)
        if public_key_der(certificate.public_key()) != public_key_der(private_key.public_key()):
            raise ValueError("keypair private key does not match the certificate")
        self._certificate = certificate
        self._private_key = private_key
        return self

    @property
    def certificate(self) -> x509.Certificate:
        return self._certificate

    @property
    def private_key(self):
        return self._private_key
