"""Plan types - what convergence should make true on the host."""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Literal

from cryptography import x509

from .derive_properties import JmxProperties
from .JmxSpec import JmxSpec

ArtifactKind = Literal["directory", "file", "keystore", "truststore"]


@dataclass(frozen=True)
class Artifact:
    """One managed path and its desired state."""

    name: str
    path: Path
    kind: ArtifactKind
    ensure: str
    owner: str
    mode: int
    content: str | None = None
    certificates: tuple[x509.Certificate, ...] = ()
    private_key: Any = None

    def describe(self) -> dict[str, Any]:
        """Summary without secrets, for plan output."""
        return {
            "name": self.name,
            "path": str(self.path),
            "kind": self.kind,
            "ensure": self.ensure,
            "owner": self.owner,
            "mode": f"{self.mode:04o}",
        }


@dataclass(frozen=True)
class EnvFragment:
    """One ``-D`` argument inside the Java arguments variable."""

    key: str
    value: str | None
    ensure: str

    @property
    def text(self) -> str:
        return self.key if self.value is None else f"{self.key}={self.value}"

    def describe(self) -> dict[str, Any]:
        return {"key": self.key, "value": self.value if self.value is not None else "", "ensure": self.ensure}


@dataclass(frozen=True)
class JmxPlan:
    spec: JmxSpec
    properties: JmxProperties
    artifacts: tuple[Artifact, ...] = field(default_factory=tuple)
    fragments: tuple[EnvFragment, ...] = field(default_factory=tuple)
