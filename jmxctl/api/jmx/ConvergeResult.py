"""Outcome of one convergence run."""

from dataclasses import dataclass, field
from typing import Any


@dataclass
class ConvergeResult:
    service: str
    ensure: str
    changed: list[str] = field(default_factory=list)
    restarted: bool = False

    def to_dict(self) -> dict[str, Any]:
        return {
            "name": self.service,
            "ensure": self.ensure,
            "changed": list(self.changed),
            "restarted": self.restarted,
        }
