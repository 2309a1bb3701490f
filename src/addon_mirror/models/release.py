"""Release metadata models.

These serialise to the `release.json` document consumed by addon managers:

    {"releases": [{"name": ..., "version": ..., "filename": ...,
                   "nolib": false, "metadata": [{"flavor": ..., "interface": ...}]}]}
"""

from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True)
class FlavourInfo:
    """Game variant supported by a release."""

    flavour: str
    interface_id: int

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary."""
        return {"flavor": self.flavour, "interface": self.interface_id}


@dataclass(frozen=True)
class ReleaseEntry:
    """A single release of an addon."""

    name: str
    version: str
    filename: str
    nolib: bool = False
    metadata: list[FlavourInfo] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary."""
        return {
            "name": self.name,
            "version": self.version,
            "filename": self.filename,
            "nolib": self.nolib,
            "metadata": [m.to_dict() for m in self.metadata],
        }


@dataclass(frozen=True)
class ReleaseDocument:
    """Contents of a `release.json` file."""

    releases: list[ReleaseEntry] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary."""
        return {"releases": [r.to_dict() for r in self.releases]}
