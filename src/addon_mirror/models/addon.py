"""Addon data models."""

from dataclasses import dataclass, field
from typing import Any

from ..exceptions import FetchFailed

REQUIRED_FIELDS = ("slug", "name", "url", "version")


@dataclass(frozen=True)
class Addon:
    """Addon descriptor as listed by the addon catalog."""

    slug: str  # "elvui"
    name: str  # "ElvUI"
    url: str
    version: str
    patch_list: tuple[str, ...] = field(default_factory=tuple)

    @property
    def artifact_filename(self) -> str:
        """Deterministic artifact file name, e.g. "elvui--13.33.zip"."""
        return f"{self.slug}--{self.version}.zip"

    def to_dict(self) -> dict[str, Any]:
        """Convert to catalog dictionary."""
        return {
            "slug": self.slug,
            "name": self.name,
            "url": self.url,
            "version": self.version,
            "patch": list(self.patch_list),
        }

    @classmethod
    def from_dict(cls, data: Any) -> "Addon":
        """Create Addon from a catalog entry.

        Unknown keys are ignored. A missing or null "patch" means no
        supported game versions.

        Raises:
            FetchFailed: If the entry is not an object or lacks a field.
        """
        if not isinstance(data, dict):
            raise FetchFailed(f"malformed addon entry: {data!r}")

        missing = [k for k in REQUIRED_FIELDS if not isinstance(data.get(k), str)]
        if missing:
            raise FetchFailed(
                f"malformed addon entry, missing {', '.join(missing)}: {data!r}"
            )

        patch_list = data.get("patch") or []
        if not isinstance(patch_list, list) or not all(
            isinstance(p, str) for p in patch_list
        ):
            raise FetchFailed(f"malformed patch list for {data['slug']}: {patch_list!r}")

        return cls(
            slug=data["slug"],
            name=data["name"],
            url=data["url"],
            version=data["version"],
            patch_list=tuple(patch_list),
        )
