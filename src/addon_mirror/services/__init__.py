"""Business services module."""

from .metadata import render_release, write_release_json
from .mirror import MirrorService
from .publisher import PublisherService
from .repository import MirrorRepository
from .source import AddonSource, CatalogAddonSource

__all__ = [
    "AddonSource",
    "CatalogAddonSource",
    "MirrorRepository",
    "MirrorService",
    "PublisherService",
    "render_release",
    "write_release_json",
]
