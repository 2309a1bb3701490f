"""Data models module."""

from .addon import Addon
from .release import FlavourInfo, ReleaseDocument, ReleaseEntry

__all__ = [
    "Addon",
    "FlavourInfo",
    "ReleaseDocument",
    "ReleaseEntry",
]
