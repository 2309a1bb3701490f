"""Configuration module."""

from .constants import ContentTypes, Flavours, GitHubAPI, GitRemote, TukuiAPI
from .settings import GitHubConfig, MirrorConfig

__all__ = [
    "ContentTypes",
    "Flavours",
    "GitHubAPI",
    "GitRemote",
    "TukuiAPI",
    "GitHubConfig",
    "MirrorConfig",
]
