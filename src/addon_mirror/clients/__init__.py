"""HTTP clients module."""

from .base import BaseHTTPClient
from .downloader import ArtifactDownloader
from .github import GitHubClient, ReleaseAsset, ReleaseInfo

__all__ = [
    "ArtifactDownloader",
    "BaseHTTPClient",
    "GitHubClient",
    "ReleaseAsset",
    "ReleaseInfo",
]
