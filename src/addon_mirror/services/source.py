"""Addon sources: where addons and their artifacts come from."""

from abc import ABC, abstractmethod
from pathlib import Path

from ..clients.base import BaseHTTPClient
from ..clients.downloader import ArtifactDownloader
from ..config.constants import TukuiAPI
from ..config.settings import MirrorConfig
from ..exceptions import FetchFailed
from ..models.addon import Addon
from ..utils.logging import get_logger

logger = get_logger("services.source")


class AddonSource(ABC):
    """Capability to list addons and acquire their artifacts."""

    @abstractmethod
    def fetch_addon_list(self) -> list[Addon]:
        """Get the current list of addons.

        Raises:
            FetchFailed: If the list could not be fetched or parsed.
        """

    @abstractmethod
    def download_addon(self, addon: Addon) -> Path:
        """Get a local path to the addon's artifact.

        Raises:
            FetchFailed: If the artifact could not be fetched.
        """


class CatalogClient(BaseHTTPClient):
    """Client for an addon catalog API returning a JSON array of addons."""

    error_class = FetchFailed

    def __init__(self, url: str, user_agent: str = TukuiAPI.USER_AGENT):
        super().__init__()
        self.url = url
        self._headers = {"User-Agent": user_agent}

    def fetch_addons(self) -> list[Addon]:
        """Fetch and parse the addon list."""
        response = self.get(self.url, headers=self._headers)
        if response.status_code != 200:
            raise FetchFailed(
                f"non-200 response fetching addon list ({response.status_code}): "
                f"{response.text}"
            )

        try:
            data = response.json()
        except ValueError as e:
            raise FetchFailed(f"addon list is not valid JSON: {e}") from e

        if not isinstance(data, list):
            raise FetchFailed(f"addon list is not a JSON array: {type(data).__name__}")

        return [Addon.from_dict(entry) for entry in data]


class CatalogAddonSource(AddonSource):
    """Addons listed by a catalog API, artifacts downloaded over HTTP."""

    def __init__(self, config: MirrorConfig):
        """Initialize catalog source.

        Args:
            config: Mirror configuration.
        """
        self.catalog = CatalogClient(config.source_url)
        self.downloader = ArtifactDownloader(
            config.cache_dir, user_agent=TukuiAPI.USER_AGENT
        )

    def fetch_addon_list(self) -> list[Addon]:
        addons = self.catalog.fetch_addons()
        logger.info(f"Fetched {len(addons)} addons from {self.catalog.url}")
        return addons

    def download_addon(self, addon: Addon) -> Path:
        return self.downloader.acquire(addon)

    def close(self) -> None:
        """Close the underlying HTTP sessions."""
        self.catalog.close()
        self.downloader.close()
