"""Addon artifact downloader."""

from pathlib import Path
from typing import Optional

from ..exceptions import FetchFailed
from ..models.addon import Addon
from ..utils.logging import get_logger
from .base import BaseHTTPClient

logger = get_logger("clients.downloader")


class ArtifactDownloader(BaseHTTPClient):
    """Addon artifact downloader with caching by (slug, version)."""

    error_class = FetchFailed

    def __init__(
        self,
        cache_dir: Path,
        timeout: Optional[int] = None,
        max_retries: int = 0,
        user_agent: Optional[str] = None,
    ):
        """Initialize artifact downloader.

        Args:
            cache_dir: Directory artifacts are downloaded into.
            timeout: Download timeout in seconds.
            max_retries: Maximum download retries.
            user_agent: Optional User-Agent header value.
        """
        super().__init__(
            timeout=timeout,
            max_retries=max_retries,
        )
        self.cache_dir = cache_dir
        self._headers = {"User-Agent": user_agent} if user_agent else {}

    def cache_path(self, addon: Addon) -> Path:
        """Get the deterministic cache path of an addon's artifact."""
        return self.cache_dir / addon.artifact_filename

    def acquire(self, addon: Addon) -> Path:
        """Get the addon's artifact, downloading it only if not cached.

        Args:
            addon: Addon to fetch the artifact of.

        Returns:
            Path to the artifact.

        Raises:
            FetchFailed: If the download fails.
        """
        path = self.cache_path(addon)
        if path.exists():
            logger.debug(f"Using cached artifact: {path.name}")
            return path

        logger.info(f"Downloading: {addon.url}")
        return self._download_file(addon.url, path)

    def _download_file(self, url: str, path: Path) -> Path:
        """Download file from URL.

        The body is streamed to a `.part` file that is renamed into place
        once complete, so `path` only ever exists fully written.

        Args:
            url: Download URL.
            path: Target path.

        Returns:
            Path to downloaded file.

        Raises:
            FetchFailed: If download fails.
        """
        part_path = path.with_name(path.name + ".part")
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            with self.get(url, headers=self._headers, stream=True) as response:
                if response.status_code != 200:
                    raise FetchFailed(
                        f"non-200 response downloading {url}: "
                        f"{response.status_code}"
                    )

                with open(part_path, "wb") as f:
                    for chunk in response.iter_content(chunk_size=8192):
                        if chunk:
                            f.write(chunk)

            part_path.replace(path)
        except FetchFailed:
            self._remove_partial(part_path)
            raise
        except Exception as e:
            self._remove_partial(part_path)
            raise FetchFailed(f"Download failed: {url}: {e}") from e

        logger.info(f"Wrote: {path}")
        return path

    @staticmethod
    def _remove_partial(part_path: Path) -> None:
        """Clean up a partially written download."""
        if part_path.exists():
            part_path.unlink()
