"""GitHub API client."""

from dataclasses import dataclass
from pathlib import Path
from typing import Any

from ..config.constants import GitHubAPI
from ..config.settings import GitHubConfig
from ..exceptions import GitHubError
from ..utils.logging import get_logger
from .base import BaseHTTPClient

logger = get_logger("clients.github")


@dataclass
class ReleaseAsset:
    """GitHub release asset information."""

    id: int
    name: str
    content_type: str
    browser_download_url: str = ""


@dataclass
class ReleaseInfo:
    """GitHub release information."""

    id: int
    tag_name: str
    html_url: str = ""

    @classmethod
    def from_response(cls, data: dict[str, Any]) -> "ReleaseInfo":
        """Create from a release API response.

        Raises:
            GitHubError: If the response has no release ID.
        """
        if "id" not in data:
            raise GitHubError(f"Release response has no ID: {data}")
        return cls(
            id=data["id"],
            tag_name=data.get("tag_name", ""),
            html_url=data.get("html_url", ""),
        )


class GitHubClient(BaseHTTPClient):
    """GitHub API client with typed responses.

    Every failure raises `GitHubError`.
    """

    error_class = GitHubError

    def __init__(self, config: GitHubConfig):
        """Initialize GitHub client.

        Args:
            config: GitHub configuration.
        """
        super().__init__(
            timeout=config.timeout,
            max_retries=config.max_retries,
            backoff_factor=config.retry_delay,
        )
        self.config = config
        self._headers = self._build_headers()

    def _build_headers(self) -> dict[str, str]:
        """Build request headers."""
        return {
            "Accept": "application/vnd.github+json",
            "Authorization": f"Bearer {self.config.token}",
            "X-GitHub-Api-Version": self.config.api_version,
        }

    def create_release(
        self,
        owner: str,
        repo: str,
        tag_name: str,
        name: str = "",
        make_latest: bool = True,
    ) -> ReleaseInfo:
        """Create a new release for an existing tag.

        Args:
            owner: Repository owner.
            repo: Repository name.
            tag_name: Tag the release points at.
            name: Release title (defaults to the tag name).
            make_latest: Mark the release as the repository's latest.

        Returns:
            The created release.

        Raises:
            GitHubError: If the release could not be created.
        """
        url = GitHubAPI.releases(owner, repo)
        payload = {
            "tag_name": tag_name,
            "name": name or tag_name,
            "draft": False,
            "prerelease": False,
            "make_latest": "true" if make_latest else "false",
        }

        response = self.post(url, headers=self._headers, json=payload)
        if response.status_code != 201:
            raise GitHubError(
                f"Create release {owner}/{repo}@{tag_name} failed: "
                f"{response.status_code}"
            )

        release = ReleaseInfo.from_response(response.json())
        logger.info(f"Created release {tag_name} with ID {release.id}")
        return release

    def upload_release_asset(
        self,
        owner: str,
        repo: str,
        release_id: int,
        filepath: Path,
        content_type: str,
    ) -> ReleaseAsset:
        """Upload a file as a release asset.

        The asset name and label are the file's base name.

        Args:
            owner: Repository owner.
            repo: Repository name.
            release_id: Release ID.
            filepath: Local file path.
            content_type: MIME type sent as the Content-Type header.

        Returns:
            The uploaded asset.

        Raises:
            GitHubError: If the upload failed.
        """
        filename = filepath.name
        url = GitHubAPI.upload_asset(owner, repo, release_id, filename)
        headers = {**self._headers, "Content-Type": content_type}

        try:
            with open(filepath, "rb") as f:
                response = self.post(url, headers=headers, data=f)
        except OSError as e:
            raise GitHubError(f"Failed opening asset {filepath}: {e}") from e

        if response.status_code != 201:
            raise GitHubError(
                f"Upload asset {filename} failed: {response.status_code}"
            )

        data = response.json()
        logger.info(f"Uploaded asset {filename}")
        return ReleaseAsset(
            id=data.get("id", 0),
            name=data.get("name", filename),
            content_type=data.get("content_type", content_type),
            browser_download_url=data.get("browser_download_url", ""),
        )
