"""Publisher service for releasing mirrored addons on GitHub."""

from pathlib import Path
from typing import Sequence

from ..clients.github import GitHubClient, ReleaseInfo
from ..config.constants import ContentTypes
from ..config.settings import GitHubConfig
from ..exceptions import UnknownAssetType
from ..models.addon import Addon
from ..utils.logging import get_logger

logger = get_logger("services.publisher")


def guess_media_type(path: Path) -> str:
    """Get the content type of an asset from its file extension.

    Raises:
        UnknownAssetType: If the extension is not a known asset type.
    """
    content_type = ContentTypes.BY_EXTENSION.get(path.suffix.lower())
    if content_type is None:
        raise UnknownAssetType(f"failed to guess mime for given path: {path}")
    return content_type


class PublisherService:
    """Service for publishing addon releases to GitHub."""

    def __init__(self, github_client: GitHubClient, config: GitHubConfig):
        """Initialize publisher service.

        Args:
            github_client: GitHub API client.
            config: GitHub configuration.
        """
        self.github = github_client
        self.config = config

    def publish(self, addon: Addon, assets: Sequence[Path]) -> ReleaseInfo:
        """Create the latest release for an addon's version and upload assets.

        Assets are uploaded in the given order. Content types are resolved
        before anything is sent, so an unknown asset type creates nothing.
        A failed upload leaves the release in place with the assets
        uploaded so far.

        Args:
            addon: Addon being released; its version is the release tag.
            assets: Local files to attach.

        Returns:
            The created release.

        Raises:
            UnknownAssetType: If an asset has an unknown extension.
            GitHubError: If release creation or an upload fails.
        """
        typed_assets = [(path, guess_media_type(path)) for path in assets]

        owner = self.config.organisation
        logger.info(f"Creating release {owner}/{addon.slug}@{addon.version}...")
        release = self.github.create_release(
            owner,
            addon.slug,
            tag_name=addon.version,
            name=addon.name,
            make_latest=True,
        )

        for path, content_type in typed_assets:
            logger.info(f"Uploading {path.name}...")
            self.github.upload_release_asset(
                owner=owner,
                repo=addon.slug,
                release_id=release.id,
                filepath=path,
                content_type=content_type,
            )

        logger.info(f"Published {addon.slug} {addon.version}")
        return release
