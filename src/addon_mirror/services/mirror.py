"""Mirror service: sync catalog addons into repositories and releases."""

from contextlib import contextmanager
from pathlib import Path
from typing import Callable, Iterator, Optional

from ..config.settings import MirrorConfig
from ..exceptions import MirrorError
from ..models.addon import Addon
from ..utils.logging import get_logger
from .metadata import render_release
from .publisher import PublisherService
from .repository import MirrorRepository
from .source import AddonSource

logger = get_logger("services.mirror")

RepositoryFactory = Callable[[Addon], MirrorRepository]


@contextmanager
def doing(operation: str) -> Iterator[None]:
    """Attach `operation` to any mirror error raised inside the block."""
    try:
        yield
    except MirrorError as e:
        if e.operation is None:
            e.operation = operation
        raise


class MirrorService:
    """Drives every catalog addon through download, tag and release.

    Addons are processed one at a time in catalog order. The first error
    aborts the whole run; re-running is always safe because an addon whose
    repository is already tagged with its version is skipped.
    """

    def __init__(
        self,
        config: MirrorConfig,
        source: AddonSource,
        publisher: PublisherService,
        repository_factory: Optional[RepositoryFactory] = None,
    ):
        """Initialize mirror service.

        Args:
            config: Mirror configuration.
            source: Where addons and their artifacts come from.
            publisher: Release publisher.
            repository_factory: Builds the repository gateway for an addon.
        """
        self.config = config
        self.source = source
        self.publisher = publisher
        self.repository_factory = repository_factory or self._make_repository

    def _make_repository(self, addon: Addon) -> MirrorRepository:
        return MirrorRepository(
            addon.slug, self.config.remote_url(addon.slug), self.config.work_dir
        )

    def mirror(self) -> dict[str, int]:
        """Mirror every addon from the source.

        Returns:
            Statistics about the run.

        Raises:
            MirrorError: On the first failure, with the failing operation set.
        """
        stats = {"checked": 0, "updated": 0, "skipped": 0}

        with doing("fetching addon list"):
            addons = self.source.fetch_addon_list()

        for addon in addons:
            stats["checked"] += 1
            if self.mirror_addon(addon):
                stats["updated"] += 1
            else:
                stats["skipped"] += 1

        logger.info(f"Mirror stats: {stats}")
        return stats

    def mirror_addon(self, addon: Addon) -> bool:
        """Mirror a single addon.

        Returns:
            True if a new release was published, False if already up to date.
        """
        repo = self.repository_factory(addon)

        with doing(f"resetting repository for {addon.slug}"):
            repo.reset()
        with doing(f"reading current version of {addon.slug}"):
            current_version = repo.current_version()

        latest_version = addon.version
        if current_version == latest_version:
            logger.info(f"{current_version} == {latest_version}, skipping")
            return False

        logger.info(
            f"update detected for {addon.name}: "
            f"'{current_version}' => '{latest_version}'"
        )

        with doing(f"downloading {addon.slug} {latest_version}"):
            artifact_path = Path(self.source.download_addon(addon))

        with doing(f"rendering release.json for {addon.slug}"):
            document = render_release(addon, artifact_path.name)
            release_json_path = repo.write_release(document)

        # The tag must be on the remote before a release can point at it.
        with doing(f"tagging {addon.slug} {latest_version}"):
            repo.publish(latest_version)

        with doing(f"releasing {addon.slug} {latest_version}"):
            self.publisher.publish(addon, [artifact_path, release_json_path])

        return True
