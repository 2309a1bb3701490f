"""Mirror repository gateway.

Each addon has a git repository whose most recent tag is the last
mirrored version. Every run starts from a fresh clone so no stale local
state (errant tags, dirty working copy) can leak into a release.
"""

import shutil
import subprocess
from pathlib import Path
from typing import Optional

from ..config.constants import RELEASE_JSON
from ..exceptions import RepoPublishFailed, RepoStateError, RepoUnavailable
from ..models.release import ReleaseDocument
from ..utils.logging import get_logger
from .metadata import write_release_json

logger = get_logger("services.repository")

# `git describe` stderr when the repository has no tags at all
NO_TAG_MESSAGES = (
    "No names found, cannot describe anything",
    "No tags can describe",
)


class MirrorRepository:
    """Local working copy of one addon's mirror repository."""

    def __init__(self, slug: str, remote_url: str, work_dir: Path):
        """Initialize repository gateway.

        Args:
            slug: Addon slug, also the directory name of the working copy.
            remote_url: Canonical remote location to clone from.
            work_dir: Directory the working copy lives in.
        """
        self.slug = slug
        self.remote_url = remote_url
        self.work_dir = work_dir
        self.path = work_dir / slug

    def _run(
        self, args: list[str], cwd: Optional[Path] = None
    ) -> subprocess.CompletedProcess:
        """Run a git command, returning the completed process."""
        cwd = cwd or self.path
        logger.debug(f"executing git {' '.join(args)} in {cwd}")
        return subprocess.run(
            ["git", *args],
            cwd=str(cwd),
            capture_output=True,
            text=True,
        )

    def reset(self) -> None:
        """Delete any local copy and clone fresh from the remote.

        Raises:
            RepoUnavailable: If the clone fails.
        """
        try:
            if self.path.exists():
                shutil.rmtree(self.path)
            self.work_dir.mkdir(parents=True, exist_ok=True)
            result = self._run(
                ["clone", self.remote_url, str(self.path)], cwd=self.work_dir
            )
        except OSError as e:
            raise RepoUnavailable(f"failed to clone {self.remote_url}: {e}") from e

        if result.returncode != 0:
            shutil.rmtree(self.path, ignore_errors=True)
            raise RepoUnavailable(
                f"failed to clone {self.remote_url}: {result.stderr.strip()}"
            )

    def current_version(self) -> str:
        """Get the most recent tag reachable from the tip.

        Returns:
            The tag, or an empty string if the repository has no tags.

        Raises:
            RepoStateError: If the tag could not be read.
        """
        try:
            result = self._run(["describe", "--tags", "--abbrev=0"])
        except OSError as e:
            raise RepoStateError(f"failed to fetch latest tag: {e}") from e

        if result.returncode != 0:
            if any(msg in result.stderr for msg in NO_TAG_MESSAGES):
                return ""
            raise RepoStateError(
                f"failed to fetch latest tag: {result.stderr.strip()}"
            )
        return result.stdout.strip()

    def write_release(self, document: ReleaseDocument) -> Path:
        """Write the release metadata into the working copy.

        Raises:
            RepoPublishFailed: If the file could not be written.
        """
        try:
            return write_release_json(document, self.path)
        except OSError as e:
            raise RepoPublishFailed(f"failed writing {RELEASE_JSON}: {e}") from e

    def publish(self, version: str) -> None:
        """Commit, tag `version`, push the branch and then the tags.

        The commit is allowed to be empty. Stops at the first failing step,
        so a failed tag push can leave the commit pushed without its tag.

        Raises:
            RepoPublishFailed: If `version` is not a usable tag name or any
                step fails.
        """
        if not version or version.startswith("-"):
            raise RepoPublishFailed(f"refusing to tag invalid version: {version!r}")

        command_list = [
            ["add", RELEASE_JSON],
            ["commit", "-m", version, "--allow-empty"],
            ["tag", "--", version],
            ["push"],
            ["push", "--tags"],
        ]
        for args in command_list:
            try:
                result = self._run(args)
            except OSError as e:
                raise RepoPublishFailed(f"command 'git {args[0]}' failed: {e}") from e
            if result.returncode != 0:
                raise RepoPublishFailed(
                    f"command 'git {' '.join(args)}' failed: {result.stderr.strip()}"
                )
        logger.info(f"Pushed {self.slug} tag {version}")
