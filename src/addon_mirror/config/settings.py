"""Configuration settings for the addon mirror."""

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Optional

from ..exceptions import ConfigError
from .constants import GitHubAPI, GitRemote, TukuiAPI

TOKEN_ENVVAR = "GITHUB_TOKEN"


@dataclass(frozen=True)
class GitHubConfig:
    """GitHub API configuration."""

    token: str = ""
    organisation: str = GitRemote.DEFAULT_ORGANISATION
    api_version: str = GitHubAPI.DEFAULT_API_VERSION
    # None means block until the server answers
    timeout: Optional[int] = None
    max_retries: int = 0
    retry_delay: float = 1.0


@dataclass(frozen=True)
class MirrorConfig:
    """Main mirror configuration."""

    source_url: str = TukuiAPI.ADDONS
    work_dir: Path = field(default_factory=Path.cwd)
    cache_dir: Path = field(default_factory=lambda: Path("caches"))
    remote_template: str = GitRemote.DEFAULT_TEMPLATE
    github: GitHubConfig = field(default_factory=GitHubConfig)

    def remote_url(self, slug: str) -> str:
        """Get the canonical remote location of an addon's mirror repository."""
        return self.remote_template.format(
            organisation=self.github.organisation, slug=slug
        )

    @classmethod
    def from_args(cls, args: Any) -> "MirrorConfig":
        """Create configuration from argparse namespace.

        Args:
            args: Parsed command line arguments.

        Returns:
            MirrorConfig instance.

        Raises:
            ConfigError: If no GitHub token was given or found in the environment.
        """
        return cls(
            source_url=args.source_url,
            work_dir=Path(args.work_dir).resolve(),
            cache_dir=Path(args.cache_dir).resolve(),
            remote_template=args.remote_template,
            github=GitHubConfig(
                token=resolve_token(args.github_token),
                organisation=args.organisation,
            ),
        )


def resolve_token(token: Optional[str] = None) -> str:
    """Get the GitHub token, falling back to the GITHUB_TOKEN envvar.

    Raises:
        ConfigError: If neither is set.
    """
    token = token or os.environ.get(TOKEN_ENVVAR)
    if not token:
        raise ConfigError(f"envvar {TOKEN_ENVVAR} not set.")
    return token
