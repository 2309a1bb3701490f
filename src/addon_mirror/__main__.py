"""Command-line interface for the addon mirror."""

import argparse
import logging
import sys
from pathlib import Path
from typing import Optional

from .clients.github import GitHubClient
from .config.constants import GitRemote, TukuiAPI
from .config.settings import MirrorConfig
from .exceptions import MirrorError
from .services.mirror import MirrorService
from .services.publisher import PublisherService
from .services.source import CatalogAddonSource
from .utils.logging import setup_logging


def parse_args(argv: Optional[list[str]] = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description="Mirror catalog addon releases into GitHub repositories"
    )

    # Source options
    parser.add_argument(
        "--source-url",
        type=str,
        default=TukuiAPI.ADDONS,
        help=f"Addon catalog URL (default: {TukuiAPI.ADDONS})",
    )

    # Repository options
    parser.add_argument(
        "--organisation",
        type=str,
        default=GitRemote.DEFAULT_ORGANISATION,
        help=f"GitHub organisation owning the mirror repositories "
        f"(default: {GitRemote.DEFAULT_ORGANISATION})",
    )
    parser.add_argument(
        "--remote-template",
        type=str,
        default=GitRemote.DEFAULT_TEMPLATE,
        help="Clone URL template with {organisation} and {slug} placeholders",
    )
    parser.add_argument(
        "--work-dir",
        type=str,
        default=".",
        help="Directory mirror repositories are cloned into (default: .)",
    )
    parser.add_argument(
        "--cache-dir",
        type=str,
        default="caches",
        help="Artifact download directory (default: caches)",
    )

    # GitHub options
    parser.add_argument(
        "--github-token",
        type=str,
        default=None,
        help="GitHub API token (default: $GITHUB_TOKEN)",
    )

    # Logging
    parser.add_argument(
        "--log-level",
        type=str,
        default="INFO",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level (default: INFO)",
    )
    parser.add_argument(
        "--log-file",
        type=str,
        default=None,
        help="Also append log output to this file",
    )

    return parser.parse_args(argv)


def main(argv: Optional[list[str]] = None) -> int:
    """Main entry point.

    Returns:
        0 if every addon is mirrored or up to date, 1 on the first failure.
    """
    args = parse_args(argv)

    log_level = getattr(logging, args.log_level.upper())
    log_file = Path(args.log_file) if args.log_file else None
    setup_logging(level=log_level, log_file=log_file)

    logger = logging.getLogger("addon_mirror")

    try:
        config = MirrorConfig.from_args(args)
    except MirrorError as e:
        logger.error(str(e))
        return 1

    source = CatalogAddonSource(config)
    github = GitHubClient(config.github)
    publisher = PublisherService(github, config.github)
    service = MirrorService(config, source, publisher)

    try:
        service.mirror()
    except MirrorError as e:
        logger.error(str(e))
        return 1
    finally:
        source.close()
        github.close()

    logger.info("Done!")
    return 0


def cli() -> None:
    """Console script entry point."""
    sys.exit(main())


if __name__ == "__main__":
    cli()
