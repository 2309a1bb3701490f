"""Constants and API endpoints for the addon mirror."""

from urllib.parse import quote


class GitHubAPI:
    """GitHub API endpoints."""

    BASE = "https://api.github.com"
    UPLOADS_BASE = "https://uploads.github.com"
    DEFAULT_API_VERSION = "2022-11-28"

    @staticmethod
    def releases(owner: str, repo: str) -> str:
        """Get releases list endpoint."""
        return f"{GitHubAPI.BASE}/repos/{owner}/{repo}/releases"

    @staticmethod
    def upload_asset(owner: str, repo: str, release_id: int, name: str) -> str:
        """Get upload asset endpoint."""
        return (
            f"{GitHubAPI.UPLOADS_BASE}/repos/{owner}/{repo}"
            f"/releases/{release_id}/assets?name={quote(name)}&label={quote(name)}"
        )


class TukuiAPI:
    """Tukui addon catalog."""

    ADDONS = "https://api.tukui.org/v1/addons"
    USER_AGENT = (
        "addon-mirror/1.x (https://github.com/ogri-la/tukui-mirror-script)"
    )


class GitRemote:
    """Mirror repository remote locations."""

    DEFAULT_ORGANISATION = "ogri-la"
    DEFAULT_TEMPLATE = "ssh://git@github.com/{organisation}/{slug}"


class Flavours:
    """Release flavours, one per game variant."""

    MAINLINE = "mainline"
    CLASSIC = "classic"
    CLASSIC_TBC = "classic-tbc"
    CLASSIC_WOTLK = "classic-wotlk"


class ContentTypes:
    """MIME content types."""

    ZIP = "application/zip"
    JSON = "application/json"

    # extension -> content type
    BY_EXTENSION = {
        ".zip": ZIP,
        ".json": JSON,
    }


RELEASE_JSON = "release.json"
