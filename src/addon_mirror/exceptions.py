"""Custom exceptions for the addon mirror."""

from typing import Optional


class MirrorError(Exception):
    """Base exception for all mirror errors.

    `operation` names what was being done when the error happened. It is
    filled in by whoever catches and re-raises the error with more context.
    """

    def __init__(self, message: str = "", operation: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.operation = operation

    def __str__(self) -> str:
        if self.operation:
            return f"failed while {self.operation}: {self.message}"
        return self.message


class ConfigError(MirrorError):
    """Required configuration is missing."""

    pass


class HTTPError(MirrorError):
    """HTTP request error."""

    pass


class FetchFailed(HTTPError):
    """Catalog or artifact could not be fetched."""

    pass


class MalformedVersion(MirrorError):
    """Upstream game version string could not be parsed."""

    pass


class RepoError(MirrorError):
    """Version-control operation error."""

    pass


class RepoUnavailable(RepoError):
    """Mirror repository could not be cloned."""

    pass


class RepoStateError(RepoError):
    """Mirror repository state could not be queried."""

    pass


class RepoPublishFailed(RepoError):
    """Commit, tag or push of the mirror repository failed."""

    pass


class UnknownAssetType(MirrorError):
    """Release asset has no known content type."""

    pass


class GitHubError(MirrorError):
    """GitHub API error."""

    pass
