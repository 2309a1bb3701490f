"""Mirror catalog addon releases into git repositories and GitHub releases."""

__version__ = "1.0.0"
