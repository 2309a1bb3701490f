"""Utility functions module."""

from .logging import get_logger, setup_logging
from .version import flavour_of, interface_id_of

__all__ = [
    "flavour_of",
    "get_logger",
    "interface_id_of",
    "setup_logging",
]
