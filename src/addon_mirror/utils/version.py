"""Game version naming utilities.

A "patch" is the game version string an addon release supports, for
example "10.1.0" or "1.14.3".
"""

import re

from ..config.constants import Flavours
from ..exceptions import MalformedVersion

DIGITS = re.compile(r"[0-9]+")

# Leading "<major>." prefix -> flavour. Anything else is mainline.
FLAVOUR_PREFIXES = {
    "1.": Flavours.CLASSIC,
    "2.": Flavours.CLASSIC_TBC,
    "3.": Flavours.CLASSIC_WOTLK,
}


def flavour_of(patch: str) -> str:
    """Get the release flavour a game version targets.

    Examples:
        "10.1.0" -> "mainline"
        "1.14.3" -> "classic"
        "2.5.1"  -> "classic-tbc"

    Args:
        patch: Game version string.

    Returns:
        Flavour name.

    Raises:
        MalformedVersion: If the version is too short to carry a prefix.
    """
    if len(patch) < 2:
        raise MalformedVersion(f"failed to parse game version: {patch!r}")
    return FLAVOUR_PREFIXES.get(patch[:2], Flavours.MAINLINE)


def interface_id_of(patch: str) -> int:
    """Get the numeric interface identifier for a game version.

    Only major and minor are encoded, the patch level is ignored:
    "10.1.5" -> 100100, "1.14.3" -> 11400.

    Args:
        patch: Game version string.

    Returns:
        major * 10000 + minor * 100

    Raises:
        MalformedVersion: If major or minor is absent or not numeric.
    """
    bits = patch.split(".", 2)
    if len(bits) < 2:
        raise MalformedVersion(f"failed to parse game version: {patch!r}")

    # ASCII digits only: no sign, whitespace, underscores or other scripts
    if not all(DIGITS.fullmatch(bit) for bit in bits[:2]):
        raise MalformedVersion(f"failed to parse game version: {patch!r}")

    major = int(bits[0])
    minor = int(bits[1])
    return (10000 * major) + (100 * minor)
