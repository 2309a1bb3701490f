"""Release metadata rendering."""

import json
from pathlib import Path

from ..config.constants import RELEASE_JSON
from ..models.addon import Addon
from ..models.release import FlavourInfo, ReleaseDocument, ReleaseEntry
from ..utils.logging import get_logger
from ..utils.version import flavour_of, interface_id_of

logger = get_logger("services.metadata")


def render_release(addon: Addon, artifact_filename: str) -> ReleaseDocument:
    """Build the release metadata document for an addon.

    One metadata entry is produced per supported game version, in the
    order the catalog lists them.

    Raises:
        MalformedVersion: If a game version cannot be parsed.
    """
    metadata = [
        FlavourInfo(flavour=flavour_of(patch), interface_id=interface_id_of(patch))
        for patch in addon.patch_list
    ]
    entry = ReleaseEntry(
        name=addon.name,
        version=addon.version,
        filename=artifact_filename,
        nolib=False,
        metadata=metadata,
    )
    return ReleaseDocument(releases=[entry])


def write_release_json(document: ReleaseDocument, output_dir: Path) -> Path:
    """Write a release document to `release.json` in `output_dir`."""
    path = output_dir / RELEASE_JSON
    with open(path, "w", encoding="utf-8") as f:
        json.dump(document.to_dict(), f, ensure_ascii=False, indent=4)
        f.write("\n")
    logger.info(f"Wrote: {path}")
    return path
