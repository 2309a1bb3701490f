"""Pytest fixtures for addon mirror tests."""

import json
import tempfile
from pathlib import Path
from typing import Any

import pytest

from addon_mirror.models.addon import Addon


@pytest.fixture
def fixtures_dir() -> Path:
    """Return path to fixtures directory."""
    return Path(__file__).parent / "fixtures"


@pytest.fixture
def temp_dir():
    """Create a temporary directory for tests."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def catalog_response(fixtures_dir) -> list[dict[str, Any]]:
    """Return sample addon catalog API response."""
    with open(fixtures_dir / "api-resp.json", encoding="utf-8") as f:
        return json.load(f)


@pytest.fixture
def elvui() -> Addon:
    """Return a sample addon descriptor."""
    return Addon(
        slug="elvui",
        name="ElvUI",
        url="https://api.tukui.org/v1/download/dev/elvui/main",
        version="13.33",
        patch_list=("10.1.0",),
    )


@pytest.fixture
def github_release_response() -> dict[str, Any]:
    """Return sample GitHub create release API response."""
    return {
        "id": 12345,
        "tag_name": "13.33",
        "name": "ElvUI",
        "html_url": "https://github.com/ogri-la/elvui/releases/tag/13.33",
        "draft": False,
        "prerelease": False,
        "assets": [],
    }


@pytest.fixture
def github_asset_response() -> dict[str, Any]:
    """Return sample GitHub upload asset API response."""
    return {
        "id": 678,
        "name": "elvui--13.33.zip",
        "label": "elvui--13.33.zip",
        "content_type": "application/zip",
        "browser_download_url": (
            "https://github.com/ogri-la/elvui/releases/download/13.33/elvui--13.33.zip"
        ),
    }
