"""Unit tests for the command-line entry point and configuration."""

from pathlib import Path
from unittest.mock import patch

import pytest

from addon_mirror.__main__ import main, parse_args
from addon_mirror.config.settings import MirrorConfig, resolve_token
from addon_mirror.exceptions import ConfigError, RepoUnavailable
from addon_mirror.utils.logging import setup_logging


class TestConfig:
    """Tests for configuration loading."""

    def test_defaults(self, monkeypatch):
        """Test default arguments build the default configuration."""
        monkeypatch.setenv("GITHUB_TOKEN", "env-token")
        config = MirrorConfig.from_args(parse_args([]))

        assert config.source_url == "https://api.tukui.org/v1/addons"
        assert config.github.token == "env-token"
        assert config.github.organisation == "ogri-la"
        assert config.github.timeout is None
        assert config.github.max_retries == 0
        assert config.cache_dir == Path("caches").resolve()
        assert config.remote_url("elvui") == "ssh://git@github.com/ogri-la/elvui"

    def test_overrides(self, monkeypatch, temp_dir):
        """Test command line options override defaults and the envvar."""
        monkeypatch.setenv("GITHUB_TOKEN", "env-token")
        args = parse_args(
            [
                "--github-token", "cli-token",
                "--organisation", "mirrors",
                "--remote-template", "file:///srv/{organisation}/{slug}.git",
                "--work-dir", str(temp_dir),
                "--source-url", "https://catalog.example/addons",
            ]
        )
        config = MirrorConfig.from_args(args)

        assert config.github.token == "cli-token"
        assert config.work_dir == temp_dir.resolve()
        assert config.source_url == "https://catalog.example/addons"
        assert config.remote_url("elvui") == "file:///srv/mirrors/elvui.git"

    def test_missing_token(self, monkeypatch):
        """Test a missing token is a configuration error."""
        monkeypatch.delenv("GITHUB_TOKEN", raising=False)
        with pytest.raises(ConfigError):
            resolve_token(None)

    def test_empty_token(self, monkeypatch):
        """Test an empty token counts as missing."""
        monkeypatch.setenv("GITHUB_TOKEN", "")
        with pytest.raises(ConfigError):
            resolve_token(None)


class TestMain:
    """Tests for main."""

    def test_missing_token_exits_before_mirroring(self, monkeypatch):
        """Test startup fails without touching any addon."""
        monkeypatch.delenv("GITHUB_TOKEN", raising=False)
        with patch("addon_mirror.__main__.MirrorService") as mock_service:
            assert main([]) == 1
        mock_service.assert_not_called()

    def test_success(self, monkeypatch):
        """Test a complete run exits with 0."""
        monkeypatch.setenv("GITHUB_TOKEN", "token")
        with patch("addon_mirror.__main__.MirrorService") as mock_service:
            mock_service.return_value.mirror.return_value = {
                "checked": 1,
                "updated": 1,
                "skipped": 0,
            }
            assert main([]) == 0
        mock_service.return_value.mirror.assert_called_once_with()

    def test_failure(self, monkeypatch, caplog):
        """Test a failed run exits non-zero with a single diagnostic."""
        monkeypatch.setenv("GITHUB_TOKEN", "token")
        error = RepoUnavailable(
            "failed to clone ssh://git@github.com/ogri-la/elvui",
            operation="resetting repository for elvui",
        )
        with patch("addon_mirror.__main__.MirrorService") as mock_service:
            mock_service.return_value.mirror.side_effect = error
            with caplog.at_level("ERROR", logger="addon_mirror"):
                assert main([]) == 1

        errors = [r.getMessage() for r in caplog.records if r.levelname == "ERROR"]
        assert errors == [
            "failed while resetting repository for elvui: "
            "failed to clone ssh://git@github.com/ogri-la/elvui"
        ]

    def test_log_file(self, monkeypatch, temp_dir):
        """Test --log-file records the failure diagnostic."""
        monkeypatch.delenv("GITHUB_TOKEN", raising=False)
        log_file = temp_dir / "mirror.log"
        try:
            assert main(["--log-file", str(log_file)]) == 1
        finally:
            # closes the file handler
            setup_logging()

        assert "envvar GITHUB_TOKEN not set." in log_file.read_text(encoding="utf-8")
