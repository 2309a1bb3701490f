"""Unit tests for the mirror repository gateway.

These run real git commands against bare repositories in a temporary
directory standing in for the remote.
"""

import json
import shutil
import subprocess

import pytest

from addon_mirror.exceptions import RepoPublishFailed, RepoStateError, RepoUnavailable
from addon_mirror.services.metadata import render_release
from addon_mirror.services.repository import MirrorRepository

pytestmark = pytest.mark.skipif(shutil.which("git") is None, reason="git not installed")


def git(*args, cwd):
    return subprocess.run(
        ["git", *args], cwd=str(cwd), capture_output=True, text=True, check=True
    ).stdout.strip()


@pytest.fixture(autouse=True)
def git_identity(monkeypatch):
    """Isolate git from the user's configuration."""
    monkeypatch.setenv("GIT_CONFIG_GLOBAL", "/dev/null")
    monkeypatch.setenv("GIT_CONFIG_NOSYSTEM", "1")
    monkeypatch.setenv("GIT_AUTHOR_NAME", "Mirror Test")
    monkeypatch.setenv("GIT_AUTHOR_EMAIL", "mirror@example.org")
    monkeypatch.setenv("GIT_COMMITTER_NAME", "Mirror Test")
    monkeypatch.setenv("GIT_COMMITTER_EMAIL", "mirror@example.org")


@pytest.fixture
def remote(temp_dir):
    """Create a bare remote repository with a single commit."""
    seed = temp_dir / "seed"
    seed.mkdir()
    git("init", cwd=seed)
    git("commit", "--allow-empty", "-m", "init", cwd=seed)
    remote_path = temp_dir / "remote" / "elvui.git"
    remote_path.parent.mkdir()
    git("clone", "--bare", str(seed), str(remote_path), cwd=temp_dir)
    return remote_path


@pytest.fixture
def repo(remote, temp_dir):
    return MirrorRepository("elvui", str(remote), temp_dir / "work")


class TestReset:
    """Tests for MirrorRepository.reset."""

    def test_clone(self, repo):
        """Test the repository is cloned into the work dir under its slug."""
        repo.reset()
        assert (repo.path / ".git").is_dir()
        assert repo.path == repo.work_dir / "elvui"

    def test_discards_local_state(self, repo):
        """Test local files and tags do not survive a reset."""
        repo.reset()
        (repo.path / "junk.txt").write_text("junk")
        git("tag", "local-only", cwd=repo.path)

        repo.reset()
        assert not (repo.path / "junk.txt").exists()
        assert repo.current_version() == ""

    def test_clone_failure(self, temp_dir):
        """Test an unreachable remote raises and leaves no directory."""
        repo = MirrorRepository(
            "missing", str(temp_dir / "nowhere.git"), temp_dir / "work"
        )
        with pytest.raises(RepoUnavailable):
            repo.reset()
        assert not repo.path.exists()


class TestCurrentVersion:
    """Tests for MirrorRepository.current_version."""

    def test_no_tags(self, repo):
        """Test an untagged repository has an empty version."""
        repo.reset()
        assert repo.current_version() == ""

    def test_most_recent_tag(self, repo):
        """Test the most recent reachable tag is returned."""
        repo.reset()
        git("tag", "13.32", cwd=repo.path)
        git("commit", "--allow-empty", "-m", "13.33", cwd=repo.path)
        git("tag", "13.33", cwd=repo.path)
        assert repo.current_version() == "13.33"

    def test_not_a_repository(self, repo):
        """Test an unreadable repository raises RepoStateError."""
        repo.path.mkdir(parents=True)
        with pytest.raises(RepoStateError):
            repo.current_version()


class TestPublish:
    """Tests for MirrorRepository.publish."""

    def test_commit_tag_push(self, repo, remote, elvui):
        """Test release.json is committed, tagged and pushed."""
        repo.reset()
        path = repo.write_release(render_release(elvui, "elvui--13.33.zip"))
        repo.publish("13.33")

        assert "13.33" in git("tag", cwd=remote)
        assert git("log", "-1", "--format=%s", cwd=remote) == "13.33"

        # a fresh clone sees the new version and the committed metadata
        repo.reset()
        assert repo.current_version() == "13.33"
        with open(path, encoding="utf-8") as f:
            assert json.load(f)["releases"][0]["version"] == "13.33"

    def test_unchanged_metadata_still_commits(self, repo, remote, elvui):
        """Test an identical release.json still produces a commit and tag."""
        repo.reset()
        repo.write_release(render_release(elvui, "elvui--13.33.zip"))
        repo.publish("13.33")

        repo.reset()
        repo.write_release(render_release(elvui, "elvui--13.33.zip"))
        repo.publish("13.33-1")

        assert git("log", "-1", "--format=%s", cwd=remote) == "13.33-1"

    def test_existing_tag(self, repo, elvui):
        """Test tagging an existing version fails."""
        repo.reset()
        git("tag", "13.33", cwd=repo.path)
        repo.write_release(render_release(elvui, "elvui--13.33.zip"))
        with pytest.raises(RepoPublishFailed):
            repo.publish("13.33")

    def test_push_failure(self, repo, remote, elvui):
        """Test a push failure raises RepoPublishFailed."""
        repo.reset()
        shutil.rmtree(remote)
        repo.write_release(render_release(elvui, "elvui--13.33.zip"))
        with pytest.raises(RepoPublishFailed):
            repo.publish("13.33")

    @pytest.mark.parametrize("version", ["-d", "--delete", ""])
    def test_option_like_version(self, repo, remote, elvui, version):
        """Test versions git would read as options are refused before any commit."""
        repo.reset()
        head = git("rev-parse", "HEAD", cwd=remote)
        repo.write_release(render_release(elvui, "elvui--13.33.zip"))

        with pytest.raises(RepoPublishFailed):
            repo.publish(version)

        assert git("rev-parse", "HEAD", cwd=repo.path) == head
        assert git("tag", cwd=remote) == ""


class TestWriteRelease:
    """Tests for MirrorRepository.write_release."""

    def test_missing_working_copy(self, repo, elvui):
        """Test a write failure is raised as RepoPublishFailed."""
        with pytest.raises(RepoPublishFailed):
            repo.write_release(render_release(elvui, "elvui--13.33.zip"))
