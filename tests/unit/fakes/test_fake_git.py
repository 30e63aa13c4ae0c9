"""Tests for FakeGit test infrastructure.

These tests verify that FakeGit behaves like a real clone closely enough for
fetch logic to be exercised against it.
"""

from pathlib import Path

import pytest

from git_file.core.git.fake import FakeGit, FakeRemote
from tests.test_utils.repo_setup import FIRST_SHA, REMOTE_URI, SECOND_SHA, two_commit_remote


def test_rejects_head_outside_commits() -> None:
    with pytest.raises(ValueError):
        FakeGit(remotes={REMOTE_URI: FakeRemote(commits={}, head=FIRST_SHA)})


def test_clone_materializes_head_tree(tmp_path: Path) -> None:
    git = FakeGit(remotes={REMOTE_URI: two_commit_remote()})
    destination = tmp_path / "clone"

    git.clone(REMOTE_URI, destination)

    assert (destination / ".git").is_dir()
    assert (destination / "README.md").read_text(encoding="utf-8") == "new readme\n"
    assert git.get_head_commit(destination) == SECOND_SHA
    assert git.clone_calls == [(REMOTE_URI, destination)]


def test_clone_unknown_remote_raises(tmp_path: Path) -> None:
    git = FakeGit()

    with pytest.raises(RuntimeError):
        git.clone(REMOTE_URI, tmp_path / "clone")

    assert git.clone_calls == [(REMOTE_URI, tmp_path / "clone")]


def test_resolve_commit_accepts_full_and_unique_prefixes(tmp_path: Path) -> None:
    git = FakeGit(remotes={REMOTE_URI: two_commit_remote()})
    destination = tmp_path / "clone"
    git.clone(REMOTE_URI, destination)

    assert git.resolve_commit(destination, FIRST_SHA) == FIRST_SHA
    assert git.resolve_commit(destination, FIRST_SHA[:4]) == FIRST_SHA
    assert git.resolve_commit(destination, FIRST_SHA[:3]) is None
    assert git.resolve_commit(destination, "ffffffff") is None


def test_checkout_replaces_tree(tmp_path: Path) -> None:
    remote = FakeRemote(
        commits={FIRST_SHA: {"old.txt": "1"}, SECOND_SHA: {"new.txt": "2"}},
        head=SECOND_SHA,
    )
    git = FakeGit(remotes={REMOTE_URI: remote})
    destination = tmp_path / "clone"
    git.clone(REMOTE_URI, destination)

    git.checkout_detached(destination, FIRST_SHA)

    assert (destination / "old.txt").exists()
    assert not (destination / "new.txt").exists()
    assert git.get_head_commit(destination) == FIRST_SHA
    assert git.checkout_calls == [(destination, FIRST_SHA)]


def test_head_of_uncloned_directory_raises(tmp_path: Path) -> None:
    with pytest.raises(RuntimeError):
        FakeGit().get_head_commit(tmp_path)
