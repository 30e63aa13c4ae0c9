"""CLI tests for git-file rm (and its remove alias)."""

from pathlib import Path

import pytest
from click.testing import CliRunner

from git_file.cli.cli import cli
from git_file.core.context import GitFileContext
from git_file.core.registry import Entry, Registry
from git_file.core.registry_store import FakeRegistryStore
from tests.test_utils.repo_setup import FIRST_SHA, REMOTE_URI, make_repo


@pytest.mark.parametrize("command", ["rm", "remove"])
def test_rm_untracks_and_deletes_file(tmp_path: Path, command: str) -> None:
    repo = make_repo(tmp_path)
    (tmp_path / "doc.md").write_text("old readme\n", encoding="utf-8")
    keep = Entry("keep.md", REMOTE_URI, "README.md", FIRST_SHA)
    store = FakeRegistryStore(
        registries={
            repo.registry_path: Registry(
                [Entry("doc.md", REMOTE_URI, "README.md", FIRST_SHA), keep]
            )
        }
    )
    ctx = GitFileContext.for_test(registry_store=store, cwd=tmp_path, repo=repo)

    result = CliRunner().invoke(cli, [command, "doc.md"], obj=ctx)

    assert result.exit_code == 0, result.output
    assert "Removed file 'doc.md'" in result.output
    assert not (tmp_path / "doc.md").exists()
    assert store.stored(repo.registry_path) == Registry([keep])


def test_rm_untracked_file_fails_and_keeps_file(tmp_path: Path) -> None:
    repo = make_repo(tmp_path)
    (tmp_path / "doc.md").write_text("mine\n", encoding="utf-8")
    ctx = GitFileContext.for_test(cwd=tmp_path, repo=repo)

    result = CliRunner().invoke(cli, ["rm", "doc.md"], obj=ctx)

    assert result.exit_code == 1
    assert "Error: File 'doc.md' is not tracked by git-file" in result.output
    assert (tmp_path / "doc.md").exists()


def test_rm_registry_write_failure_keeps_file(tmp_path: Path) -> None:
    """The registry is written before the file is deleted."""
    repo = make_repo(tmp_path)
    (tmp_path / "doc.md").write_text("old readme\n", encoding="utf-8")
    store = FakeRegistryStore(
        registries={
            repo.registry_path: Registry([Entry("doc.md", REMOTE_URI, "README.md", FIRST_SHA)])
        },
        fail_saves=True,
    )
    ctx = GitFileContext.for_test(registry_store=store, cwd=tmp_path, repo=repo)

    result = CliRunner().invoke(cli, ["rm", "doc.md"], obj=ctx)

    assert result.exit_code == 1
    assert "Failed to write to configuration file" in result.output
    assert (tmp_path / "doc.md").exists()


def test_rm_help_explains_paths_are_relative_to_current_directory() -> None:
    result = CliRunner().invoke(cli, ["rm", "--help"], obj=GitFileContext.for_test())

    assert result.exit_code == 0
    assert "resolved against the current directory" in " ".join(result.output.split())
