"""Fake Git operations for testing.

FakeGit is an in-memory description of remote repositories that accepts
pre-configured state in its constructor. Cloning materializes the remote's
files on disk so that copy logic runs against a real working tree.
"""

from dataclasses import dataclass
from pathlib import Path

from git_file.core.git.abc import Git


@dataclass(frozen=True)
class FakeRemote:
    """A remote repository: commit id -> {path: content}, plus its default tip."""

    commits: dict[str, dict[str, str]]
    head: str


class FakeGit(Git):
    """In-memory fake implementation of Git operations.

    This class has NO public setup methods. All state is provided via constructor
    using keyword arguments with sensible defaults (empty dicts).
    """

    def __init__(self, *, remotes: dict[str, FakeRemote] | None = None) -> None:
        """Create FakeGit with pre-configured remotes.

        Args:
            remotes: Mapping of remote URI -> FakeRemote. Cloning any other URI fails.
        """
        self._remotes = remotes or {}
        for uri, remote in self._remotes.items():
            if remote.head not in remote.commits:
                msg = f"Head '{remote.head}' of fake remote '{uri}' is not one of its commits"
                raise ValueError(msg)

        self._checked_out: dict[Path, tuple[str, str]] = {}
        self._clone_calls: list[tuple[str, Path]] = []
        self._checkout_calls: list[tuple[Path, str]] = []

    @property
    def clone_calls(self) -> list[tuple[str, Path]]:
        """Read-only access to tracked clone() calls for test assertions.

        Returns list of (remote_uri, destination) tuples.
        """
        return self._clone_calls

    @property
    def checkout_calls(self) -> list[tuple[Path, str]]:
        """Read-only access to tracked checkout_detached() calls.

        Returns list of (repo_dir, commit) tuples.
        """
        return self._checkout_calls

    def clone(self, remote_uri: str, destination: Path) -> None:
        self._clone_calls.append((remote_uri, destination))
        remote = self._remotes.get(remote_uri)
        if remote is None:
            msg = f"Failed to clone '{remote_uri}'\nstderr: repository '{remote_uri}' not found"
            raise RuntimeError(msg)

        destination.mkdir(parents=True, exist_ok=True)
        (destination / ".git").mkdir()
        self._write_tree(destination, remote.commits[remote.head])
        self._checked_out[destination] = (remote_uri, remote.head)

    def resolve_commit(self, repo_dir: Path, revision: str) -> str | None:
        remote = self._remote_for(repo_dir)
        if revision in remote.commits:
            return revision
        if len(revision) < 4:
            return None

        matches = [sha for sha in remote.commits if sha.startswith(revision)]
        if len(matches) != 1:
            return None
        return matches[0]

    def checkout_detached(self, repo_dir: Path, commit: str) -> None:
        self._checkout_calls.append((repo_dir, commit))
        remote_uri, current = self._checked_out[repo_dir]
        remote = self._remotes[remote_uri]
        if commit not in remote.commits:
            msg = f"Failed to checkout commit '{commit}'"
            raise RuntimeError(msg)

        for relative in remote.commits[current]:
            (repo_dir / relative).unlink(missing_ok=True)
        self._write_tree(repo_dir, remote.commits[commit])
        self._checked_out[repo_dir] = (remote_uri, commit)

    def get_head_commit(self, repo_dir: Path) -> str:
        if repo_dir not in self._checked_out:
            msg = f"Failed to resolve HEAD commit in {repo_dir}"
            raise RuntimeError(msg)
        return self._checked_out[repo_dir][1]

    def _remote_for(self, repo_dir: Path) -> FakeRemote:
        remote_uri, _ = self._checked_out[repo_dir]
        return self._remotes[remote_uri]

    def _write_tree(self, root: Path, files: dict[str, str]) -> None:
        for relative, content in files.items():
            path = root / relative
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_text(content, encoding="utf-8")
