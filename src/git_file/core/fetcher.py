"""Fetch a single file from a remote repository at a given revision.

Each fetch performs a full clone into a scoped temporary directory that is
removed on every exit path, then copies one file out of the working tree.
Nothing is cached between calls.
"""

import logging
import shutil
import tempfile
from collections.abc import Iterator
from contextlib import contextmanager
from pathlib import Path

from git_file.core.errors import (
    CloneFailedError,
    CopyFailedError,
    FileNotFoundInRemoteError,
    ScopedDirectoryError,
    UnresolvableRevisionError,
)
from git_file.core.git.abc import Git
from git_file.core.registry import format_file_id

logger = logging.getLogger(__name__)

# Revision token meaning "tip of the remote's default branch"
LATEST_REVISION = "HEAD"


def is_latest(revision: str | None) -> bool:
    """Check whether revision asks for the default branch tip."""
    return not revision or revision.upper() == LATEST_REVISION


@contextmanager
def scoped_clone_dir(temp_root: Path | None) -> Iterator[Path]:
    """Temporary directory that is removed however the block exits.

    Args:
        temp_root: Parent directory, or None for the system default

    Raises:
        ScopedDirectoryError: If the directory cannot be created or removed
    """
    try:
        scratch = tempfile.TemporaryDirectory(prefix="git-file-", dir=temp_root)
    except OSError as e:
        raise ScopedDirectoryError(f"Failed to create temporary clone directory: {e}") from e

    logger.debug("Created scoped clone directory %s", scratch.name)
    try:
        yield Path(scratch.name)
    finally:
        try:
            scratch.cleanup()
        except OSError as e:
            raise ScopedDirectoryError(
                f"Failed to remove temporary clone directory '{scratch.name}': {e}"
            ) from e
        logger.debug("Removed scoped clone directory %s", scratch.name)


class RemoteFetcher:
    """Stateless retrieval of remote files through a Git implementation."""

    def __init__(self, git: Git, temp_root: Path | None = None) -> None:
        self._git = git
        self._temp_root = temp_root

    def fetch(
        self,
        remote_uri: str,
        remote_file_path: str,
        revision: str | None,
        destination: Path,
    ) -> str:
        """Place remote_file_path from remote_uri at revision into destination.

        Args:
            remote_uri: Repository to clone
            remote_file_path: Path of the file inside the repository tree
            revision: Commit to fetch; None or "HEAD" for the default branch tip
            destination: Local file to create or overwrite

        Returns:
            Full commit id the file was taken from

        Raises:
            FetchError: Clone, revision, lookup or copy failure
            ScopedDirectoryError: The temporary directory could not be managed
        """
        file_id = format_file_id(remote_uri, remote_file_path, revision)

        with scoped_clone_dir(self._temp_root) as scratch:
            clone_dir = scratch / "repo"
            logger.debug("Cloning %s into %s", remote_uri, clone_dir)
            try:
                self._git.clone(remote_uri, clone_dir)
            except RuntimeError as e:
                raise CloneFailedError(file_id, f"Failed to clone '{remote_uri}': {e}") from e

            requested = None if is_latest(revision) else revision
            resolved_sha = self._check_out(clone_dir, requested, file_id)
            self._copy_out(clone_dir, remote_file_path, destination, file_id)

        logger.debug("Fetched %s as %s", file_id, resolved_sha)
        return resolved_sha

    def _check_out(self, clone_dir: Path, revision: str | None, file_id: str) -> str:
        if revision is None:
            try:
                return self._git.get_head_commit(clone_dir)
            except RuntimeError as e:
                msg = f"Failed to get head commit for {file_id}: {e}"
                raise CloneFailedError(file_id, msg) from e

        commit = self._git.resolve_commit(clone_dir, revision)
        if commit is None:
            raise UnresolvableRevisionError(file_id, revision)

        logger.debug("Checking out %s (from '%s')", commit, revision)
        try:
            self._git.checkout_detached(clone_dir, commit)
        except RuntimeError as e:
            raise UnresolvableRevisionError(file_id, revision) from e
        return commit

    def _copy_out(
        self, clone_dir: Path, remote_file_path: str, destination: Path, file_id: str
    ) -> None:
        root = clone_dir.resolve()
        resolved_source = (clone_dir / remote_file_path).resolve()
        # Paths escaping the working tree or pointing into .git are not remote files
        parts: tuple[str, ...] = ()
        if resolved_source.is_relative_to(root):
            parts = resolved_source.relative_to(root).parts
        if not parts or parts[0] == ".git" or not resolved_source.is_file():
            raise FileNotFoundInRemoteError(
                file_id, f"File '{remote_file_path}' does not exist in remote tree for {file_id}"
            )

        try:
            destination.parent.mkdir(parents=True, exist_ok=True)
            shutil.copyfile(resolved_source, destination)
            shutil.copymode(resolved_source, destination)
        except OSError as e:
            raise CopyFailedError(file_id, f"Failed to copy file '{file_id}': {e}") from e
        logger.debug("Copied %s to %s", remote_file_path, destination)
