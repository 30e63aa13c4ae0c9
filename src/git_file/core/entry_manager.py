"""Tracked-entry operations: add, remove, pull and list.

Each operation is a one-shot read-modify-write of the registry. Remote access
goes exclusively through RemoteFetcher.

Known residual state: if add copies the file but the registry cannot be saved,
the copied file stays on disk untracked. The registry itself is only ever
updated after a fully successful fetch, so tracked entries never disagree with
what was fetched.
"""

import logging
from dataclasses import dataclass, replace
from pathlib import Path

from git_file.core.errors import (
    AlreadyExistsError,
    AlreadyTrackedError,
    GitFileError,
    LocalFileError,
    MalformedEntryError,
    NotTrackedError,
    PullFailedError,
)
from git_file.core.fetcher import LATEST_REVISION, RemoteFetcher
from git_file.core.registry import Entry, Registry
from git_file.core.registry_store import RegistryStore

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PullResult:
    """Outcome of re-fetching one entry."""

    local_path: str
    previous_sha: str
    resolved_sha: str

    @property
    def changed(self) -> bool:
        return self.previous_sha != self.resolved_sha


class EntryManager:
    """Enforces registry invariants around remote fetches.

    Relative local paths are resolved against `cwd` for filesystem access;
    the registry key is always the path string exactly as given.
    """

    def __init__(
        self,
        *,
        fetcher: RemoteFetcher,
        registry_store: RegistryStore,
        registry_path: Path,
        cwd: Path,
    ) -> None:
        self._fetcher = fetcher
        self._store = registry_store
        self._registry_path = registry_path
        self._cwd = cwd

    def local_file(self, local_path: str) -> Path:
        """Filesystem location of a tracked local path."""
        path = Path(local_path)
        if path.is_absolute():
            return path
        return self._cwd / path

    def list_entries(self) -> list[Entry]:
        return list(self._store.load(self._registry_path))

    def add(
        self,
        remote_uri: str,
        remote_file_path: str,
        revision: str | None,
        local_path: str,
    ) -> Entry:
        """Fetch a remote file into local_path and start tracking it.

        Args:
            remote_uri: Repository to fetch from
            remote_file_path: Path of the file inside the repository
            revision: Commit to pin; None or "HEAD" for the default branch tip
            local_path: Where to place the file; must be neither on disk nor tracked

        Returns:
            The persisted entry, with the concrete commit id that was fetched

        Raises:
            AlreadyExistsError: A file already exists at local_path
            AlreadyTrackedError: local_path already has an entry
            FetchError: The remote file could not be retrieved
            RegistryWriteError: The registry could not be saved
        """
        destination = self.local_file(local_path)
        if destination.exists():
            raise AlreadyExistsError(local_path)

        registry = self._store.load(self._registry_path)
        if local_path in registry:
            raise AlreadyTrackedError(local_path)

        resolved_sha = self._fetcher.fetch(remote_uri, remote_file_path, revision, destination)

        entry = Entry(
            local_path=local_path,
            remote_uri=remote_uri,
            remote_file_path=remote_file_path,
            resolved_sha=resolved_sha,
        )
        registry.upsert(entry)
        self._store.save(registry, self._registry_path)
        logger.debug("Tracking %s as %s", local_path, entry.file_id)
        return entry

    def remove(self, local_path: str) -> Entry:
        """Stop tracking local_path and delete its file if present.

        Raises:
            NotTrackedError: local_path has no entry
            RegistryWriteError: The registry could not be saved
            LocalFileError: local_path is a directory, or its file could not be deleted
        """
        registry = self._store.load(self._registry_path)
        entry = registry.get(local_path)
        if entry is None:
            raise NotTrackedError(local_path)

        local = self.local_file(local_path)
        if local.is_dir():
            raise LocalFileError(
                f"Cannot remove '{local_path}': it is a directory, not a tracked file"
            )

        registry.delete(local_path)
        self._store.save(registry, self._registry_path)

        if local.exists():
            try:
                local.unlink()
            except OSError as e:
                raise LocalFileError(f"Failed to remove local file '{local_path}': {e}") from e
        logger.debug("Stopped tracking %s", local_path)
        return entry

    def pull(self, local_path: str | None = None) -> list[PullResult]:
        """Re-fetch entries at their remote's default branch tip.

        Entries are processed in registry order and the registry is saved after
        each one. The first failure stops the run; entries already pulled stay
        updated.

        Args:
            local_path: Only pull this entry; None pulls every entry

        Raises:
            NotTrackedError: local_path was given but has no entry
            PullFailedError: An entry could not be re-fetched or saved
        """
        registry = self._store.load(self._registry_path)

        if local_path is not None:
            entry = registry.get(local_path)
            if entry is None:
                raise NotTrackedError(local_path)
            targets = [entry]
        else:
            targets = list(registry)

        results: list[PullResult] = []
        for entry in targets:
            try:
                results.append(self._pull_entry(registry, entry))
            except GitFileError as e:
                raise PullFailedError(entry.local_path, e) from e
        return results

    def _pull_entry(self, registry: Registry, entry: Entry) -> PullResult:
        if not entry.remote_uri:
            raise MalformedEntryError(entry.local_path, "remote")
        if not entry.remote_file_path:
            raise MalformedEntryError(entry.local_path, "file_path")

        logger.debug("Pulling %s from %s", entry.local_path, entry.remote_uri)
        resolved_sha = self._fetcher.fetch(
            entry.remote_uri,
            entry.remote_file_path,
            LATEST_REVISION,
            self.local_file(entry.local_path),
        )

        registry.upsert(replace(entry, resolved_sha=resolved_sha))
        self._store.save(registry, self._registry_path)
        return PullResult(
            local_path=entry.local_path,
            previous_sha=entry.resolved_sha,
            resolved_sha=resolved_sha,
        )
