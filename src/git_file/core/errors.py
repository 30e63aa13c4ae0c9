"""Error taxonomy for git-file operations.

Two separate hierarchies:

- GitFileError: ordinary failures of a single operation (missing repository,
  precondition violations, fetch failures, registry writes). The CLI reports
  these and exits with status 1.
- GitFileFatalError: environment-level failures (the scoped clone directory
  cannot be created or removed). These are NOT GitFileError subclasses;
  `except GitFileError` never catches them.
"""


class GitFileError(Exception):
    """Base class for recoverable, reportable git-file errors."""


class RepoNotFoundError(GitFileError):
    """No enclosing git repository was found walking up from the start path."""


class RegistryWriteError(GitFileError):
    """The registry file could not be written."""


class PreconditionError(GitFileError):
    """An operation's precondition on the registry or filesystem does not hold."""

    def __init__(self, local_path: str, message: str) -> None:
        super().__init__(message)
        self.local_path = local_path


class AlreadyExistsError(PreconditionError):
    """A file already exists at the requested local path."""

    def __init__(self, local_path: str) -> None:
        super().__init__(local_path, f"Cannot add entry, file '{local_path}' already exists")


class AlreadyTrackedError(PreconditionError):
    """The local path already has a registry entry."""

    def __init__(self, local_path: str) -> None:
        super().__init__(local_path, f"File '{local_path}' is already tracked")


class NotTrackedError(PreconditionError):
    """The local path has no registry entry."""

    def __init__(self, local_path: str) -> None:
        super().__init__(local_path, f"File '{local_path}' is not tracked by git-file")


class MalformedEntryError(GitFileError):
    """A registry section lacks a field required to act on it."""

    def __init__(self, local_path: str, field: str) -> None:
        super().__init__(f"Entry '{local_path}' has no '{field}' value in the registry")
        self.local_path = local_path
        self.field = field


class LocalFileError(GitFileError):
    """A tracked local file could not be removed."""


class FetchError(GitFileError):
    """Retrieving a file from a remote repository failed.

    Attributes:
        file_id: Identity of the requested file, "<remote>:<path>@<revision>"
    """

    def __init__(self, file_id: str, message: str) -> None:
        super().__init__(message)
        self.file_id = file_id


class CloneFailedError(FetchError):
    """The remote could not be cloned (bad URI, network or auth failure)."""


class UnresolvableRevisionError(FetchError):
    """The requested revision does not name a commit in the remote."""

    def __init__(self, file_id: str, revision: str) -> None:
        super().__init__(file_id, f"Could not map commit '{revision}' to object for {file_id}")
        self.revision = revision


class FileNotFoundInRemoteError(FetchError):
    """The requested path is not a file in the checked-out remote tree."""


class CopyFailedError(FetchError):
    """Copying the fetched file into the local tree failed."""


class PullFailedError(GitFileError):
    """Re-fetching a tracked entry failed.

    Entries pulled before this one keep their updated, persisted state.
    """

    def __init__(self, local_path: str, cause: GitFileError) -> None:
        super().__init__(f"Failed to pull '{local_path}': {cause}")
        self.local_path = local_path
        self.cause = cause


class GitFileFatalError(Exception):
    """Base class for environment-level failures that abort the process."""


class ScopedDirectoryError(GitFileFatalError):
    """The temporary clone directory could not be created or removed."""
