"""Application context with dependency injection."""

from dataclasses import dataclass
from pathlib import Path

from git_file.core.entry_manager import EntryManager
from git_file.core.fetcher import RemoteFetcher
from git_file.core.git.abc import Git
from git_file.core.git.real import RealGit
from git_file.core.global_config import GlobalConfig, load_global_config
from git_file.core.registry_store import RealRegistryStore, RegistryStore
from git_file.core.repo_discovery import (
    NoRepoSentinel,
    RepoContext,
    discover_repo_or_sentinel,
)


@dataclass(frozen=True)
class GitFileContext:
    """Immutable context holding all dependencies for git-file operations.

    Created at CLI entry point and threaded through the application.
    Frozen to prevent accidental modification at runtime.
    """

    git: Git
    registry_store: RegistryStore
    cwd: Path  # Current working directory at CLI invocation
    global_config: GlobalConfig
    repo: RepoContext | NoRepoSentinel

    def entry_manager(self, repo: RepoContext) -> EntryManager:
        """Build an EntryManager operating on repo's registry."""
        return EntryManager(
            fetcher=RemoteFetcher(self.git, temp_root=self.global_config.temp_root),
            registry_store=self.registry_store,
            registry_path=repo.registry_path,
            cwd=self.cwd,
        )

    @staticmethod
    def for_test(
        git: Git | None = None,
        registry_store: RegistryStore | None = None,
        cwd: Path | None = None,
        global_config: GlobalConfig | None = None,
        repo: RepoContext | NoRepoSentinel | None = None,
    ) -> "GitFileContext":
        """Create test context with optional pre-configured integration classes.

        Args:
            git: Optional Git implementation. If None, creates FakeGit with no remotes.
            registry_store: Optional RegistryStore. If None, creates empty FakeRegistryStore.
            cwd: Optional current working directory. If None, uses Path("/test/default/cwd").
            global_config: Optional GlobalConfig. If None, uses defaults.
            repo: Optional RepoContext or NoRepoSentinel. If None, uses NoRepoSentinel().

        Returns:
            GitFileContext configured with provided values and test defaults
        """
        from git_file.core.git.fake import FakeGit
        from git_file.core.registry_store import FakeRegistryStore

        return GitFileContext(
            git=git if git is not None else FakeGit(),
            registry_store=registry_store if registry_store is not None else FakeRegistryStore(),
            cwd=cwd if cwd is not None else Path("/test/default/cwd"),
            global_config=global_config if global_config is not None else GlobalConfig(),
            repo=repo if repo is not None else NoRepoSentinel(),
        )


def create_context(cwd: Path | None = None) -> GitFileContext:
    """Create production context with real implementations.

    Called at CLI entry point to create the context for the entire
    command execution.

    Args:
        cwd: Directory to discover the repository from (defaults to Path.cwd())

    Raises:
        ValueError: If the global config file is malformed
    """
    start = cwd if cwd is not None else Path.cwd()
    return GitFileContext(
        git=RealGit(),
        registry_store=RealRegistryStore(),
        cwd=start,
        global_config=load_global_config(),
        repo=discover_repo_or_sentinel(start),
    )
