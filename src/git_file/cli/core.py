"""Shared helpers for commands that operate inside a repository."""

from git_file.core.context import GitFileContext
from git_file.core.entry_manager import EntryManager
from git_file.core.errors import RepoNotFoundError
from git_file.core.repo_discovery import NoRepoSentinel, RepoContext


def discover_repo_context(ctx: GitFileContext) -> RepoContext:
    """Return the enclosing repository or fail with RepoNotFoundError."""
    if isinstance(ctx.repo, NoRepoSentinel):
        raise RepoNotFoundError(f"Failed to retrieve git-file configuration: {ctx.repo.message}")
    return ctx.repo


def entry_manager_for(ctx: GitFileContext) -> EntryManager:
    return ctx.entry_manager(discover_repo_context(ctx))
