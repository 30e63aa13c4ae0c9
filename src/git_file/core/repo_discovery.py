"""Repository discovery functionality.

Discovers the enclosing git repository from an explicit start path, without
running git and without reading the process working directory.
"""

from dataclasses import dataclass
from pathlib import Path

REGISTRY_FILENAME = ".git-file"


@dataclass(frozen=True)
class RepoContext:
    """Represents a git repo root and the registry file tracked within it."""

    root: Path
    registry_path: Path  # <root>/.git-file


@dataclass(frozen=True)
class NoRepoSentinel:
    """Sentinel value indicating execution outside a git repository.

    Commands that require repo context can check for this sentinel and fail fast.
    """

    message: str = "Not inside a git repository"


def discover_repo_or_sentinel(start: Path) -> RepoContext | NoRepoSentinel:
    """Walk up from `start` to find a directory containing `.git`.

    The start directory itself is checked first. A `.git` file (as used by
    worktrees and submodules) counts as well as a `.git` directory.

    Args:
        start: Directory to start the search from

    Returns:
        RepoContext if inside a git repository, NoRepoSentinel otherwise
    """
    if not start.exists():
        return NoRepoSentinel(message=f"Start path '{start}' does not exist")

    cur = start.resolve()
    for parent in [cur, *cur.parents]:
        if (parent / ".git").exists():
            return RepoContext(root=parent, registry_path=parent / REGISTRY_FILENAME)

    return NoRepoSentinel(message="Not inside a git repository (no .git found up the tree)")
