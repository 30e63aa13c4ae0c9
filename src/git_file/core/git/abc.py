"""High-level git operations interface.

This module provides a clean abstraction over git subprocess calls, making the
fetch logic testable without network access.

Architecture:
- Git: Abstract base class defining the interface
- RealGit: Production implementation using subprocess
- FakeGit: In-memory remotes for tests
"""

from abc import ABC, abstractmethod
from pathlib import Path


class Git(ABC):
    """Abstract interface for the git operations needed to fetch single files.

    All implementations (real and fake) must implement this interface.
    This interface contains ONLY runtime operations - no test setup methods.
    """

    @abstractmethod
    def clone(self, remote_uri: str, destination: Path) -> None:
        """Full clone of a remote into destination, checking out its default branch.

        Args:
            remote_uri: Any URI the git transport understands
            destination: Directory to clone into (must not exist or be empty)

        Raises:
            RuntimeError: If the clone fails
        """
        ...

    @abstractmethod
    def resolve_commit(self, repo_dir: Path, revision: str) -> str | None:
        """Resolve a revision to the full id of the commit it names.

        Args:
            repo_dir: Path to a cloned repository
            revision: Commit id (full or abbreviated), tag or branch name

        Returns:
            Full commit id, or None if revision does not name a commit
        """
        ...

    @abstractmethod
    def checkout_detached(self, repo_dir: Path, commit: str) -> None:
        """Check out a commit's tree and detach HEAD at it.

        Raises:
            RuntimeError: If the checkout fails
        """
        ...

    @abstractmethod
    def get_head_commit(self, repo_dir: Path) -> str:
        """Get the full commit id HEAD points at.

        Raises:
            RuntimeError: If HEAD cannot be resolved (e.g. empty repository)
        """
        ...
