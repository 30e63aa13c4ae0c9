"""Production Git implementation using subprocess.

This module provides the real Git implementation that executes actual git
commands via subprocess.
"""

import subprocess
from pathlib import Path

from git_file.core.git.abc import Git
from git_file.core.subprocess import run_subprocess_with_context


class RealGit(Git):
    """Production implementation using subprocess.

    All git operations execute actual git commands via subprocess.
    """

    def clone(self, remote_uri: str, destination: Path) -> None:
        """Full clone of a remote into destination."""
        run_subprocess_with_context(
            ["git", "clone", "--quiet", "--", remote_uri, str(destination)],
            operation_context=f"clone '{remote_uri}'",
        )

    def resolve_commit(self, repo_dir: Path, revision: str) -> str | None:
        """Resolve a revision to the full id of the commit it names."""
        # rev-parse would read a leading dash as an option
        if revision.startswith("-"):
            return None

        result = subprocess.run(
            ["git", "rev-parse", "--verify", "--quiet", f"{revision}^{{commit}}"],
            cwd=repo_dir,
            capture_output=True,
            text=True,
            check=False,
        )
        if result.returncode != 0:
            return None

        commit = result.stdout.strip()
        if not commit:
            return None
        return commit

    def checkout_detached(self, repo_dir: Path, commit: str) -> None:
        """Check out a commit's tree and detach HEAD at it."""
        run_subprocess_with_context(
            ["git", "checkout", "--quiet", "--detach", commit],
            operation_context=f"checkout commit '{commit}'",
            cwd=repo_dir,
        )

    def get_head_commit(self, repo_dir: Path) -> str:
        """Get the full commit id HEAD points at."""
        result = run_subprocess_with_context(
            ["git", "rev-parse", "--verify", "HEAD^{commit}"],
            operation_context="resolve HEAD commit",
            cwd=repo_dir,
        )
        return result.stdout.strip()
