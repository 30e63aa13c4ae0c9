"""Git operations subpackage.

This subpackage provides abstractions over git operations with support for
testing via fakes.
"""

from git_file.core.git.abc import Git
from git_file.core.git.fake import FakeGit, FakeRemote
from git_file.core.git.real import RealGit

__all__ = [
    "Git",
    "RealGit",
    "FakeGit",
    "FakeRemote",
]
