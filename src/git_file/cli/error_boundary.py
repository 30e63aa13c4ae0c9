"""Error boundary handling for CLI commands.

This module provides a decorator to catch git-file exceptions at CLI entry points
and display clean error messages without stack traces.
"""

import functools
import logging
from collections.abc import Callable
from typing import Any, TypeVar

import click

from git_file.cli.output import user_output
from git_file.core.errors import GitFileError, GitFileFatalError

logger = logging.getLogger(__name__)

# Exit status for environment-level failures, distinct from ordinary errors
FATAL_EXIT_CODE = 2

T = TypeVar("T", bound=Callable[..., Any])


def cli_error_boundary(func: T) -> T:
    """Decorator that catches well-known exceptions and displays clean error messages.

    Catches:
        - GitFileError: reported with a red "Error:" prefix, exit status 1
        - ValueError: invalid configuration or input, exit status 1
        - GitFileFatalError: reported with a red "Fatal:" prefix, exit status 2

    All other exceptions bubble up normally with full stack traces.

    Example:
        @click.command()
        @cli_error_boundary
        def my_command():
            ...
    """

    @functools.wraps(func)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        try:
            return func(*args, **kwargs)
        except (GitFileError, ValueError) as e:
            logger.debug("Command failed", exc_info=True)
            user_output(click.style("Error: ", fg="red") + str(e))
            raise SystemExit(1) from None
        except GitFileFatalError as e:
            logger.debug("Command aborted", exc_info=True)
            user_output(click.style("Fatal: ", fg="red", bold=True) + str(e))
            raise SystemExit(FATAL_EXIT_CODE) from None

    return wrapper  # type: ignore[return-value]
