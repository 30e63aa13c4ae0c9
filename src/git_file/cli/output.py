"""Output utilities for CLI commands with clear intent.

user_output is for human-readable messages and routes to stderr;
machine_output is for data meant to be piped and routes to stdout.
"""

from typing import Any

import click


def user_output(message: Any = "", nl: bool = True) -> None:
    """Print a human-readable message to stderr."""
    click.echo(message, err=True, nl=nl)


def machine_output(message: Any = "", nl: bool = True) -> None:
    """Print machine-consumable output to stdout."""
    click.echo(message, nl=nl)


def format_sha(sha: str, length: int) -> str:
    """Shorten a commit id for display; empty ids render as '-'."""
    if not sha:
        return "-"
    return sha[:length]
