"""List command implementation."""

import click
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from git_file.cli.core import entry_manager_for
from git_file.cli.error_boundary import cli_error_boundary
from git_file.cli.output import format_sha, user_output
from git_file.core.context import GitFileContext


@click.command("list")
@click.pass_obj
@cli_error_boundary
def list_cmd(ctx: GitFileContext) -> None:
    """List tracked files with their origin and pinned commit."""
    entries = entry_manager_for(ctx).list_entries()

    if not entries:
        user_output("No files tracked")
        return

    table = Table(show_header=True, header_style="bold")
    table.add_column("path", style="cyan", no_wrap=True)
    table.add_column("remote", no_wrap=True)
    table.add_column("file", no_wrap=True)
    table.add_column("sha", style="yellow", no_wrap=True)

    for entry in entries:
        table.add_row(
            escape(entry.local_path),
            escape(entry.remote_uri) or "[dim]-[/dim]",
            escape(entry.remote_file_path) or "[dim]-[/dim]",
            format_sha(entry.resolved_sha, ctx.global_config.short_sha_length),
        )

    console = Console(stderr=True, width=200, force_terminal=True)
    console.print(table)
