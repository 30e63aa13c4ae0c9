"""Rm command implementation."""

import click

from git_file.cli.core import entry_manager_for
from git_file.cli.error_boundary import cli_error_boundary
from git_file.cli.output import user_output
from git_file.core.context import GitFileContext


@click.command("rm")
@click.argument("local_file_path")
@click.pass_obj
@cli_error_boundary
def rm_cmd(ctx: GitFileContext, local_file_path: str) -> None:
    """Stop tracking LOCAL_FILE_PATH and delete the local file.

    LOCAL_FILE_PATH must be given exactly as it was to add: relative paths are
    registry keys resolved against the current directory, so run rm from the
    directory the file was added from.
    """
    entry_manager_for(ctx).remove(local_file_path)
    user_output(f"Removed file '{local_file_path}'")
