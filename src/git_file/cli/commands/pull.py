"""Pull command implementation."""

import click

from git_file.cli.core import entry_manager_for
from git_file.cli.error_boundary import cli_error_boundary
from git_file.cli.output import format_sha, user_output
from git_file.core.context import GitFileContext
from git_file.core.entry_manager import PullResult


def _format_result(result: PullResult, sha_length: int) -> str:
    new_sha = click.style(format_sha(result.resolved_sha, sha_length), fg="yellow")
    if not result.changed:
        return f"'{result.local_path}' is up to date at {new_sha}"
    old_sha = format_sha(result.previous_sha, sha_length)
    return f"Updated '{result.local_path}': {old_sha} -> {new_sha}"


@click.command("pull")
@click.argument("local_file_path", required=False)
@click.pass_obj
@cli_error_boundary
def pull_cmd(ctx: GitFileContext, local_file_path: str | None) -> None:
    """Re-fetch tracked files at the tip of their remote's default branch.

    Pulls only LOCAL_FILE_PATH when given, otherwise every tracked file in
    registry order. Stops at the first failure; files pulled before it stay
    updated.

    Relative tracked paths are resolved against the current directory, so run
    pull from the directory the files were added from.
    """
    results = entry_manager_for(ctx).pull(local_file_path)

    if not results:
        user_output("No files tracked")
        return

    for result in results:
        user_output(_format_result(result, ctx.global_config.short_sha_length))
    user_output(click.style("Entries successfully updated", fg="green"))
