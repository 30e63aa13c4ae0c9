"""Add command implementation."""

from pathlib import PurePosixPath

import click

from git_file.cli.core import entry_manager_for
from git_file.cli.error_boundary import cli_error_boundary
from git_file.cli.output import format_sha, user_output
from git_file.core.context import GitFileContext


def default_local_path(remote_file_path: str) -> str:
    """Local path used when none is given: the stem of the remote file name.

    Examples:
        >>> default_local_path("docs/README.md")
        'README'
        >>> default_local_path("LICENSE")
        'LICENSE'
    """
    stem = PurePosixPath(remote_file_path).stem
    if not stem:
        return remote_file_path
    return stem


@click.command("add")
@click.argument("remote")
@click.argument("remote_file_path")
@click.argument("local_file_path", required=False)
@click.argument("revision", required=False)
@click.pass_obj
@cli_error_boundary
def add_cmd(
    ctx: GitFileContext,
    remote: str,
    remote_file_path: str,
    local_file_path: str | None,
    revision: str | None,
) -> None:
    """Track REMOTE_FILE_PATH from the REMOTE repository.

    LOCAL_FILE_PATH defaults to the stem of REMOTE_FILE_PATH. REVISION pins a
    commit; when omitted (or HEAD) the tip of the remote's default branch is used.

    A relative LOCAL_FILE_PATH is placed under the current directory and recorded
    as given; later rm and pull calls must use the same path from the same
    directory.
    """
    local_path = local_file_path if local_file_path else default_local_path(remote_file_path)

    entry = entry_manager_for(ctx).add(remote, remote_file_path, revision, local_path)

    short_sha = format_sha(entry.resolved_sha, ctx.global_config.short_sha_length)
    user_output(f"Added file '{local_path}' at {click.style(short_sha, fg='yellow')}")
