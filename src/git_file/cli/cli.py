import logging
import os

import click

from git_file.cli.commands.add import add_cmd
from git_file.cli.commands.config import config_group
from git_file.cli.commands.list_cmd import list_cmd
from git_file.cli.commands.pull import pull_cmd
from git_file.cli.commands.rm import rm_cmd
from git_file.cli.output import user_output
from git_file.core.context import create_context

CONTEXT_SETTINGS = dict(help_option_names=["-h", "--help"])  # terse help flags

DEBUG_ENV_VAR = "GIT_FILE_DEBUG"


def _configure_logging() -> None:
    # Enable debug logging if GIT_FILE_DEBUG environment variable is set
    if os.environ.get(DEBUG_ENV_VAR):
        logging.basicConfig(level=logging.DEBUG, format="[DEBUG %(name)s:%(lineno)d] %(message)s")


@click.group(context_settings=CONTEXT_SETTINGS)
@click.version_option(package_name="git-file")
@click.pass_context
def cli(ctx: click.Context) -> None:
    """Track single files from other git repositories, pinned to a commit."""
    _configure_logging()
    # Only create context if not already provided (e.g., by tests)
    if ctx.obj is None:
        try:
            ctx.obj = create_context()
        except ValueError as e:
            user_output(click.style("Error: ", fg="red") + str(e))
            raise SystemExit(1) from None


cli.add_command(add_cmd)
cli.add_command(rm_cmd)
cli.add_command(rm_cmd, name="remove")
cli.add_command(pull_cmd)
cli.add_command(list_cmd)
cli.add_command(config_group)


def main() -> None:
    """CLI entry point used by the `git-file` console script."""
    cli()
