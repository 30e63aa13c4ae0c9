from dataclasses import replace
from pathlib import Path

import click

from git_file.cli.ensure import Ensure
from git_file.cli.error_boundary import cli_error_boundary
from git_file.cli.output import machine_output, user_output
from git_file.core.context import GitFileContext
from git_file.core.global_config import GlobalConfig, global_config_path, save_global_config

CONFIG_KEYS = ("temp_root", "short_sha_length")


def _format_value(config: GlobalConfig, key: str) -> str | None:
    match key:
        case "temp_root":
            return str(config.temp_root) if config.temp_root is not None else None
        case "short_sha_length":
            return str(config.short_sha_length)
        case _:
            return None


def _update_global_config_field(current_config: GlobalConfig, key: str, value: str) -> GlobalConfig:
    """Return a new GlobalConfig with one field set from its string form.

    An empty value for temp_root unsets it.

    Raises:
        SystemExit: If the key or value is invalid
    """
    match key:
        case "temp_root":
            if not value:
                return replace(current_config, temp_root=None)
            return replace(current_config, temp_root=Path(value).expanduser().resolve())
        case "short_sha_length":
            Ensure.invariant(
                value.isdigit() and 4 <= int(value) <= 40,
                f"Invalid value for short_sha_length: {value} (expected 4-40)",
            )
            return replace(current_config, short_sha_length=int(value))
        case _:
            user_output(click.style("Error: ", fg="red") + f"Invalid config key: {key}")
            raise SystemExit(1)


@click.group("config")
def config_group() -> None:
    """Manage global git-file configuration."""


@config_group.command("list")
@click.pass_obj
def config_list(ctx: GitFileContext) -> None:
    """Print configuration values."""
    user_output(click.style("Global configuration", bold=True) + f" ({global_config_path()}):")
    for key in CONFIG_KEYS:
        value = _format_value(ctx.global_config, key)
        machine_output(f"  {key}={value if value is not None else ''}")


@config_group.command("get")
@click.argument("key", metavar="KEY")
@click.pass_obj
def config_get(ctx: GitFileContext, key: str) -> None:
    """Print the value of a single configuration key."""
    Ensure.invariant(key in CONFIG_KEYS, f"Invalid config key: {key}")
    value = Ensure.not_none(_format_value(ctx.global_config, key), f"Key not set: {key}")
    machine_output(value)


@config_group.command("set")
@click.argument("key", metavar="KEY")
@click.argument("value", metavar="VALUE")
@click.pass_obj
@cli_error_boundary
def config_set(ctx: GitFileContext, key: str, value: str) -> None:
    """Set a configuration key, writing ~/.git-file/config.toml."""
    new_config = _update_global_config_field(ctx.global_config, key, value)
    save_global_config(new_config, global_config_path())
    user_output(f"Set {key}={_format_value(new_config, key) or ''}")
