"""CLI tests for git-file config list/get/set."""

from pathlib import Path

from click.testing import CliRunner

from git_file.cli.cli import cli
from git_file.core.context import GitFileContext
from git_file.core.global_config import GlobalConfig, load_global_config


def test_config_list_shows_all_keys() -> None:
    ctx = GitFileContext.for_test(
        global_config=GlobalConfig(temp_root=Path("/var/tmp/gf"), short_sha_length=9)
    )

    result = CliRunner().invoke(cli, ["config", "list"], obj=ctx)

    assert result.exit_code == 0, result.output
    assert "  temp_root=/var/tmp/gf" in result.output
    assert "  short_sha_length=9" in result.output


def test_config_get_value() -> None:
    ctx = GitFileContext.for_test(global_config=GlobalConfig(short_sha_length=10))

    result = CliRunner().invoke(cli, ["config", "get", "short_sha_length"], obj=ctx)

    assert result.exit_code == 0
    assert result.output.strip() == "10"


def test_config_get_unset_key_fails() -> None:
    result = CliRunner().invoke(
        cli, ["config", "get", "temp_root"], obj=GitFileContext.for_test()
    )

    assert result.exit_code == 1
    assert "Key not set: temp_root" in result.output


def test_config_get_invalid_key_fails() -> None:
    result = CliRunner().invoke(cli, ["config", "get", "nope"], obj=GitFileContext.for_test())

    assert result.exit_code == 1
    assert "Invalid config key: nope" in result.output


def test_config_set_writes_global_config(tmp_path: Path) -> None:
    result = CliRunner().invoke(
        cli,
        ["config", "set", "short_sha_length", "12"],
        obj=GitFileContext.for_test(),
        env={"HOME": str(tmp_path)},
    )

    assert result.exit_code == 0, result.output
    assert "Set short_sha_length=12" in result.output
    config = load_global_config(tmp_path / ".git-file" / "config.toml")
    assert config.short_sha_length == 12


def test_config_set_empty_temp_root_unsets_it(tmp_path: Path) -> None:
    config_path = tmp_path / ".git-file" / "config.toml"
    config_path.parent.mkdir()
    config_path.write_text('temp_root = "/var/tmp/gf"\n', encoding="utf-8")
    ctx = GitFileContext.for_test(global_config=load_global_config(config_path))

    result = CliRunner().invoke(
        cli, ["config", "set", "temp_root", ""], obj=ctx, env={"HOME": str(tmp_path)}
    )

    assert result.exit_code == 0, result.output
    assert load_global_config(config_path).temp_root is None


def test_config_set_rejects_out_of_range_length(tmp_path: Path) -> None:
    result = CliRunner().invoke(
        cli,
        ["config", "set", "short_sha_length", "2"],
        obj=GitFileContext.for_test(),
        env={"HOME": str(tmp_path)},
    )

    assert result.exit_code == 1
    assert "Invalid value for short_sha_length" in result.output
    assert not (tmp_path / ".git-file" / "config.toml").exists()


def test_malformed_global_config_is_reported_at_startup(tmp_path: Path) -> None:
    config_path = tmp_path / ".git-file" / "config.toml"
    config_path.parent.mkdir()
    config_path.write_text("temp_root = [\n", encoding="utf-8")

    result = CliRunner().invoke(cli, ["config", "list"], env={"HOME": str(tmp_path)})

    assert result.exit_code == 1
    assert "Error: Malformed config file" in result.output
