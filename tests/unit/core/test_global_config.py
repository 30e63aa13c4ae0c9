"""Tests for global config loading and saving."""

from pathlib import Path

import pytest

from git_file.core.global_config import GlobalConfig, load_global_config, save_global_config


def test_missing_file_yields_defaults(tmp_path: Path) -> None:
    assert load_global_config(tmp_path / "config.toml") == GlobalConfig()


def test_loads_values(tmp_path: Path) -> None:
    path = tmp_path / "config.toml"
    path.write_text('temp_root = "/var/tmp/git-file"\nshort_sha_length = 12\n', encoding="utf-8")

    config = load_global_config(path)

    assert config == GlobalConfig(temp_root=Path("/var/tmp/git-file"), short_sha_length=12)


def test_temp_root_expands_user(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("HOME", str(tmp_path))
    path = tmp_path / "config.toml"
    path.write_text('temp_root = "~/scratch"\n', encoding="utf-8")

    assert load_global_config(path).temp_root == tmp_path / "scratch"


def test_malformed_toml_raises_value_error(tmp_path: Path) -> None:
    path = tmp_path / "config.toml"
    path.write_text("temp_root = [unterminated\n", encoding="utf-8")

    with pytest.raises(ValueError, match="Malformed config file"):
        load_global_config(path)


@pytest.mark.parametrize("value", ["3", "41", "true", '"7"'])
def test_invalid_short_sha_length_raises(tmp_path: Path, value: str) -> None:
    path = tmp_path / "config.toml"
    path.write_text(f"short_sha_length = {value}\n", encoding="utf-8")

    with pytest.raises(ValueError, match="short_sha_length"):
        load_global_config(path)


def test_non_string_temp_root_raises(tmp_path: Path) -> None:
    path = tmp_path / "config.toml"
    path.write_text("temp_root = 5\n", encoding="utf-8")

    with pytest.raises(ValueError, match="temp_root"):
        load_global_config(path)


def test_save_creates_file_and_round_trips(tmp_path: Path) -> None:
    path = tmp_path / "nested" / "config.toml"
    config = GlobalConfig(temp_root=Path("/var/tmp/git-file"), short_sha_length=10)

    save_global_config(config, path)

    assert load_global_config(path) == config
    assert path.read_text(encoding="utf-8").startswith("# Global git-file configuration")


def test_save_preserves_comments_and_unknown_keys(tmp_path: Path) -> None:
    path = tmp_path / "config.toml"
    path.write_text(
        '# my settings\nextra = "keep me"\ntemp_root = "/old"\nshort_sha_length = 7\n',
        encoding="utf-8",
    )

    save_global_config(GlobalConfig(temp_root=None, short_sha_length=9), path)

    content = path.read_text(encoding="utf-8")
    assert "# my settings" in content
    assert 'extra = "keep me"' in content
    assert "temp_root" not in content
    assert "short_sha_length = 9" in content
