"""Global configuration data structures and loading.

Provides immutable global config data loaded from ~/.git-file/config.toml.
The file is optional; every field has a default.
"""

import tomllib
from dataclasses import dataclass
from pathlib import Path

import tomlkit

DEFAULT_SHORT_SHA_LENGTH = 7


@dataclass(frozen=True)
class GlobalConfig:
    """Immutable global configuration data.

    Loaded once at CLI entry point and stored in GitFileContext.
    """

    temp_root: Path | None = None  # parent of scoped clone directories
    short_sha_length: int = DEFAULT_SHORT_SHA_LENGTH


def global_config_path() -> Path:
    """Get the path to the global config file."""
    return Path.home() / ".git-file" / "config.toml"


def _parse_short_sha_length(value: object, config_path: Path) -> int:
    if isinstance(value, bool) or not isinstance(value, int) or not 4 <= value <= 40:
        raise ValueError(f"'short_sha_length' must be an integer from 4 to 40 in {config_path}")
    return value


def load_global_config(path: Path | None = None) -> GlobalConfig:
    """Load global config from ~/.git-file/config.toml.

    Args:
        path: Config file path (defaults to ~/.git-file/config.toml)

    Returns:
        GlobalConfig instance; defaults if the file does not exist

    Raises:
        ValueError: If config is malformed or holds invalid values
    """
    config_path = path if path is not None else global_config_path()
    if not config_path.exists():
        return GlobalConfig()

    try:
        data = tomllib.loads(config_path.read_text(encoding="utf-8"))
    except tomllib.TOMLDecodeError as e:
        raise ValueError(f"Malformed config file {config_path}: {e}") from e

    temp_root = data.get("temp_root")
    if temp_root is not None and not isinstance(temp_root, str):
        raise ValueError(f"'temp_root' must be a path string in {config_path}")

    return GlobalConfig(
        temp_root=Path(temp_root).expanduser() if temp_root else None,
        short_sha_length=_parse_short_sha_length(
            data.get("short_sha_length", DEFAULT_SHORT_SHA_LENGTH), config_path
        ),
    )


def save_global_config(config: GlobalConfig, path: Path | None = None) -> None:
    """Save global config, preserving existing comments and unknown keys.

    Args:
        config: GlobalConfig instance to save
        path: Config file path (defaults to ~/.git-file/config.toml)
    """
    config_path = path if path is not None else global_config_path()
    config_path.parent.mkdir(parents=True, exist_ok=True)

    if config_path.exists():
        with config_path.open("r", encoding="utf-8") as f:
            doc = tomlkit.load(f)
    else:
        doc = tomlkit.document()
        doc.add(tomlkit.comment("Global git-file configuration"))

    if config.temp_root is not None:
        doc["temp_root"] = str(config.temp_root)
    elif "temp_root" in doc:
        del doc["temp_root"]
    doc["short_sha_length"] = config.short_sha_length

    with config_path.open("w", encoding="utf-8") as f:
        tomlkit.dump(doc, f)
