"""Configuration management for the garden CLI."""

from __future__ import annotations

import tomllib
from dataclasses import dataclass
from pathlib import Path

DEFAULT_CONFIG_DIR = Path("~/.config/garden").expanduser()
DEFAULT_CONFIG_PATH = DEFAULT_CONFIG_DIR / "config.toml"
DEFAULT_GARDEN_DIR = Path("~/.garden").expanduser()


class ConfigError(RuntimeError):
    """Base error for configuration related issues."""


class MissingConfigError(ConfigError):
    """Raised when an explicitly requested configuration file is missing."""

    def __init__(self, path: Path) -> None:
        super().__init__(f"Configuration file not found at {path}")
        self.path = path


class InvalidConfigError(ConfigError):
    """Raised when the configuration file holds malformed values."""


@dataclass(slots=True)
class GardenConfig:
    """In-memory representation of the garden configuration file."""

    garden_path: Path
    editor: str | None = None
    source_path: Path | None = None


def load_config(path: Path | None = None) -> GardenConfig:
    """Load configuration from ``path`` or the default location.

    Parameters
    ----------
    path:
        Optional location of the configuration file. When ``None`` the default
        path (``~/.config/garden/config.toml``) is used, and a missing file
        simply yields the defaults.

    Raises
    ------
    MissingConfigError
        If ``path`` was given explicitly and does not exist.
    InvalidConfigError
        If the file cannot be parsed or holds values of the wrong type.
    """

    config_path = (path or DEFAULT_CONFIG_PATH).expanduser()
    if not config_path.exists():
        if path is not None:
            raise MissingConfigError(config_path)
        return GardenConfig(garden_path=DEFAULT_GARDEN_DIR)

    try:
        with config_path.open("rb") as fh:
            raw = tomllib.load(fh)
    except tomllib.TOMLDecodeError as exc:
        raise InvalidConfigError(f"Invalid TOML in {config_path}: {exc}") from exc
    except OSError as exc:
        raise ConfigError(f"Cannot read configuration at {config_path}: {exc}") from exc

    section = raw.get("garden", {})
    if not isinstance(section, dict):
        raise InvalidConfigError("'garden' section must be a table")

    # Relative garden paths are resolved against the configuration directory.
    garden_raw = section.get("garden_path")
    if garden_raw is None:
        garden_path = DEFAULT_GARDEN_DIR
    elif isinstance(garden_raw, str) and garden_raw.strip():
        gp = Path(garden_raw.strip()).expanduser()
        garden_path = gp if gp.is_absolute() else (config_path.parent / gp)
        garden_path = garden_path.resolve()
    else:
        raise InvalidConfigError("'garden_path' must be a non-empty string")

    editor = section.get("editor")
    if editor is not None and not isinstance(editor, str):
        raise InvalidConfigError("'editor' must be a string when provided")

    return GardenConfig(
        garden_path=garden_path,
        editor=editor or None,
        source_path=config_path,
    )


def bootstrap_config_file(path: Path) -> bool:
    """Create a default config file if missing.

    Returns True when the file was created, False if it already existed.
    """

    if path.exists():
        return False

    path.parent.mkdir(parents=True, exist_ok=True)
    default_content = (
        "[garden]\n"
        '# garden_path = "~/.garden"\n'
        '# editor = "vim"\n'
    )
    path.write_text(default_content, encoding="utf-8")
    return True
