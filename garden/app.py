"""Application bootstrap and context container for the garden CLI."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path

from .config import ConfigError, GardenConfig, load_config

log = logging.getLogger(__name__)


class GardenDirError(ConfigError):
    """Raised when the collection directory is missing or not a directory."""


@dataclass(slots=True)
class AppContext:
    """Aggregates configuration for the CLI lifecycle."""

    config: GardenConfig
    garden_dir: Path


def bootstrap(config_path: Path | None, garden_path: Path | None = None) -> AppContext:
    """Load configuration and locate the collection directory.

    ``garden_path`` (from ``--garden-path`` or ``GARDEN_PATH``) wins over the
    configured location. The directory must already exist; it is never
    created here.
    """

    config = load_config(config_path)
    garden_dir = (garden_path or config.garden_path).expanduser()

    if not garden_dir.exists():
        raise GardenDirError(
            f"Garden directory {garden_dir} does not exist. Create it first."
        )
    if not garden_dir.is_dir():
        raise GardenDirError(f"Garden path {garden_dir} is not a directory.")

    log.debug("Using garden directory %s", garden_dir)
    return AppContext(config=config, garden_dir=garden_dir)
