"""Scratch files that hold a draft while the editor is open."""

from __future__ import annotations

import logging
import os
import tempfile
from pathlib import Path

from .errors import ContentReadError, WorkspaceCreationError

log = logging.getLogger(__name__)

DEFAULT_TEMPLATE = "# "
SCRATCH_PREFIX = ".tmp"
NOTE_SUFFIX = ".md"


def create_scratch(garden_dir: Path, template: str = DEFAULT_TEMPLATE) -> Path:
    """Create a seeded scratch file inside ``garden_dir`` and return its path.

    The file is created in the collection itself rather than the system temp
    directory so that committing it later is a same-filesystem rename.
    """

    try:
        fd, raw_path = tempfile.mkstemp(
            suffix=NOTE_SUFFIX, prefix=SCRATCH_PREFIX, dir=garden_dir
        )
    except OSError as exc:
        raise WorkspaceCreationError(
            f"Failed to create scratch file in {garden_dir}: {exc}"
        ) from exc

    path = Path(raw_path)
    try:
        with os.fdopen(fd, "w", encoding="utf-8", newline="") as fh:
            fh.write(template)
    except OSError as exc:
        raise WorkspaceCreationError(
            f"Failed to write template to scratch file: {exc}", scratch_path=path
        ) from exc

    log.debug("Created scratch file %s", path)
    return path


def read_scratch(path: Path) -> str:
    """Read the scratch file back from disk after the editor has exited."""

    try:
        return path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise ContentReadError(
            f"Failed to read edited note: {exc}", scratch_path=path
        ) from exc
