"""Quick append-only capture into the garden's spark file."""

from __future__ import annotations

import logging
from pathlib import Path

from ..errors import GardenError
from ..workspace import NOTE_SUFFIX

log = logging.getLogger(__name__)

SPARK_FILENAME = f"_spark{NOTE_SUFFIX}"


class SparkError(GardenError):
    """Raised when a message cannot be appended to the spark file."""


def append_spark(garden_dir: Path, message: str) -> Path:
    """Append ``message`` on a new line of ``_spark.md`` and return its path.

    The spark file collects thoughts to get them out of your head now and
    work on them later. It is created on first use and never truncated.
    """

    path = garden_dir / SPARK_FILENAME
    try:
        with path.open("a", encoding="utf-8") as fh:
            fh.write(f"\n{message}")
    except OSError as exc:
        raise SparkError(f"Failed to append to {path}: {exc}") from exc
    log.info("Appended %d characters to %s", len(message), path)
    return path
