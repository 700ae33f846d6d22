"""Move a finished scratch file to its final place in the garden."""

from __future__ import annotations

import itertools
import logging
import os
from pathlib import Path
from typing import Iterator

from .errors import CommitError
from .workspace import NOTE_SUFFIX

log = logging.getLogger(__name__)


def candidate_paths(garden_dir: Path, base_name: str) -> Iterator[Path]:
    """Yield ``base.md``, ``base1.md``, ``base2.md``, ... inside ``garden_dir``."""

    yield garden_dir / f"{base_name}{NOTE_SUFFIX}"
    for counter in itertools.count(1):
        yield garden_dir / f"{base_name}{counter}{NOTE_SUFFIX}"


def commit_scratch(scratch_path: Path, garden_dir: Path, base_name: str) -> Path:
    """Rename ``scratch_path`` to the first unused candidate and return it.

    Existence is checked right before the rename, which is the only write the
    pipeline makes to the collection. The check and the rename are not atomic
    together, so two concurrent writers could still race.

    Raises
    ------
    CommitError
        If probing a candidate or the rename fails. The scratch file is left
        untouched.
    """

    for dest in candidate_paths(garden_dir, base_name):
        try:
            if _occupied(dest):
                log.debug("Destination %s already exists, trying next", dest)
                continue
            os.rename(scratch_path, dest)
        except OSError as exc:
            raise CommitError(
                f"Failed to move note to {dest}: {exc}", scratch_path=scratch_path
            ) from exc
        log.info("Committed %s as %s", scratch_path.name, dest)
        return dest
    raise AssertionError("unreachable")  # pragma: no cover


def _occupied(path: Path) -> bool:
    # lstat so that a dangling symlink still counts as taken.
    try:
        os.lstat(path)
    except FileNotFoundError:
        return False
    return True
