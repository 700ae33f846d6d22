"""Capture-to-commit workflow used by the ``write`` command."""

from __future__ import annotations

import logging
from pathlib import Path

from ..commit import commit_scratch
from ..editor import LaunchFunc
from ..editor import launch_editor as default_launch_editor
from ..errors import PromptError
from ..headings import find_heading
from ..negotiate import PromptFunc, WarnFunc, negotiate_filename
from ..slug import slugify
from ..workspace import create_scratch, read_scratch

log = logging.getLogger(__name__)


def write_note(
    garden_dir: Path,
    title: str | None = None,
    *,
    launch_fn: LaunchFunc | None = None,
    prompt_fn: PromptFunc | None = None,
    warn: WarnFunc | None = None,
    editor: str | None = None,
    interactive: bool = True,
) -> Path:
    """Let the user write a note in their editor and file it in ``garden_dir``.

    An explicit ``title`` names the note directly; otherwise the first
    ``# `` heading of the edited text is offered for confirmation, or the user
    is asked for a filename when there is none. Returns the final path.

    Any failure after the scratch file exists leaves it on disk and reports
    its path through the raised :class:`~garden.errors.GardenError`.
    """

    launch = launch_fn or default_launch_editor

    scratch = create_scratch(garden_dir)
    launch(scratch, editor=editor)
    content = read_scratch(scratch)

    if title is not None and slugify(title):
        raw_title = title
    else:
        inferred = title if title is not None else find_heading(content)
        log.info("Inferred title: %r", inferred)
        try:
            raw_title = negotiate_filename(
                inferred, prompt_fn=prompt_fn, warn=warn, interactive=interactive
            )
        except PromptError as exc:
            raise PromptError(str(exc), scratch_path=scratch) from exc

    return commit_scratch(scratch, garden_dir, slugify(raw_title))
