"""Utilities for launching an editor on a scratch file."""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Callable

import click

from .errors import LaunchError

log = logging.getLogger(__name__)

LaunchFunc = Callable[..., None]

EDITOR_ENV_VARS = ("VISUAL", "EDITOR")


def resolve_editor(configured: str | None = None) -> str | None:
    """Return the editor command to use, or ``None`` for click's fallback.

    Precedence: the configured editor, then ``$VISUAL``, then ``$EDITOR``.
    """

    if configured and configured.strip():
        return configured.strip()
    for var in EDITOR_ENV_VARS:
        value = os.environ.get(var, "").strip()
        if value:
            return value
    return None


def launch_editor(path: Path, editor: str | None = None) -> None:
    """Open ``path`` in the user's editor and block until it exits."""

    command = resolve_editor(editor)
    log.info("Launching editor %s on %s", command or "<default>", path)
    try:
        click.edit(filename=str(path), editor=command)
    except click.ClickException as exc:
        raise LaunchError(
            f"Editor session failed: {exc.format_message()}", scratch_path=path
        ) from exc
    except OSError as exc:  # pragma: no cover - click wraps most spawn errors
        raise LaunchError(
            f"Failed to launch editor: {exc}", scratch_path=path
        ) from exc
