"""Error hierarchy for the write pipeline."""

from __future__ import annotations

from pathlib import Path


class GardenError(RuntimeError):
    """Base error for failures while capturing a note.

    When ``scratch_path`` is known it is appended to the message so the user
    can always recover the drafted content by hand.
    """

    def __init__(self, message: str, *, scratch_path: Path | None = None) -> None:
        if scratch_path is not None:
            message = f"{message} (draft kept at {scratch_path})"
        super().__init__(message)
        self.scratch_path = scratch_path


class WorkspaceCreationError(GardenError):
    """Raised when the scratch file cannot be created or seeded."""


class LaunchError(GardenError):
    """Raised when the editor cannot be started or exits abnormally."""


class ContentReadError(GardenError):
    """Raised when the scratch file cannot be read back after editing."""


class PromptError(GardenError):
    """Raised when the filename negotiation cannot read an answer."""


class CommitError(GardenError):
    """Raised when the scratch file cannot be moved to its final name."""
