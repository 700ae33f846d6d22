"""Heuristic title lookup in markdown text."""

from __future__ import annotations

HEADING_MARKER = "# "


def find_heading(content: str) -> str | None:
    """Return the text of the first level-one heading in ``content``.

    A heading is a line starting with ``"# "`` (one literal space is required,
    so ``"#tag"`` never matches). Headings that are empty once trimmed are
    skipped, which lets the seeded ``"# "`` template line be ignored.

    This is a line scan, not a markdown parse: a ``# `` line inside a fenced
    code block still counts.
    """

    for raw_line in content.split("\n"):
        line = raw_line.rstrip("\r")
        if not line.startswith(HEADING_MARKER):
            continue
        title = line[len(HEADING_MARKER) :].strip()
        if title:
            return title
    return None
