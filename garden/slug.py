"""Filename stems derived from free text."""

from __future__ import annotations

from slugify import slugify as _slugify

MAX_SLUG_LENGTH = 80


def slugify(text: str, max_length: int = MAX_SLUG_LENGTH) -> str:
    """Return a lowercase, hyphen separated ASCII token for ``text``.

    Unicode is transliterated (``"Café"`` becomes ``"cafe"``), anything outside
    ``[a-z0-9]`` acts as a separator and runs of separators collapse into a
    single hyphen. Empty or punctuation-only input yields ``""``.

    Long input is cut at a word boundary so the stem, plus any collision
    counter and the ``.md`` suffix, stays well under filesystem name limits.
    """

    slug = _slugify(
        text,
        lowercase=True,
        separator="-",
        max_length=max_length,
        word_boundary=True,
    )
    return slug.strip("-")
