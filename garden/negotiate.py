"""Interactive negotiation of the final filename."""

from __future__ import annotations

import enum
import logging
from typing import Callable

import click

from .errors import PromptError
from .slug import slugify

log = logging.getLogger(__name__)

PromptFunc = Callable[[str], str]
WarnFunc = Callable[[str], None]

CONFIRM_QUESTION = "Do you want a different title? (y/N): "
FILENAME_PROMPT = "Enter filename\n> "

YES_ANSWERS = frozenset({"y", "Y"})
NO_ANSWERS = frozenset({"n", "N", ""})


class State(enum.Enum):
    HAVE_TITLE = "have_title"
    NEED_TITLE = "need_title"


def prompt_stderr(text: str) -> str:
    """Read one line from the terminal, echoing ``text`` on stderr.

    Empty input is returned as ``""`` so callers decide what it means.
    """

    return click.prompt(
        text, default="", show_default=False, prompt_suffix="", err=True
    )


def warn_stderr(message: str) -> None:
    click.echo(message, err=True)


def confirmation_text(title: str) -> str:
    return (
        f"current title: `{title}`\n"
        f"resulting filename: {slugify(title)}.md\n"
        f"{CONFIRM_QUESTION}"
    )


def negotiate_filename(
    title: str | None,
    *,
    prompt_fn: PromptFunc | None = None,
    warn: WarnFunc | None = None,
    interactive: bool = True,
) -> str:
    """Settle on the raw title the final filename is derived from.

    Starts in ``HAVE_TITLE`` when ``title`` is given and in ``NEED_TITLE``
    otherwise. The returned string always slugifies to a non-empty token.

    With ``interactive=False`` a usable ``title`` is accepted as-is and a
    missing one raises :class:`PromptError` instead of blocking on input.

    Raises
    ------
    PromptError
        If reading an answer fails, or no title is available in
        non-interactive mode.
    """

    ask = prompt_fn or prompt_stderr
    notify = warn or warn_stderr

    current = title
    state = State.HAVE_TITLE if current else State.NEED_TITLE
    if current and not slugify(current):
        notify(f"Title `{current}` does not produce a usable filename.")
        state = State.NEED_TITLE

    if not interactive:
        if state is State.HAVE_TITLE and current:
            return current
        raise PromptError("No usable title found and prompting is disabled")

    while True:
        if state is State.HAVE_TITLE and current:
            answer = _read(ask, confirmation_text(current))
            if answer in NO_ANSWERS:
                log.debug("Keeping title %r", current)
                return current
            if answer in YES_ANSWERS:
                state = State.NEED_TITLE
            # Anything else asks the same question again.
            continue

        answer = _read(ask, FILENAME_PROMPT)
        if not answer.strip():
            continue
        if not slugify(answer):
            notify(f"`{answer}` does not produce a usable filename.")
            continue
        log.debug("User supplied filename %r", answer)
        return answer


def _read(ask: PromptFunc, text: str) -> str:
    try:
        answer = ask(text)
    except (click.Abort, EOFError, KeyboardInterrupt, OSError) as exc:
        raise PromptError("Failed to read answer from terminal") from exc
    return answer
