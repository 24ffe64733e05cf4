"""
Drive a GameSession from a line source until the game ends.

The loop is UI-agnostic: it takes a `read_line` callable (None means end of
input) and a `render` callable for each RenderingIntent, so the same code
serves the terminal, the replay harness and the tests.
"""

from __future__ import annotations

import logging
from enum import Enum
from typing import Callable, Iterable, Optional

from .session import GameSession, RenderingIntent, Status

logger = logging.getLogger(__name__)

LineSource = Callable[[], Optional[str]]
Renderer = Callable[[RenderingIntent], None]


class Outcome(Enum):
    WON = "won"
    LOST = "lost"
    ENDED = "ended"   # input ran out before the game was decided


def lines_from(lines: Iterable[str]) -> LineSource:
    """Adapt an iterable of lines to a LineSource."""
    it = iter(lines)
    return lambda: next(it, None)


def read_stdin_line(prompt: str = "") -> Optional[str]:
    """
    input() with EOF (Ctrl-D) reported as None.

    A line the terminal encoding cannot decode comes back as U+FFFD so the
    session rejects it like any other bad guess.
    """
    try:
        return input(prompt)
    except EOFError:
        return None
    except UnicodeDecodeError as e:
        logger.debug("undecodable input line: %s", e)
        return "\ufffd"


def play(session: GameSession, read_line: LineSource, render: Renderer) -> Outcome:
    render(session.snapshot())

    while not session.is_over:
        line = read_line()
        if line is None:
            logger.debug("end of input after %d attempt(s)", session.attempt)
            return Outcome.ENDED
        render(session.submit(line))

    return Outcome.WON if session.status is Status.WON else Outcome.LOST
