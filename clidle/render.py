"""
Terminal presentation of RenderingIntents.

Two modes:
  - color: ANSI tiles (green / yellow / white background). The echoed guess
    is overwritten in place with its colored version, one letter at a time,
    and rejection messages flash on the input line.
  - plain: no escape sequences; each guess is followed by its pattern string
    and the alphabet is shown as letters over symbols. Suitable for pipes.
"""

from __future__ import annotations

import sys
import time
from typing import Callable, Mapping, TextIO

from clidle.config import MISINPUT_DELAY_S, REVEAL_DELAY_S
from clidle.engine import CharQuality
from clidle.game import RenderingIntent, Status


class Ansi:
    RESET = "\033[0m"
    BLACK = "\033[30m"
    GRAY = "\033[30;1m"
    BG_GREEN = "\033[42m"
    BG_YELLOW = "\033[43m"
    BG_WHITE = "\033[47m"
    UP_LINE = "\033[F"
    ERASE_LINE = "\033[2K"


_TILE = {
    CharQuality.RIGHT_PLACE: Ansi.BG_GREEN + Ansi.BLACK,
    CharQuality.WRONG_PLACE: Ansi.BG_YELLOW + Ansi.BLACK,
    CharQuality.WRONG: Ansi.BG_WHITE + Ansi.GRAY,
}


def tile(letter: str, quality: CharQuality) -> str:
    """One letter colored by quality; UNKNOWN letters stay uncolored."""
    style = _TILE.get(quality)
    if style is None:
        return letter
    return f"{style}{letter}{Ansi.RESET}"


def format_alphabet(alphabet: Mapping[str, CharQuality], color: bool = True) -> str:
    if color:
        return "".join(tile(ch, q) for ch, q in alphabet.items())
    letters = "".join(alphabet)
    symbols = "".join(q.symbol for q in alphabet.values())
    return f"{letters}\n{symbols}"


class TerminalRenderer:
    """Callable renderer for clidle.game.play()."""

    def __init__(
            self,
            out: TextIO = sys.stdout,
            *,
            color: bool = True,
            delay: bool = True,
            sleep: Callable[[float], None] = time.sleep,
    ):
        self.out = out
        self.color = color
        self.delay = delay
        self._sleep = sleep
        self._started = False

    def _write(self, s: str) -> None:
        self.out.write(s)
        self.out.flush()

    def _pause(self, seconds: float) -> None:
        if self.delay:
            self._sleep(seconds)

    def __call__(self, intent: RenderingIntent) -> None:
        first, self._started = not self._started, True
        if intent.rejected is not None:
            self._misinput(intent.message or intent.rejected.reason)
        elif intent.accepted:
            self._guess(intent)
        elif first:
            self._alphabet(intent)
        elif self.color:
            # empty line: drop the blank line the terminal echoed
            self._write(Ansi.UP_LINE + Ansi.ERASE_LINE)

        if intent.status is Status.LOST and intent.solution is not None:
            self._write(f"The word was: {intent.solution}\n")

    def _misinput(self, message: str) -> None:
        if not self.color:
            self._write(message + "\n")
            return
        self._write(Ansi.UP_LINE + Ansi.ERASE_LINE + message)
        self._pause(MISINPUT_DELAY_S)
        self._write("\r" + Ansi.ERASE_LINE)

    def _guess(self, intent: RenderingIntent) -> None:
        if self.color:
            # overwrite the echoed input and the alphabet line above it
            self._write((Ansi.UP_LINE + Ansi.ERASE_LINE) * 2)
            for letter, quality in intent.guess:
                self._write(tile(letter, quality))
                self._pause(REVEAL_DELAY_S)
            self._write("\n")
        else:
            word = "".join(letter for letter, _ in intent.guess)
            self._write(f"{word}  {intent.pattern}\n")

        if intent.status is Status.PLAYING:
            self._alphabet(intent)

    def _alphabet(self, intent: RenderingIntent) -> None:
        self._write(format_alphabet(intent.alphabet, self.color) + "\n")
