"""
One game: solution, attempts, alphabet knowledge and the win/loss machine.

States:
  PLAYING(attempt)  attempt in 0..max_attempts-1
  WON               terminal
  LOST              terminal; the solution is revealed exactly once, in the
                    intent returned by the losing submit()

submit(line) never raises for bad input. Empty lines are ignored, a wrong
length or unknown word is reported in the returned RenderingIntent, and in
all three cases nothing is mutated and no attempt is consumed. Only a
submit() after the game is over raises (GameOverError).

The session knows nothing about terminals: every transition yields a
RenderingIntent for whatever presentation layer is attached.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, List, Optional, Tuple, Union

from clidle.config import GameConfig
from clidle.datasets import WordCorpus
from clidle.engine import AlphabetTracker, CharQuality, qualify, to_pattern
from clidle.errors import GameOverError, GuessRejected, InputLengthError, UnknownWordError
from clidle.textslice import TextSlice

logger = logging.getLogger(__name__)


class Status(Enum):
    PLAYING = "playing"
    WON = "won"
    LOST = "lost"


@dataclass(frozen=True)
class RenderingIntent:
    """What the presentation layer should show after a submission."""
    status: Status
    attempt: int
    max_attempts: int
    guess: Tuple[Tuple[str, CharQuality], ...] = ()
    alphabet: Dict[str, CharQuality] = field(default_factory=dict)
    message: Optional[str] = None
    rejected: Optional[GuessRejected] = None
    solution: Optional[str] = None

    @property
    def accepted(self) -> bool:
        return bool(self.guess)

    @property
    def pattern(self) -> str:
        return to_pattern([q for _, q in self.guess])


class GameSession:
    def __init__(
            self,
            solution: Union[TextSlice, str],
            words: WordCorpus,
            config: GameConfig = GameConfig(),
    ):
        # The solution is five bytes; an owned str keeps scoring simple.
        self._solution = str(solution)
        if len(self._solution) != config.word_length:
            raise ValueError(
                f"solution must have {config.word_length} letters; got {self._solution!r}")

        self.words = words
        self.config = config
        self.alphabet = AlphabetTracker()
        self.attempt = 0
        self.status = Status.PLAYING
        # (guess, pattern) for every accepted guess, in order
        self.history: List[Tuple[str, str]] = []

    @property
    def solution(self) -> str:
        return self._solution

    @property
    def is_over(self) -> bool:
        return self.status is not Status.PLAYING

    def snapshot(self, **kwargs) -> RenderingIntent:
        """Intent describing the current state without a new guess."""
        return RenderingIntent(
            status=self.status,
            attempt=self.attempt,
            max_attempts=self.config.max_attempts,
            alphabet=self.alphabet.snapshot(),
            **kwargs,
        )

    def validate(self, guess: str) -> None:
        """Raise InputLengthError / UnknownWordError for an unacceptable guess.

        Length is measured in encoded bytes, the unit the corpus stores, so
        "cr\u00e2ne" (6 bytes) is the wrong length rather than an unknown word.
        """
        if len(TextSlice.from_text(guess)) != self.config.word_length:
            raise InputLengthError(guess)
        if not self.words.contains(guess):
            raise UnknownWordError(guess)

    def submit(self, raw_line: str) -> RenderingIntent:
        if self.is_over:
            raise GameOverError(f"game already {self.status.value}")

        guess = raw_line.rstrip("\r\n")
        if not guess:
            return self.snapshot()

        try:
            self.validate(guess)
        except GuessRejected as e:
            logger.debug("rejected %r: %s", guess, e.reason)
            return self.snapshot(message=e.reason, rejected=e)

        # Score first, then fold into the alphabet position by position
        scored = []
        for i, letter in enumerate(guess):
            quality = qualify(guess, self._solution, i)
            self.alphabet.update(letter, quality)
            scored.append((letter, quality))

        pattern = to_pattern([q for _, q in scored])
        self.history.append((guess, pattern))

        solution = None
        if guess == self._solution:
            self.status = Status.WON
        else:
            self.attempt += 1
            if self.attempt == self.config.max_attempts:
                self.status = Status.LOST
                solution = self._solution

        logger.debug("guess %d %s %s -> %s", len(self.history), guess, pattern, self.status.value)
        return self.snapshot(guess=tuple(scored), solution=solution)
