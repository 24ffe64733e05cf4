"""
Game configuration constants.

Everything tunable lives here so the session, the CLI and the harness agree
on a single source of truth. Corpus paths can be overridden with the
CLIDLE_WORDS / CLIDLE_SOLUTIONS environment variables; everything else is
set through CLI flags.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Final

# Wordle rules.
WORD_LENGTH: Final[int] = 5
MAX_ATTEMPTS: Final[int] = 6

ALPHABET: Final[str] = "abcdefghijklmnopqrstuvwxyz"

# Default corpora, relative to the working directory.
WORDS_FILE: Final[str] = os.environ.get("CLIDLE_WORDS", "data/words.txt")
SOLUTIONS_FILE: Final[str] = os.environ.get("CLIDLE_SOLUTIONS", "data/solutions.txt")

# Presentation timings (seconds).
MISINPUT_DELAY_S: Final[float] = 0.75
REVEAL_DELAY_S: Final[float] = 0.25


@dataclass(frozen=True)
class GameConfig:
    """Rules for one session. Defaults are the classic 5 letters / 6 tries."""
    word_length: int = WORD_LENGTH
    max_attempts: int = MAX_ATTEMPTS

    def __post_init__(self):
        if self.word_length < 1:
            raise ValueError(f"word_length must be positive; got {self.word_length}")
        if self.max_attempts < 1:
            raise ValueError(f"max_attempts must be positive; got {self.max_attempts}")
