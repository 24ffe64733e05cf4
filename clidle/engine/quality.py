"""
Per-letter feedback classification.

The integer values give the priority order used by the alphabet override
rule: Unknown < Wrong < WrongPlace < RightPlace.

Each value also has a one-character pattern symbol, matching the harness
pattern strings:
  'G' : RightPlace (green)
  'Y' : WrongPlace (yellow)
  '-' : Wrong      (gray)
  '?' : Unknown    (never guessed)
"""

from __future__ import annotations

from enum import IntEnum


class CharQuality(IntEnum):
    UNKNOWN = 0
    WRONG = 1
    WRONG_PLACE = 2
    RIGHT_PLACE = 3

    @property
    def symbol(self) -> str:
        return _SYMBOLS[self]

    @property
    def determined(self) -> bool:
        return self is not CharQuality.UNKNOWN

    @classmethod
    def from_symbol(cls, ch: str) -> "CharQuality":
        try:
            return _FROM_SYMBOL[ch]
        except KeyError as e:
            raise ValueError(f"Unknown pattern symbol: {ch!r}") from e


_SYMBOLS = {
    CharQuality.UNKNOWN: "?",
    CharQuality.WRONG: "-",
    CharQuality.WRONG_PLACE: "Y",
    CharQuality.RIGHT_PLACE: "G",
}
_FROM_SYMBOL = {v: k for k, v in _SYMBOLS.items()}
