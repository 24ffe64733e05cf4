"""
Best-known quality per letter across all guesses of a session.

A letter's quality only ever becomes more informative:
  - RIGHT_PLACE is final.
  - UNKNOWN and WRONG are replaced by any determined quality.
  - WRONG_PLACE is replaced only by RIGHT_PLACE.

Note that WRONG can be replaced by WRONG_PLACE or RIGHT_PLACE: the scorer
can mark a letter WRONG at one position (e.g. a surplus duplicate) while the
same letter is found elsewhere later.
"""

from __future__ import annotations

from typing import Dict, Iterator, Tuple

from clidle.config import ALPHABET
from .quality import CharQuality


def overrides(current: CharQuality, proposed: CharQuality) -> bool:
    """Should `proposed` replace `current` in the alphabet?"""
    if current is CharQuality.RIGHT_PLACE:
        return False

    # UNKNOWN carries no information and never replaces anything
    if proposed is CharQuality.UNKNOWN:
        return False

    if current in (CharQuality.UNKNOWN, CharQuality.WRONG):
        return True

    # current is WRONG_PLACE
    return proposed is CharQuality.RIGHT_PLACE


class AlphabetTracker:
    """Per-letter state for a single session; never shared between games."""

    def __init__(self, alphabet: str = ALPHABET):
        self._alphabet = alphabet
        self._state: Dict[str, CharQuality] = {}
        self.reset()

    def reset(self) -> None:
        self._state = {ch: CharQuality.UNKNOWN for ch in self._alphabet}

    def quality(self, letter: str) -> CharQuality:
        return self._state[letter]

    def update(self, letter: str, proposed: CharQuality) -> bool:
        """
        Apply the override rule for one letter.

        Returns True if the stored quality changed. Letters outside the
        alphabet are not tracked and return False.
        """
        current = self._state.get(letter)
        if current is None:
            return False
        if overrides(current, proposed):
            self._state[letter] = proposed
            return current is not proposed
        return False

    def snapshot(self) -> Dict[str, CharQuality]:
        """Copy of the state, in alphabet order."""
        return dict(self._state)

    def __iter__(self) -> Iterator[Tuple[str, CharQuality]]:
        return iter(self._state.items())

    def __len__(self) -> int:
        return len(self._state)
