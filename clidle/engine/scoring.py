"""
Clidle scoring (feedback) for a (guess, solution) pair.

Rules for the letter at `position`:
  1) same letter at the same position in the solution   -> RIGHT_PLACE
  2) the letter occurs at some other solution index j,
     and the guess is not already exact at j            -> WRONG_PLACE
  3) otherwise                                          -> WRONG

This is an existence check, not a multiplicity count: a letter that occurs
once in the solution can be marked WRONG_PLACE at several guess positions.
Example:
  score("array", "crane") -> "YG-Y-"    (both a's are yellow)
A frequency-balanced scorer would report "YG---" here.
"""

from __future__ import annotations

from typing import List, Sequence

from .quality import CharQuality


def qualify(guess: Sequence, solution: Sequence, position: int) -> CharQuality:
    """
    Classify guess[position] against `solution`.

    Preconditions:
      - len(guess) == len(solution)
      - 0 <= position < len(guess)
    """
    c = guess[position]

    if solution[position] == c:
        return CharQuality.RIGHT_PLACE

    for j in range(len(solution)):
        # A match elsewhere only counts if that slot isn't already solved
        if solution[j] == c and guess[j] != solution[j]:
            return CharQuality.WRONG_PLACE

    return CharQuality.WRONG


def score(guess: Sequence, solution: Sequence) -> List[CharQuality]:
    """Qualify every position of `guess`, in order."""
    if len(guess) != len(solution):
        raise ValueError(
            f"Guess and solution must be the same length; got {len(guess)} and {len(solution)}")
    return [qualify(guess, solution, i) for i in range(len(guess))]


def to_pattern(qualities: Sequence[CharQuality]) -> str:
    """Render qualities as a pattern string, e.g. "-GGYG"."""
    return "".join(q.symbol for q in qualities)
