"""
Exception taxonomy for clidle.

- FatalResourceError: word lists cannot be read; the game cannot start.
- GuessRejected (InputLengthError, UnknownWordError): a submitted line was
  refused. The session catches these itself and reports them in the
  rendering intent; no attempt is consumed.
- GameOverError: a guess was submitted after the game already ended.
"""

from __future__ import annotations


class ClidleError(Exception):
    """Base class for all clidle errors."""


class FatalResourceError(ClidleError):
    """Word-list bytes are missing, unreadable or empty."""


class GuessRejected(ClidleError):
    """A submitted line was not accepted as a guess."""

    reason = "Rejected"

    def __init__(self, guess: str, reason: str | None = None):
        self.guess = guess
        if reason is not None:
            self.reason = reason
        super().__init__(f"{self.reason}: {guess!r}")


class InputLengthError(GuessRejected):
    reason = "Wrong length"


class UnknownWordError(GuessRejected):
    reason = "Not in word list"


class GameOverError(ClidleError):
    """The session is already WON or LOST."""
