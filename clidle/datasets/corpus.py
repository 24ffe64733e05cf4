"""
Word corpus built from a newline-delimited byte buffer.

The corpus keeps the buffer it was loaded from and stores one TextSlice per
non-empty line, in file order. No word is copied out of the buffer.

Membership is a linear scan on purpose: the lists are a few thousand words
and are queried once per turn, so an index would buy nothing observable.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterator, Tuple

import numpy as np

from clidle.errors import FatalResourceError
from clidle.textslice import TextSlice
from .io import read_buffer

logger = logging.getLogger(__name__)

NEWLINE = b"\n"


def count_lines(data) -> int:
    """Number of newline bytes in `data` (zero-copy view via numpy)."""
    arr = np.frombuffer(data, dtype=np.uint8)
    return int(np.count_nonzero(arr == NEWLINE[0]))


class WordCorpus:
    """Ordered, immutable list of word slices over one shared buffer."""

    def __init__(self, buffer, words: Tuple[TextSlice, ...]):
        self._buffer = buffer
        self._words = words

    @classmethod
    def load(cls, data, length: int | None = None) -> "WordCorpus":
        """
        Tokenize the first `length` bytes of `data` (all of it when None).

        Runs of newlines collapse, so blank lines contribute nothing; a last
        line without a trailing newline is still kept.
        """
        whole = TextSlice.from_buffer(data, length)
        words = tuple(whole.split_collapsing(NEWLINE))
        if logger.isEnabledFor(logging.DEBUG):
            logger.debug("corpus: %d bytes, %d newlines, %d words",
                         len(whole), count_lines(whole.view()), len(words))
        return cls(data, words)

    @classmethod
    def from_file(cls, path: Path | str) -> "WordCorpus":
        corpus = cls.load(read_buffer(path))
        logger.info("loaded %d words from %s", len(corpus), path)
        return corpus

    def count(self) -> int:
        return len(self._words)

    def contains(self, candidate: str) -> bool:
        """True iff some word equals `candidate` exactly (O(n) scan)."""
        for w in self._words:
            if w.equals_text(candidate):
                return True
        return False

    def choose(self, index: int) -> TextSlice:
        """
        The word at `index`, used to pick a session's solution.

        Raises FatalResourceError when the corpus is empty (nothing to play)
        and IndexError when `index` is out of range.
        """
        if not self._words:
            raise FatalResourceError("solution list contains 0 words")
        if not 0 <= index < len(self._words):
            raise IndexError(f"solution index {index} out of range [0, {len(self._words)})")
        return self._words[index]

    def __contains__(self, candidate) -> bool:
        if isinstance(candidate, TextSlice):
            candidate = str(candidate)
        return self.contains(candidate)

    def __len__(self) -> int:
        return len(self._words)

    def __getitem__(self, i: int) -> TextSlice:
        return self._words[i]

    def __iter__(self) -> Iterator[TextSlice]:
        return iter(self._words)

    def __repr__(self) -> str:
        return f"WordCorpus({len(self._words)} words)"
