"""
Build a solutions list from the archive of past daily answers.

What it does:
- Downloads the page with historical answers.
- Parses visible text and extracts rows like: YYYY-MM-DD (Day) <num> <ANSWER>
- Captures the final UPPERCASE token of the configured length as the answer.
- Lowercases and de-duplicates while preserving calendar order.
"""

from __future__ import annotations

import logging
import re
from typing import Iterable, List

import requests
from bs4 import BeautifulSoup

from clidle.config import WORD_LENGTH

logger = logging.getLogger(__name__)

URL = "https://wordlehints.co.uk/wordle-past-answers/"


def _row_re(n: int) -> re.Pattern:
    return re.compile(r"(\d{4}-\d{2}-\d{2})\s*\([A-Za-z]+\)\s*\d+\s+([A-Z]{%d})\b" % n)


def unique_preserve_order(words: Iterable[str]) -> List[str]:
    seen = set()
    out = []
    for w in words:
        if w not in seen:
            seen.add(w)
            out.append(w)
    return out


def parse_answers(html: str, n: int = WORD_LENGTH) -> List[str]:
    """Extract lowercase answers from the archive page, oldest row first."""
    soup = BeautifulSoup(html, "html.parser")
    text = soup.get_text("\n", strip=True)
    answers = [m.group(2).lower() for m in _row_re(n).finditer(text)]
    return unique_preserve_order(answers)


def fetch_answers(url: str = URL, n: int = WORD_LENGTH, timeout: float = 30) -> List[str]:
    r = requests.get(url, timeout=timeout)
    r.raise_for_status()
    answers = parse_answers(r.text, n)
    logger.info("fetched %d answers from %s", len(answers), url)
    return answers
