"""
Pre-flight check for the two corpora clidle reads.

solutions.txt holds the words a game may pick, words.txt every accepted
guess. Both must be one lowercase a–z word of exactly N bytes per line, and
every solution must also be a word, or that game could never be won.

The game itself never runs this (corpora are trusted at play time); it backs
`play --check` and the wordlist block of the replay manifest.

    rep = validate_wordlists(5, "data/solutions.txt", "data/words.txt")
    print(pretty_summary(rep))
"""

from __future__ import annotations

import hashlib
from dataclasses import dataclass, asdict
from pathlib import Path
from typing import Dict, List, Set, Tuple

from clidle.textslice import NPOS, TextSlice
from .corpus import NEWLINE, count_lines
from .io import read_buffer

# Roles in the order they are checked and reported
ROLES = ("solutions", "words")


@dataclass
class FileReport:
    path: str
    exists: bool
    lines: int           # physical lines, blank ones included
    count: int           # valid words
    unique_count: int
    invalid_lines: int
    sha256: str          # of the raw bytes; "" when missing


@dataclass
class ValidationReport:
    N: int
    solutions: FileReport
    words: FileReport
    solutions_subset_words: bool
    passed: bool
    issues: List[str]


def _is_word(w: TextSlice, N: int) -> bool:
    return len(w) == N and all(0x61 <= b <= 0x7A for b in w)


def _line_total(data: bytes) -> int:
    n = count_lines(data)
    if data and not data.endswith(NEWLINE):
        n += 1
    return n


def _check(data: bytes, N: int) -> Tuple[List[str], int]:
    """
    Walk the lines of `data`, returning (valid_words, invalid_count).

    Unlike the corpus tokenizer this does not collapse newline runs: a blank
    line is a line, and an invalid one. A trailing "\\r" is tolerated.
    """
    valid: List[str] = []
    invalid = 0

    rest = TextSlice.from_buffer(data)
    if rest.ends_with(NEWLINE):
        rest = rest.chop_right(1)

    if not rest:
        return valid, invalid

    while True:
        i = rest.find_char(NEWLINE)
        line = rest if i == NPOS else rest.sub(0, i)
        if line.ends_with(b"\r"):
            line = line.chop_right(1)
        if _is_word(line, N):
            valid.append(str(line))
        else:
            invalid += 1
        if i == NPOS:
            break
        rest = rest.chop_left(i + 1)

    return valid, invalid


def _scan(path: str, N: int) -> Tuple[FileReport, Set[str]]:
    p = Path(path)
    if not p.exists():
        return FileReport(str(path), False, 0, 0, 0, 0, ""), set()
    data = read_buffer(p)
    words, invalid = _check(data, N)
    found = set(words)
    report = FileReport(
        path=str(path),
        exists=True,
        lines=_line_total(data),
        count=len(words),
        unique_count=len(found),
        invalid_lines=invalid,
        sha256=hashlib.sha256(data).hexdigest(),
    )
    return report, found


def validate_wordlists(N: int, solutions_path: str, words_path: str) -> Dict:
    """
    Check both lists for word length N and return a JSON-ready dict.

    `passed` is strict: both files exist, are non-empty, have no invalid
    lines, and solutions ⊆ words. Duplicates are reported in `issues` but do
    not fail the check; the game tolerates them.
    """
    paths = {"solutions": solutions_path, "words": words_path}
    reports: Dict[str, FileReport] = {}
    found: Dict[str, Set[str]] = {}
    issues: List[str] = []

    for name in ROLES:
        rep, found[name] = _scan(paths[name], N)
        reports[name] = rep
        if not rep.exists:
            issues.append(f"{name} file not found: {paths[name]}")
            continue
        if rep.count == 0:
            issues.append(f"{name} file contains 0 valid words")
        if rep.invalid_lines:
            issues.append(f"{name} has {rep.invalid_lines} invalid line(s)")
        if rep.count != rep.unique_count:
            issues.append(f"{name} contains duplicate lines")

    subset_ok = False
    if all(r.exists for r in reports.values()):
        missing = sorted(found["solutions"] - found["words"])
        subset_ok = not missing
        if missing:
            issues.append(f"solutions not subset of words (e.g., {missing[:5]})")

    passed = subset_ok and all(
        r.count > 0 and r.invalid_lines == 0 for r in reports.values())

    return asdict(ValidationReport(
        N=N,
        solutions=reports["solutions"],
        words=reports["words"],
        solutions_subset_words=subset_ok,
        passed=passed,
        issues=issues,
    ))


def pretty_summary(report: Dict) -> str:
    """
    One console line, e.g.

        N=5 | solutions=39/39 lines (uniq=39, sha=ab12...) | words=74/74 lines (...) | solutions⊆words=True | OK
    """
    parts = [f"N={report['N']}"]
    for name in ROLES:
        f = report[name]
        sha = (f.get("sha256") or "")[:12]
        parts.append(
            f"{name}={f['count']}/{f['lines']} lines (uniq={f['unique_count']}, sha={sha})")
    parts.append(f"solutions⊆words={report['solutions_subset_words']}")
    parts.append("OK" if report["passed"] else "FAIL")
    return " | ".join(parts)
