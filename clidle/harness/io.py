"""
Files a replay run leaves behind.

replay_<id>.csv has one row per game: the result columns, then a
guess_i/patt_i pair for every allowed attempt, blank after the last
accepted guess. replay_<id>_manifest.json records the rules, the script, the
word-list report and the batch summary, so a run can be compared with another.
"""

from __future__ import annotations

import csv
import json
import logging
import subprocess
import time
from dataclasses import asdict
from pathlib import Path
from typing import Dict, Iterable, List, Mapping, Optional

from clidle.config import GameConfig
from .core import summarize

logger = logging.getLogger(__name__)

RESULT_COLUMNS = ("answer", "outcome", "success", "guesses", "rejected", "time_ms")


def csv_columns(max_attempts: int) -> List[str]:
    cols = list(RESULT_COLUMNS)
    for i in range(1, max_attempts + 1):
        cols += [f"guess_{i}", f"patt_{i}"]
    return cols


def _row(result: Mapping, max_attempts: int) -> List:
    row = [result[c] for c in RESULT_COLUMNS[:-1]]
    row.append(f"{result['time_ms']:.3f}")
    history = list(result.get("history", []))[:max_attempts]
    history += [("", "")] * (max_attempts - len(history))
    for guess, pattern in history:
        row += [guess, pattern]
    return row


def write_csv(results: Iterable[Mapping], path: str, max_attempts: int) -> str:
    p = Path(path)
    p.parent.mkdir(parents=True, exist_ok=True)
    n = 0
    with p.open("w", newline="", encoding="utf-8") as f:
        w = csv.writer(f)
        w.writerow(csv_columns(max_attempts))
        for r in results:
            w.writerow(_row(r, max_attempts))
            n += 1
    logger.info("wrote %d rows to %s", n, p)
    return str(p)


def build_manifest(
        results: List[Dict],
        config: GameConfig,
        *,
        script: Iterable[str],
        wordlists: Dict,
        options: Optional[Mapping] = None,
        run_id: Optional[str] = None,
) -> Dict:
    """Describe a finished batch: rules, inputs, and summarize() of its results."""
    return {
        "run_id": run_id or timestamp_id(),
        "revision": source_revision(),
        "rules": asdict(config),
        "script": list(script),
        "options": dict(options or {}),
        "wordlists": wordlists,
        "summary": summarize(results, config.max_attempts),
    }


def write_manifest(manifest: Mapping, path: str) -> str:
    p = Path(path)
    p.parent.mkdir(parents=True, exist_ok=True)
    p.write_text(json.dumps(manifest, indent=2) + "\n", encoding="utf-8")
    return str(p)


def timestamp_id() -> str:
    """UTC time as a filename-safe id, e.g. 20261019T142501Z."""
    return time.strftime("%Y%m%dT%H%M%SZ", time.gmtime())


def source_revision() -> str:
    """Short commit of the working tree, or "unknown" outside a git checkout."""
    try:
        proc = subprocess.run(["git", "rev-parse", "--short", "HEAD"],
                              capture_output=True, text=True, check=False)
    except OSError:
        return "unknown"
    return proc.stdout.strip() if proc.returncode == 0 else "unknown"
