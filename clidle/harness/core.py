"""
Scripted replay harness.

- replay_case:  play one solution with a fixed list of guess lines.
- replay_batch: replay the same script against many solutions.
- summarize:    win rate and guess distribution over a batch.

A "script" is just the lines a player would type, so rejected lines (wrong
length, unknown word) are replayed faithfully and do not consume attempts.
Every game goes through GameSession, exactly like the terminal game; only the
renderer is swapped for a recorder.
"""

from __future__ import annotations

import time
from typing import Dict, Iterable, List, Sequence

import numpy as np

from clidle.config import GameConfig
from clidle.datasets import WordCorpus
from clidle.game import GameSession, Outcome, RenderingIntent, lines_from, play


def replay_case(
        answer: str,
        script: Sequence[str],
        *,
        words: WordCorpus,
        config: GameConfig = GameConfig(),
) -> Dict:
    """
    Replay `script` against `answer` until the game ends or the script runs out.

    Returns:
        dict with keys:
            answer (str), outcome ("won" | "lost" | "ended"), success (bool),
            guesses (int, accepted guesses), rejected (int), time_ms (float),
            history (list[(guess, pattern)])
    """
    session = GameSession(answer, words, config)
    rejected: List[str] = []

    def record(intent: RenderingIntent) -> None:
        if intent.rejected is not None:
            rejected.append(intent.rejected.guess)

    t0 = time.perf_counter_ns()
    outcome = play(session, lines_from(script), record)
    dt = (time.perf_counter_ns() - t0) / 1_000_000.0

    return {
        "answer": str(answer),
        "outcome": outcome.value,
        "success": outcome is Outcome.WON,
        "guesses": len(session.history),
        "rejected": len(rejected),
        "time_ms": dt,
        "history": list(session.history),
    }


def replay_batch(
        answers: Iterable,
        script: Sequence[str],
        *,
        words: WordCorpus,
        config: GameConfig = GameConfig(),
        sample: int | None = None,
) -> List[Dict]:
    """
    Replay `script` against each answer. If `sample` is given, only the first
    K answers are used to speed up quick checks.
    """
    pool = [str(a) for a in answers]
    if sample is not None:
        pool = pool[:sample]
    return [replay_case(a, script, words=words, config=config) for a in pool]


def summarize(results: List[Dict], max_attempts: int = GameConfig().max_attempts) -> Dict:
    """
    Aggregate a batch.

    `distribution[k]` is the number of games won with exactly k accepted
    guesses (index 0 is always 0).
    """
    if not results:
        return {"games": 0, "wins": 0, "win_rate": 0.0, "mean_guesses": None,
                "distribution": [0] * (max_attempts + 1)}

    success = np.array([r["success"] for r in results], dtype=bool)
    guesses = np.array([r["guesses"] for r in results], dtype=int)
    won = guesses[success]

    return {
        "games": len(results),
        "wins": int(success.sum()),
        "win_rate": float(success.mean()),
        "mean_guesses": float(won.mean()) if won.size else None,
        "distribution": np.bincount(won, minlength=max_attempts + 1).tolist(),
    }
