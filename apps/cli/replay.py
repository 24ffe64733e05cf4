# apps/cli/replay.py
"""
Replay a fixed guess script against many solutions.

This script:
  1) Validates the word lists (prints counts + SHA, checks solutions ⊆ words).
  2) Replays the same typed lines against every solution (or a seeded sample)
     through GameSession, with a live progress indicator.
  3) Writes:
       - CSV:  per-game results + guess/pattern history columns
       - JSON: manifest with rules, options, word-list report, summary, revision

Usage:
    python -m apps.cli.replay --script crane,sloth,dumpy,fight --sample 200
"""

from __future__ import annotations

import argparse
import random
import sys
import time
from pathlib import Path
from typing import List

from tqdm import tqdm

from clidle.config import GameConfig, SOLUTIONS_FILE, WORD_LENGTH, WORDS_FILE
from clidle.datasets import WordCorpus, pretty_summary, read_lines, validate_wordlists
from clidle.errors import FatalResourceError
from clidle.harness import build_manifest, replay_case, write_csv, write_manifest
from clidle.log import setup_logging


def _load_script(args: argparse.Namespace) -> List[str]:
    if args.script_file:
        return read_lines(args.script_file)
    return [w.strip() for w in args.script.split(",")]


def main(argv=None) -> int:
    ap = argparse.ArgumentParser(description="clidle — replay a guess script against solutions")
    src = ap.add_mutually_exclusive_group(required=True)
    src.add_argument("--script", help="comma-separated guesses, e.g. crane,sloth,dumpy")
    src.add_argument("--script-file", help="file with one typed line per row")
    ap.add_argument("--words", default=WORDS_FILE, help="valid guesses, one word per line")
    ap.add_argument("--solutions", default=SOLUTIONS_FILE,
                    help="solution candidates, one word per line")
    ap.add_argument("--sample", type=int,
                    help="replay only a subset of solutions (deterministic by seed)")
    ap.add_argument("--seed", type=int, default=123, help="RNG seed for sampling")
    ap.add_argument("--outdir", default="reports", help="directory for output files")
    ap.add_argument(
        "--progress",
        choices=["auto", "bar", "plain", "off"],
        default="auto",
        help="Show run progress (auto=bar on a terminal, else plain text)."
    )
    ap.add_argument("--log-level", default="WARNING", help="logging level for stderr")
    args = ap.parse_args(argv)
    setup_logging(args.log_level)

    # 1) Validate word lists and print a one-liner summary
    rep = validate_wordlists(WORD_LENGTH, args.solutions, args.words)
    print(pretty_summary(rep))

    try:
        words = WordCorpus.from_file(args.words)
        solutions = WordCorpus.from_file(args.solutions)
    except FatalResourceError as e:
        print(f"clidle: {e}", file=sys.stderr)
        return 1

    script = _load_script(args)
    config = GameConfig()

    # 2) Choose cases (deterministic sample by seed)
    cases = [str(w) for w in solutions]
    if args.sample and args.sample < len(cases):
        rng = random.Random(args.seed)
        rng.shuffle(cases)
        cases = cases[: args.sample]
    total = len(cases)

    mode = args.progress
    if mode == "auto":
        mode = "bar" if sys.stderr.isatty() else "plain"

    iterator = tqdm(cases, ncols=80, desc="Replaying", unit="game") if mode == "bar" else cases

    results = []
    start = time.time()
    last_print = 0.0
    for idx, answer in enumerate(iterator, 1):
        results.append(replay_case(answer, script, words=words, config=config))

        if mode == "plain":
            now = time.time()
            if (now - last_print >= 1.0) or (idx == total):
                elapsed = now - start
                pct = 100.0 * idx / max(1, total)
                sys.stderr.write(f"\r[{idx}/{total}] {pct:5.1f}% | elapsed {elapsed:6.1f}s")
                sys.stderr.flush()
                last_print = now

    if mode == "plain":
        sys.stderr.write("\n")
        sys.stderr.flush()

    manifest = build_manifest(results, config, script=script, wordlists=rep, options=vars(args))
    summary = manifest["summary"]
    mean = summary["mean_guesses"]
    print(f"won {summary['wins']}/{summary['games']} ({100.0 * summary['win_rate']:.1f}%)"
          + (f", mean guesses {mean:.2f}" if mean is not None else ""))

    # 3) Write outputs (CSV + manifest)
    run_id = manifest["run_id"]
    outdir = Path(args.outdir)
    csv_path = outdir / f"replay_{run_id}.csv"
    manifest_path = outdir / f"replay_{run_id}_manifest.json"

    write_csv(results, str(csv_path), max_attempts=config.max_attempts)
    write_manifest(manifest, str(manifest_path))

    print(f"Wrote: {csv_path}")
    print(f"Wrote: {manifest_path}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
