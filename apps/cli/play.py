# apps/cli/play.py
"""
CLI entry point for playing clidle in the terminal.

This script:
  1) Loads the valid-guess and solution word lists (exit 1 if unreadable).
  2) Picks the solution: --index if given, else random (seedable).
  3) Runs the game loop on stdin until the word is found, the six attempts
     are used up, or input ends (Ctrl-D).

Usage:
    python -m apps.cli.play --words words.txt --solutions solutions.txt
    python -m apps.cli.play --check      # validate the word lists and exit
"""

from __future__ import annotations

import argparse
import logging
import random
import sys

from clidle.config import GameConfig, SOLUTIONS_FILE, WORD_LENGTH, WORDS_FILE
from clidle.datasets import WordCorpus, pretty_summary, validate_wordlists
from clidle.errors import FatalResourceError
from clidle.game import GameSession, play, read_stdin_line
from clidle.log import setup_logging
from clidle.render import TerminalRenderer

logger = logging.getLogger("clidle.cli")


def _parse_args(argv=None) -> argparse.Namespace:
    ap = argparse.ArgumentParser(description="clidle — guess the five-letter word in six tries")
    ap.add_argument("--words", default=WORDS_FILE, help="valid guesses, one word per line")
    ap.add_argument("--solutions", default=SOLUTIONS_FILE,
                    help="solution candidates, one word per line")
    ap.add_argument("--seed", type=int, help="RNG seed for picking the solution")
    ap.add_argument("--index", type=int, help="play solutions[INDEX] instead of a random word")
    ap.add_argument("--color", choices=["auto", "always", "never"], default="auto",
                    help="ANSI tiles (auto = only when stdout is a terminal)")
    ap.add_argument("--no-delay", action="store_true", help="skip reveal/misinput pauses")
    ap.add_argument("--check", action="store_true",
                    help="validate the word lists, print a summary and exit")
    ap.add_argument("--log-level", default="WARNING", help="logging level for stderr")
    return ap.parse_args(argv)


def main(argv=None) -> int:
    args = _parse_args(argv)
    setup_logging(args.log_level)

    if args.check:
        rep = validate_wordlists(WORD_LENGTH, args.solutions, args.words)
        print(pretty_summary(rep))
        for issue in rep["issues"]:
            print(f"  - {issue}")
        return 0 if rep["passed"] else 1

    try:
        words = WordCorpus.from_file(args.words)
        solutions = WordCorpus.from_file(args.solutions)
        if args.index is not None:
            index = args.index
        else:
            index = random.Random(args.seed).randrange(len(solutions)) if len(solutions) else 0
        solution = solutions.choose(index)
        session = GameSession(solution, words, GameConfig())
    except FatalResourceError as e:
        print(f"clidle: {e}", file=sys.stderr)
        return 1
    except (IndexError, ValueError) as e:
        print(f"clidle: {e}", file=sys.stderr)
        return 2

    logger.debug("solution index %d", index)

    color = args.color == "always" or (args.color == "auto" and sys.stdout.isatty())
    render = TerminalRenderer(sys.stdout, color=color, delay=not args.no_delay)

    try:
        outcome = play(session, read_stdin_line, render)
    except KeyboardInterrupt:
        print()
        return 130

    logger.info("game over: %s after %d attempt(s)", outcome.value, session.attempt)
    return 0


if __name__ == "__main__":
    sys.exit(main())
