"""
Scrape past daily answers and write a clean solutions list.

Lowercases, de-duplicates while preserving calendar order, and writes one
word per line (the format WordCorpus loads).

Usage:
    python -m script.fetch_solutions --out solutions.txt
    # or alphabetically sorted:
    python -m script.fetch_solutions --sort --out solutions.txt
"""

import argparse

from clidle.datasets import write_lines
from clidle.datasets.fetch import URL, fetch_answers


def main():
    ap = argparse.ArgumentParser(description="Fetch past answers into a solutions list")
    ap.add_argument("--url", default=URL)
    ap.add_argument("--out", default="solutions.txt")
    ap.add_argument("--sort", action="store_true", help="sort alphabetically instead of keeping "
                                                        "calendar order")
    args = ap.parse_args()

    answers = fetch_answers(args.url)
    if args.sort:
        answers = sorted(set(answers))

    write_lines(answers, args.out)
    print(f"Wrote {len(answers)} unique answers -> {args.out}")


if __name__ == "__main__":
    main()
