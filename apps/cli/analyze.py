# apps/cli/analyze.py
"""
CLI entry point for analyzing a one-away guess history.

This script:
  1) Validates the puzzle file (prints word counts + SHA to stderr).
  2) Loads the roster and the guesses (from --guesses file and/or --guess flags).
  3) Rejects any guess that isn't 4 distinct roster words.
  4) Prints deductions, possible groupings and insights (or JSON with --json).

Usage:
    python -m apps.cli.analyze --guess "BASS, PIKE, SOLE, PUMP" --guess "BASS, PIKE, SOLE, MULE"
    python -m apps.cli.analyze --guesses oneaway/datasets/data/sample_guesses.txt --json
"""

from __future__ import annotations

import argparse
import json
import sys
from typing import List

from oneaway.datasets import validate_puzzle, pretty_summary, read_words, read_guesses
from oneaway.datasets.io import split_entries
from oneaway.engine import OneAwayGuess, analyze_guesses, validate_guess

DEFAULT_WORDS = "oneaway/datasets/data/sample_words.txt"


def _collect_guesses(args: argparse.Namespace) -> List[OneAwayGuess]:
    """
    File guesses first, then --guess flags, in the order given.
    Ids continue the g1, g2, ... numbering across both sources.
    """
    guesses: List[OneAwayGuess] = list(read_guesses(args.guesses)) if args.guesses else []
    for raw in args.guess or []:
        words = split_entries(raw)
        guesses.append(OneAwayGuess(id=f"g{len(guesses) + 1}", words=tuple(words)))
    return guesses


def _print_report(result) -> None:
    print("Deductions:")
    for d in result.deductions:
        print(f"  [{d.kind}] {', '.join(d.words)}  ({d.reason})")

    print(f"\nPossible groupings ({len(result.possible_groups)}):")
    for i, g in enumerate(result.possible_groups, start=1):
        print(f"  {i}. {', '.join(sorted(g))}")

    print("\nInsights:")
    for line in result.insights:
        print(f"  - {line}")


def main(argv: List[str] | None = None) -> int:
    ap = argparse.ArgumentParser(description="oneaway — deduce groupings from one-away guesses")
    ap.add_argument("--words", default=DEFAULT_WORDS,
                    help="puzzle roster (one word per line, or 4 comma-separated per line)")
    ap.add_argument("--guesses", help="guess log file: one guess per line, 4 comma-separated words")
    ap.add_argument("--guess", action="append",
                    help='one guess as "W1, W2, W3, W4" (repeatable)')
    ap.add_argument("--json", action="store_true", help="print JSON output")
    args = ap.parse_args(argv)

    # 1) Validate the puzzle file; a bad roster only warns, guess checks still apply
    rep = validate_puzzle(args.words)
    print(pretty_summary(rep), file=sys.stderr)
    if not rep["exists"]:
        print(f"Input error: puzzle file not found: {args.words}", file=sys.stderr)
        return 2
    words = read_words(args.words)

    # 2) Load guesses; malformed lines fail fast inside OneAwayGuess
    try:
        guesses = _collect_guesses(args)
    except (ValueError, FileNotFoundError) as e:
        print(f"Input error: {e}", file=sys.stderr)
        return 2

    # 3) Every guess must use puzzle words
    roster = set(words)
    for g in guesses:
        if not validate_guess(g.words, roster):
            unknown = [w for w in g.words if w not in roster]
            print(f"Input error: guess {g.id} uses words not in the puzzle: {unknown}", file=sys.stderr)
            return 2

    # 4) Analyze and report
    result = analyze_guesses(words, guesses)
    if args.json:
        print(json.dumps(result.to_dict(), indent=2))
    else:
        _print_report(result)
    return 0


if __name__ == "__main__":
    sys.exit(main())
