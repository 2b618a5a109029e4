# apps/cli/simulate.py
"""
Batch simulation of one-away sessions against a known partition.

This script:
  1) Validates the partition file (prints word counts + SHA).
  2) Runs --cases simulated sessions, each logging --num-guesses generated
     one-away guesses, with a live progress indicator.
  3) Writes:
       - CSV:  per-case results + guess / grouping-count columns
       - JSON: manifest with config, puzzle report, git commit and summary
"""

from __future__ import annotations

import argparse
import sys
import time
from pathlib import Path
from typing import List

from tqdm import tqdm

from oneaway.datasets import validate_puzzle, pretty_summary, read_groups
from oneaway.harness import run_case, summarize
from oneaway.harness.core import MODES
from oneaway.harness.io import write_csv, write_manifest, timestamp_id, git_commit_or_unknown

DEFAULT_GROUPS = "oneaway/datasets/data/sample_groups.txt"


def main(argv: List[str] | None = None) -> int:
    """
    Parse CLI args, validate the partition, run the batch with progress, and write outputs.
    """
    ap = argparse.ArgumentParser(description="oneaway — simulate one-away sessions")
    ap.add_argument("--groups", default=DEFAULT_GROUPS,
                    help="solved partition: 4 lines of 4 comma-separated words")
    ap.add_argument("--cases", type=int, default=200, help="number of simulated sessions")
    ap.add_argument("--num-guesses", type=int, default=3, help="one-away guesses per session")
    ap.add_argument("--mode", choices=MODES, default="same",
                    help="same = all guesses about one group; mixed = any group")
    ap.add_argument("--seed", type=int, default=123, help="base RNG seed (for reproducibility)")
    ap.add_argument("--outdir", default="reports", help="directory for output files")
    ap.add_argument(
        "--progress",
        choices=["auto", "bar", "plain", "off"],
        default="auto",
        help="Show run progress (auto=bar on a terminal, else plain text)."
    )
    args = ap.parse_args(argv)

    # 1) Validate the partition and print a one-liner summary
    rep = validate_puzzle(args.groups)
    print(pretty_summary(rep), file=sys.stderr)
    if not rep["passed"] or rep["layout"] != "groups":
        print("Input error: --groups must be a valid 4x4 partition file", file=sys.stderr)
        return 2
    groups = read_groups(args.groups)

    # 2) Progress mode
    mode = args.progress
    if mode == "auto":
        mode = "bar" if sys.stderr.isatty() else "plain"

    cases = range(1, args.cases + 1)
    iterator = tqdm(cases, ncols=80, desc="Simulating", unit="case") if mode == "bar" else cases

    results = []
    start = time.time()
    last_print = 0.0

    # 3) Run batch; per-case seed keeps runs reproducible and independent
    for idx in iterator:
        results.append(run_case(groups, num_guesses=args.num_guesses,
                                seed=args.seed + idx, mode=args.mode))

        if mode == "plain":
            now = time.time()
            if (now - last_print >= 1.0) or (idx == args.cases):
                elapsed = now - start
                pct = 100.0 * idx / max(1, args.cases)
                sys.stderr.write(f"\r[{idx}/{args.cases}] {pct:5.1f}% | elapsed {elapsed:6.1f}s")
                sys.stderr.flush()
                last_print = now

    if mode == "plain":
        sys.stderr.write("\n"); sys.stderr.flush()

    # 4) Write outputs (CSV + manifest)
    summary = summarize(results)
    run_id = timestamp_id()
    outdir = Path(args.outdir)
    outdir.mkdir(parents=True, exist_ok=True)

    csv_path = outdir / f"sim_{run_id}.csv"
    manifest_path = outdir / f"sim_{run_id}_manifest.json"

    write_csv(results, str(csv_path), num_guesses=args.num_guesses)
    write_manifest({
        "run_id": run_id,
        "git_commit": git_commit_or_unknown(),
        "config": vars(args),
        "puzzle": rep,
        "summary": summary,
    }, str(manifest_path))

    print(f"found={summary['found_rate']:.3f} covered={summary['covered_rate']:.3f} "
          f"unsound={summary['unsound_rate']:.3f} mean_groups={summary['mean_final_groups']:.2f}")
    print(f"Wrote: {csv_path}")
    print(f"Wrote: {manifest_path}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
