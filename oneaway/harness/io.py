"""
I/O utilities for simulation runs.

Responsibilities:
- write_csv:      flatten per-case results into a tidy CSV (one row per case).
- write_manifest: dump a JSON manifest with config, puzzle report and summary.
- timestamp_id:   stable UTC run ID string.
- git_commit_or_unknown: best-effort short commit hash for reproducibility.
"""

from __future__ import annotations

from pathlib import Path
from typing import Dict, List
import csv
import json
import subprocess
import datetime as dt


def write_csv(results: List[Dict], path: str, num_guesses: int) -> str:
    """
    Serialize a batch of simulation results to CSV.

    Schema (columns):
      case, mode, target, success, covered, false_together, final_groups, time_ms,
      guess_1, groups_1, ..., guess_<num_guesses>, groups_<num_guesses>

    Guess cells hold the 4 words joined with " | "; groups_i is the number of
    possible groupings after that guess was logged.

    Returns:
      The path written (string).
    """
    p = Path(path)
    p.parent.mkdir(parents=True, exist_ok=True)

    fields = ["case", "mode", "target", "success", "covered", "false_together",
              "final_groups", "time_ms"]
    for i in range(1, num_guesses + 1):
        fields += [f"guess_{i}", f"groups_{i}"]

    with p.open("w", newline="", encoding="utf-8") as f:
        w = csv.DictWriter(f, fieldnames=fields)
        w.writeheader()

        for idx, r in enumerate(results, start=1):
            row = {
                "case": idx,
                "mode": r["mode"],
                "target": r["target"],
                "success": r["success"],
                "covered": r["covered"],
                "false_together": r["false_together"],
                "final_groups": len(r["possible_groups"]),
                "time_ms": round(float(r["time_ms"]), 3),
            }

            hist = r.get("history", [])
            counts = r.get("scenario_counts", [])
            for i in range(1, num_guesses + 1):
                if i <= len(hist):
                    row[f"guess_{i}"] = " | ".join(hist[i - 1])
                    row[f"groups_{i}"] = counts[i - 1]
                else:
                    row[f"guess_{i}"] = ""
                    row[f"groups_{i}"] = ""

            w.writerow(row)

    return str(p)


def write_manifest(manifest: Dict, path: str) -> str:
    """
    Write a JSON manifest with run configuration.

    Typical keys:
      - run_id, git_commit
      - config: CLI args (groups path, cases, guesses, mode, seed, outdir)
      - puzzle: output of datasets.validate_puzzle(...)
      - summary: output of harness.summarize(...)
    """
    p = Path(path)
    p.parent.mkdir(parents=True, exist_ok=True)
    with p.open("w", encoding="utf-8") as f:
        json.dump(manifest, f, indent=2)
    return str(p)


def timestamp_id() -> str:
    """
    Return a compact UTC timestamp suitable for filenames, e.g. 20250820T024121Z.
    """
    return dt.datetime.now(dt.timezone.utc).strftime("%Y%m%dT%H%M%SZ")


def git_commit_or_unknown() -> str:
    """
    Best-effort short git hash of the current repo state.
    Returns 'unknown' if git is not available or the call fails.
    """
    try:
        return (
            subprocess.check_output(
                ["git", "rev-parse", "--short", "HEAD"],
                stderr=subprocess.DEVNULL,
            )
            .decode()
            .strip()
        )
    except (OSError, subprocess.CalledProcessError):
        return "unknown"
