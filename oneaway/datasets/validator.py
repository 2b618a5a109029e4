"""
Puzzle file validator for oneaway.

What this module does:
- Validate a puzzle file: either a 16-word roster (one word per line) or a
  solved partition (4 lines of 4 comma-separated words).
- Detect blank lines, duplicates and wrong counts; compute SHA-256 of the raw file.
- For partition files, check every line holds exactly 4 words.
- Return a machine-readable dict (for manifests) and provide a pretty one-line summary.

Typical use:
    from oneaway.datasets import validate_puzzle, pretty_summary
    rep = validate_puzzle("oneaway/datasets/data/sample_groups.txt")
    print(pretty_summary(rep))
"""

from __future__ import annotations

from dataclasses import dataclass, asdict
from pathlib import Path
from typing import Dict, List, Tuple
import hashlib

from .io import split_entries

PUZZLE_WORDS = 16
GROUP_SIZE = 4


# -----------------------------
# Dataclasses for structured reports
# -----------------------------

@dataclass
class PuzzleReport:
    """Diagnostics and metadata for one puzzle file."""
    path: str            # file path (as given)
    exists: bool         # did the file exist on disk?
    layout: str          # "roster", "groups" or "unknown"
    count: int           # number of words read
    unique_count: int    # distinct words
    invalid_lines: int   # lines that don't fit the detected layout
    sha256: str          # SHA-256 of raw file bytes (empty string if missing)
    passed: bool
    issues: List[str]    # human-friendly list of problems (if any)


# -----------------------------
# Helpers
# -----------------------------

def _sha256_file(path: Path) -> str:
    """Compute SHA-256 of a file's raw bytes."""
    h = hashlib.sha256()
    with path.open("rb") as f:
        for chunk in iter(lambda: f.read(8192), b""):
            h.update(chunk)
    return h.hexdigest()


def _load_and_check(path: Path) -> Tuple[str, List[str], int]:
    """
    Read words and detect the layout.

    Rules:
      - a file where any line contains a comma is a partition ("groups");
        each of its lines must hold exactly 4 entries
      - otherwise it is a roster, one entry per line
      - blank lines are skipped and never counted as invalid

    Returns:
      (layout, words, invalid_count)
    """
    lines = [ln.strip() for ln in path.read_text(encoding="utf-8").splitlines()]
    lines = [ln for ln in lines if ln]

    if any("," in ln for ln in lines):
        words: List[str] = []
        invalid = 0
        for ln in lines:
            entries = split_entries(ln)
            if len(entries) != GROUP_SIZE:
                invalid += 1
            words.extend(entries)
        return "groups", words, invalid

    return "roster", [" ".join(ln.split()) for ln in lines], 0


# -----------------------------
# Public API
# -----------------------------

def validate_puzzle(path: str) -> Dict:
    """
    Validate a roster or partition file.

    Returns
    -------
    Dict
        A JSON-serializable dictionary (see PuzzleReport schema); `passed`
        requires 16 distinct words and no invalid lines.
    """
    issues: List[str] = []
    p = Path(path)

    if not p.exists():
        issues.append(f"puzzle file not found: {path}")
        return asdict(PuzzleReport(path, False, "unknown", 0, 0, 0, "", False, issues))

    layout, words, invalid = _load_and_check(p)
    unique = set(words)

    if len(words) != PUZZLE_WORDS:
        issues.append(f"expected {PUZZLE_WORDS} words, got {len(words)}")
    if invalid:
        issues.append(f"{invalid} line(s) without exactly {GROUP_SIZE} words")
    if len(unique) != len(words):
        # Surface a few examples to debug quickly
        dups = sorted({w for w in words if words.count(w) > 1})[:5]
        issues.append(f"duplicate words: {dups}")

    rep = PuzzleReport(
        path=str(p),
        exists=True,
        layout=layout,
        count=len(words),
        unique_count=len(unique),
        invalid_lines=invalid,
        sha256=_sha256_file(p),
        passed=not issues,
        issues=issues,
    )
    return asdict(rep)


def pretty_summary(report: Dict) -> str:
    """
    Produce a compact, human-friendly one-liner for console/docs.

    Example:
        puzzle=sample_groups.txt | layout=groups | words=16 (uniq=16, sha=abc123...) | OK
    """
    status = "OK" if report["passed"] else "FAIL"
    sha = (report.get("sha256") or "")[:12]
    line = (
        f"puzzle={Path(report['path']).name} | layout={report['layout']} "
        f"| words={report['count']} (uniq={report['unique_count']}, sha={sha}) | {status}"
    )
    if report["issues"]:
        line += " | " + "; ".join(report["issues"])
    return line
