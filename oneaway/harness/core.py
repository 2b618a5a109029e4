"""
Simulation harness for the deduction engine.

- make_one_away_guess: build a guess that is genuinely one away for a known partition.
- run_case:  play one simulated session (a hidden partition, N one-away guesses).
- run_batch: run many sessions with derived seeds.
- summarize: aggregate rates and means over a batch.

The engine never sees the partition; the harness uses it only to generate
guesses and to check the engine's output afterwards.
"""

from __future__ import annotations
import time
from typing import Dict, List, Sequence

import numpy as np

from oneaway.engine import OneAwayGuess, analyze_guesses

MODES = ("same", "mixed")


def _check_groups(groups: Sequence[Sequence[str]]) -> None:
    """Guardrail: the harness needs a proper 4x4 partition."""
    if len(groups) != 4 or any(len(g) != 4 for g in groups):
        raise ValueError(f"Expected 4 groups of 4 words; got sizes {[len(g) for g in groups]}")
    words = [w for g in groups for w in g]
    if len(set(words)) != len(words):
        raise ValueError("Partition words must be distinct")


def make_one_away_guess(groups: Sequence[Sequence[str]], target: int,
                        rng: np.random.Generator) -> List[str]:
    """
    Three words from groups[target] plus one word from another group, shuffled.
    """
    inside = [groups[target][int(i)] for i in rng.choice(4, size=3, replace=False)]
    others = [i for i in range(len(groups)) if i != target]
    other = others[int(rng.integers(len(others)))]
    outlier = groups[other][int(rng.integers(4))]
    words = inside + [outlier]
    return [words[int(i)] for i in rng.permutation(4)]


def run_case(
        groups: Sequence[Sequence[str]],
        *,
        num_guesses: int = 3,
        seed: int | None = None,
        mode: str = "same",
) -> Dict:
    """
    Feed `num_guesses` generated guesses to the engine one at a time.

    Args:
        groups:      the hidden partition (4 groups of 4 words)
        num_guesses: how many one-away guesses to log
        seed:        RNG seed for reproducible guesses
        mode:        "same" = every guess is about one target group,
                     "mixed" = each guess picks its own target group

    Returns:
        dict with keys:
            mode, target, success (group found exactly), covered (some
            surviving grouping lies inside a true group), false_together
            (count of wrong must_be_together deductions), guesses (int),
            history (list of word lists), scenario_counts (per turn),
            possible_groups (final), time_ms (float)
    """
    _check_groups(groups)
    if mode not in MODES:
        raise ValueError(f"mode must be one of {MODES}; got {mode!r}")
    if num_guesses < 1:
        raise ValueError(f"num_guesses must be positive; got {num_guesses}")

    rng = np.random.default_rng(seed)
    all_words = [w for g in groups for w in g]
    group_of = {w: i for i, g in enumerate(groups) for w in g}
    target = int(rng.integers(len(groups)))

    history: List[OneAwayGuess] = []
    scenario_counts: List[int] = []
    result = None

    t0 = time.perf_counter()
    for turn in range(1, num_guesses + 1):
        tgt = target if mode == "same" else int(rng.integers(len(groups)))
        history.append(OneAwayGuess(id=f"g{turn}", words=tuple(make_one_away_guess(groups, tgt, rng))))
        # Recompute from the whole history, exactly like a UI would
        result = analyze_guesses(all_words, history)
        scenario_counts.append(len(result.possible_groups))
    dt = (time.perf_counter() - t0) * 1000.0

    possible = result.possible_groups
    truth = [set(g) for g in groups]
    covered = any(any(s <= t for t in truth) for s in possible)
    found = len(possible) == 1 and set(possible[0]) in truth
    false_together = sum(
        1 for d in result.deductions
        if d.kind == "must_be_together" and len({group_of[w] for w in d.words}) > 1
    )

    return {
        "mode": mode,
        "target": target,
        "success": found,
        "covered": covered,
        "false_together": false_together,
        "guesses": len(history),
        "history": [list(g.words) for g in history],
        "scenario_counts": scenario_counts,
        "possible_groups": [sorted(s) for s in possible],
        "time_ms": dt,
    }


def run_batch(
        groups: Sequence[Sequence[str]],
        *,
        cases: int,
        num_guesses: int = 3,
        seed: int | None = None,
        mode: str = "same",
) -> List[Dict]:
    """
    Run many cases back-to-back on the same partition.

    Each case's seed is derived from the base seed to make runs reproducible
    but not identical across cases (seed + index).
    """
    out: List[Dict] = []
    for idx in range(1, cases + 1):
        case_seed = None if seed is None else (seed + idx)
        out.append(run_case(groups, num_guesses=num_guesses, seed=case_seed, mode=mode))
    return out


def summarize(results: List[Dict]) -> Dict:
    """
    Batch aggregates as plain floats (JSON-safe). Empty input gives zeros.
    """
    if not results:
        return {"cases": 0, "found_rate": 0.0, "covered_rate": 0.0,
                "unsound_rate": 0.0, "mean_final_groups": 0.0, "mean_time_ms": 0.0}

    found = np.array([r["success"] for r in results], dtype=float)
    covered = np.array([r["covered"] for r in results], dtype=float)
    unsound = np.array([r["false_together"] > 0 for r in results], dtype=float)
    final = np.array([len(r["possible_groups"]) for r in results], dtype=float)
    times = np.array([r["time_ms"] for r in results], dtype=float)

    return {
        "cases": len(results),
        "found_rate": float(found.mean()),
        "covered_rate": float(covered.mean()),
        "unsound_rate": float(unsound.mean()),
        "mean_final_groups": float(final.mean()),
        "mean_time_ms": float(times.mean()),
    }
