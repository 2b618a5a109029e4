"""
Deductions derived directly from the guess history.

Two kinds are produced:
  - exactly_three    : a restatement of each raw guess (always present)
  - must_be_together : two guesses sharing 3+ words force those words into
                       one group, whichever candidate triplet is true

`cannot_be_together` is part of the vocabulary for callers but nothing here
emits it yet.
"""

from __future__ import annotations

from itertools import combinations
from typing import Iterable, List, Sequence, Tuple

from .types import Deduction, OneAwayGuess, Scenario, Word

# Pairs of guesses must overlap at least this much before we call anything certain.
MIN_SHARED_FOR_CERTAINTY = 3


def shared_words(a: OneAwayGuess, b: OneAwayGuess) -> Tuple[Word, ...]:
    """Words present in both guesses, in the order they appear in `a`."""
    other = set(b.words)
    return tuple(w for w in a.words if w in other)


def forced_sets(guesses: Sequence[OneAwayGuess]) -> List[Tuple[Word, ...]]:
    """
    Word sets that the pairwise overlap rule forces together, one per
    qualifying pair (i < j), in pair order.
    """
    out: List[Tuple[Word, ...]] = []
    for a, b in combinations(guesses, 2):
        common = shared_words(a, b)
        if len(common) >= MIN_SHARED_FOR_CERTAINTY:
            out.append(common)
    return out


def derive_deductions(guesses: Sequence[OneAwayGuess]) -> List[Deduction]:
    deductions: List[Deduction] = [
        Deduction(
            kind="exactly_three",
            words=tuple(g.words),
            reason="Exactly 3 of these 4 words are in the same group",
        )
        for g in guesses
    ]

    for common in forced_sets(guesses):
        deductions.append(Deduction(
            kind="must_be_together",
            words=common,
            reason=f"These {len(common)} words appear together in two one-away guesses",
        ))

    return deductions


def definitely_together(scenarios: Iterable[Scenario]) -> List[Word]:
    """
    Words present in every scenario, sorted. Empty when there are no scenarios.
    """
    common: set | None = None
    for s in scenarios:
        common = set(s) if common is None else common & s
    return sorted(common or ())
