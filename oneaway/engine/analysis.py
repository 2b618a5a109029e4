"""
One-shot analysis of a guess history: deductions, surviving groupings and
human-readable insights for the UI.
"""

from __future__ import annotations

from typing import Iterable, List, Sequence

from .deductions import definitely_together, derive_deductions
from .scenarios import possible_groupings
from .types import AnalysisResult, OneAwayGuess, Scenario, Word

# Up to this many surviving groupings we report the count to the user.
MAX_COUNTED_GROUPINGS = 4


def _join(words: Iterable[Word]) -> str:
    return ", ".join(words)


def _insights(guesses: Sequence[OneAwayGuess], groups: List[Scenario]) -> List[str]:
    if not guesses:
        return ["Log a one-away guess to start deducing!"]

    out: List[str] = []
    if len(guesses) == 1:
        out.append(f"One of these 4 words doesn't belong with the other 3: {_join(guesses[0].words)}")

    if len(groups) == 1:
        out.append(f"Found the group: {_join(sorted(groups[0]))}")
    elif 2 <= len(groups) <= MAX_COUNTED_GROUPINGS:
        out.append(f"Narrowed down to {len(groups)} possible groupings")
    elif not groups:
        out.append("No single grouping fits every guess: they may be about different categories")

    together = definitely_together(groups)
    if len(together) >= 2:
        out.append(f"Definitely together: {_join(together)}")

    return out


def analyze_guesses(all_words: Sequence[Word], guesses: Sequence[OneAwayGuess]) -> AnalysisResult:
    """
    Recompute everything from the full guess history.

    Args:
      all_words : the 16-word roster (not consulted; see validation.validate_guess)
      guesses   : one-away guesses in submission order; never mutated

    Returns:
      AnalysisResult with deductions, possible_groups and insights.
    """
    guesses = list(guesses)
    groups = possible_groupings(guesses)
    return AnalysisResult(
        deductions=derive_deductions(guesses),
        possible_groups=groups,
        insights=_insights(guesses, groups),
    )
