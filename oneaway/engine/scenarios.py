"""
Scenario propagation across the full guess history.

A scenario is a hypothesis about the members of ONE hidden group, built by
merging one candidate triplet from every guess. Hidden groups always have
exactly 4 words, so any merge that grows past 4 is a contradiction and is
dropped.

Algorithm (left fold over guesses):
  1) seed with the 4 candidate triplets of the first guess
  2) for each later guess, merge every scenario S with every candidate T
     where |S ∪ T| <= 4
  3) deduplicate by sorted member list after every step
  4) discard scenarios that split a word set (smaller than a group) the
     pairwise overlap rule says must stay together

The engine is stateless: callers pass the whole history every time and we
recompute from scratch. Inputs are tiny (scenarios never exceed 4 words), so
there is nothing worth caching.

Cross-group caveat: the fold assumes every guess is about the same hidden
group. Guesses about different groups simply leave no scenario behind.
"""

from __future__ import annotations

from typing import Dict, Iterable, List, Sequence, Tuple

from .deductions import forced_sets
from .triplets import possible_triplets
from .types import GROUP_SIZE, OneAwayGuess, Scenario, Word


def scenario_key(s: Iterable[Word]) -> str:
    """Deduplication key: lexicographically sorted members, joined."""
    return ",".join(sorted(s))


def compatible(s: Iterable[Word], t: Iterable[Word]) -> bool:
    """Two partial groups can describe the same hidden group iff their union fits in it."""
    return len(set(s) | set(t)) <= GROUP_SIZE


def merge(s: Iterable[Word], t: Iterable[Word]) -> Scenario:
    return frozenset(s) | frozenset(t)


def _dedupe(scenarios: Iterable[Scenario]) -> List[Scenario]:
    seen: Dict[str, Scenario] = {}
    for s in scenarios:
        seen.setdefault(scenario_key(s), s)
    return list(seen.values())


def _splits(scenario: Scenario, together: Tuple[Word, ...]) -> bool:
    """True if the scenario holds some, but not all, of a forced word set."""
    inside = sum(1 for w in together if w in scenario)
    return 0 < inside < len(together)


def possible_groupings(guesses: Sequence[OneAwayGuess]) -> List[Scenario]:
    """
    Return every distinct scenario consistent with all guesses.

    Returns:
      List of frozensets (size 3 or 4), sorted by their deduplication key so
      the same guess history always renders identically, whatever order the
      guesses were logged in.
    """
    if not guesses:
        return []

    scenarios: List[Scenario] = [frozenset(t) for t in possible_triplets(guesses[0])]

    for guess in guesses[1:]:
        candidates = possible_triplets(guess)
        merged = [
            merge(s, t)
            for s in scenarios
            for t in candidates
            if compatible(s, t)
        ]
        scenarios = _dedupe(merged)
        if not scenarios:
            # nothing survives; later guesses cannot revive a dead branch
            break

    # a full 4-word overlap is the same guess logged twice, never a whole group
    together = [t for t in forced_sets(guesses) if len(t) < GROUP_SIZE]
    scenarios = [s for s in scenarios if not any(_splits(s, t) for t in together)]

    return sorted(scenarios, key=scenario_key)
