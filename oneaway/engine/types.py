"""
Core value types for one-away deduction.

A one-away guess is a 4-word set known to contain exactly 3 words from one
hidden group of the puzzle. Everything else in the engine (candidate
triplets, scenarios, deductions) is derived from a list of these guesses.

Conventions:
  - words are opaque, case-preserving strings; the engine never inspects text
  - all types here are immutable; results are rebuilt on every analysis call
"""

from __future__ import annotations

import uuid
from dataclasses import dataclass, field
from typing import Dict, FrozenSet, List, Literal, Sequence, Tuple

Word = str
CandidateTriplet = Tuple[Word, Word, Word]
Scenario = FrozenSet[Word]

DeductionKind = Literal["exactly_three", "must_be_together", "cannot_be_together"]

GUESS_SIZE = 4
GROUP_SIZE = 4


@dataclass(frozen=True)
class OneAwayGuess:
    """A submitted guess that came back "one away"."""
    id: str
    words: Tuple[Word, Word, Word, Word]

    def __post_init__(self) -> None:
        words = tuple(self.words)
        if len(words) != GUESS_SIZE:
            raise ValueError(f"A one-away guess needs exactly {GUESS_SIZE} words; got {len(words)}")
        if not all(isinstance(w, str) for w in words):
            raise ValueError(f"Guess words must be strings; got {words!r}")
        if len(set(words)) != GUESS_SIZE:
            raise ValueError(f"Guess words must be distinct; got {list(words)}")
        # lists are accepted at the call site but stored frozen
        object.__setattr__(self, "words", words)

    @classmethod
    def of(cls, words: Sequence[Word], id: str | None = None) -> "OneAwayGuess":
        return cls(id=id or uuid.uuid4().hex[:8], words=tuple(words))


@dataclass(frozen=True)
class Deduction:
    kind: DeductionKind
    words: Tuple[Word, ...]
    reason: str

    def to_dict(self) -> Dict:
        return {"type": self.kind, "words": list(self.words), "reason": self.reason}


@dataclass
class AnalysisResult:
    """Everything the caller renders after a guess is logged. Holds no state of its own."""
    deductions: List[Deduction] = field(default_factory=list)
    possible_groups: List[Scenario] = field(default_factory=list)
    insights: List[str] = field(default_factory=list)

    def to_dict(self) -> Dict:
        return {
            "deductions": [d.to_dict() for d in self.deductions],
            "possibleGroups": [sorted(g) for g in self.possible_groups],
            "insights": list(self.insights),
        }
