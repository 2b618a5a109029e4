"""
Lightweight guess validation.

This module answers the question: "Can this be logged as a one-away guess?"
A guess is acceptable iff:
  - it has exactly 4 entries, all strings
  - the 4 entries are distinct
  - every entry is one of the puzzle's words (when a roster is given)

The engine itself rejects malformed guesses when a OneAwayGuess is built;
this check lets a UI or CLI refuse input before that point.
"""

from typing import Iterable, Sequence, Set

from .types import GUESS_SIZE


def validate_guess(words: Sequence[str], all_words: Iterable[str] = ()) -> bool:
    """
    Return True if `words` can be submitted as a one-away guess.

    Args:
      words     : proposed guess
      all_words : the puzzle roster; an empty roster skips the membership check

    Notes:
      - Words are compared verbatim (case-preserving), matching how the
        engine treats them.
    """
    if isinstance(words, str):
        return False

    words = list(words)
    if len(words) != GUESS_SIZE or not all(isinstance(w, str) and w for w in words):
        return False
    if len(set(words)) != GUESS_SIZE:
        return False

    roster: Set[str] = set(all_words)
    return not roster or all(w in roster for w in words)
