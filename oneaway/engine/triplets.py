"""
Candidate triplets for a single one-away guess.

A guess {a, b, c, d} resolves in exactly one of four ways: one word is the
outlier and the other three share a group. We carry all four resolutions as
live possibilities; the scenario propagator decides which survive.
"""

from __future__ import annotations

from typing import List, Sequence, Union

from .types import CandidateTriplet, OneAwayGuess, Word

GuessLike = Union[OneAwayGuess, Sequence[Word]]


def guess_words(guess: GuessLike) -> tuple:
    """Accept a OneAwayGuess or a raw 4-word sequence."""
    if isinstance(guess, OneAwayGuess):
        return guess.words
    return OneAwayGuess.of(guess, id="adhoc").words


def possible_triplets(guess: GuessLike) -> List[CandidateTriplet]:
    """
    Return the 4 candidate triplets of `guess`.

    Order is fixed: the 4th, 3rd, 2nd and 1st word are dropped in turn.

    Examples:
      possible_triplets(["a", "b", "c", "d"])
        -> [("a","b","c"), ("a","b","d"), ("a","c","d"), ("b","c","d")]
    """
    a, b, c, d = guess_words(guess)
    return [
        (a, b, c),  # d is the outlier
        (a, b, d),  # c is the outlier
        (a, c, d),  # b is the outlier
        (b, c, d),  # a is the outlier
    ]
