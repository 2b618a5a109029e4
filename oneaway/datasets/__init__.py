from .validator import validate_puzzle, pretty_summary
from .io import read_lines, read_words, read_groups, read_guesses

__all__ = ["validate_puzzle", "pretty_summary", "read_words", "read_groups", "read_guesses"]
