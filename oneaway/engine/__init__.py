from .types import AnalysisResult, Deduction, OneAwayGuess
from .triplets import possible_triplets
from .scenarios import possible_groupings
from .deductions import derive_deductions
from .analysis import analyze_guesses
from .validation import validate_guess

__all__ = [
    "AnalysisResult", "Deduction", "OneAwayGuess",
    "possible_triplets", "possible_groupings", "derive_deductions",
    "analyze_guesses", "validate_guess",
]
