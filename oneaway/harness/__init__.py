from .core import make_one_away_guess, run_case, run_batch, summarize
from .io import write_csv, write_manifest

__all__ = ["make_one_away_guess", "run_case", "run_batch", "summarize", "write_csv", "write_manifest"]
