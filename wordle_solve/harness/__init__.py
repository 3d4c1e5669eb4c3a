from .core import RoundResult, solve_round, run_case, run_batch, guess_histogram
from .io import game_rows, write_csv

__all__ = ["RoundResult", "solve_round", "run_case", "run_batch", "guess_histogram", "game_rows", "write_csv"]
