from .base import Choice, EliminationSolver
from .eliminator import elimination_score, pattern_buckets, score_all
from .ranking import SHORTCUT_LIMIT, best, is_uniform, needs_scoring

__all__ = [
    "Choice", "EliminationSolver",
    "elimination_score", "pattern_buckets", "score_all",
    "SHORTCUT_LIMIT", "best", "is_uniform", "needs_scoring",
]
