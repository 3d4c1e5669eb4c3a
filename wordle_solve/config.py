"""
Runtime configuration.

Defaults live here; the CLI uses them as argparse defaults, and each one can
be overridden from the environment:

  WORDLE_SOLVE_WORDS    dictionary path            (default: ./words)
  WORDLE_SOLVE_WORKERS  scoring processes          (default: CPU count)
  WORDLE_SOLVE_CACHE    first-guess cache file     (default: see cache_path)
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Mapping, Optional

CACHE_FILENAME = "wordle-solve.cache"

# Remaining words are listed when there are fewer than this many.
LIST_LIMIT = 15


def default_cache_path(env: Mapping[str, str] = os.environ) -> Path:
    if env.get("WORDLE_SOLVE_CACHE"):
        return Path(env["WORDLE_SOLVE_CACHE"])
    base = env.get("XDG_CACHE_HOME") or str(Path.home() / ".cache")
    return Path(base) / CACHE_FILENAME


def _int_env(env: Mapping[str, str], key: str, default: int) -> int:
    raw = env.get(key)
    if not raw:
        return default
    try:
        return max(1, int(raw))
    except ValueError as e:
        raise ValueError(f"{key} must be an integer, got {raw!r}") from e


@dataclass
class SolveConfig:
    words_path: str = "words"
    workers: int = field(default_factory=lambda: os.cpu_count() or 1)
    cache_path: Optional[Path] = None   # None disables the first-guess cache
    list_limit: int = LIST_LIMIT

    @classmethod
    def from_env(cls, env: Mapping[str, str] = os.environ) -> "SolveConfig":
        return cls(
            words_path=env.get("WORDLE_SOLVE_WORDS") or "words",
            workers=_int_env(env, "WORDLE_SOLVE_WORKERS", os.cpu_count() or 1),
            cache_path=default_cache_path(env),
        )
