"""
Self-test results on disk.

One CSV row per game. The play-by-play goes in a single `rows` column, written
in the same token syntax the CLI accepts, so any prefix of a game can be
pasted back into `wordle-solve` to replay that position:

    answer,success,guesses,time_ms,rows
    level,True,3,1.204,-r -a -i -s ~e | ...
"""

from __future__ import annotations

import csv
from pathlib import Path
from typing import Dict, Iterable

from wordle_solve.engine import format_row

FIELDS = ["answer", "success", "guesses", "time_ms", "rows"]
ROW_SEPARATOR = " | "


def game_rows(history: Iterable) -> str:
    """Join a game's (guess, pattern) history as CLI feedback rows."""
    return ROW_SEPARATOR.join(format_row(g, p) for g, p in history)


def write_csv(results: Iterable[Dict], path: str) -> str:
    """Write run_batch results to `path`; returns the path written."""
    p = Path(path)
    p.parent.mkdir(parents=True, exist_ok=True)
    with p.open("w", newline="", encoding="utf-8") as f:
        w = csv.DictWriter(f, fieldnames=FIELDS)
        w.writeheader()
        for r in results:
            w.writerow({
                "answer": r["answer"],
                "success": r["success"],
                "guesses": r["guesses"],
                "time_ms": round(float(r["time_ms"]), 3),
                "rows": game_rows(r["history"]),
            })
    return str(p)
