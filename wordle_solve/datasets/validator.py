"""
Word list validator.

What this module does:
- Inspect a dictionary file without raising on the first problem.
- Count valid/invalid/blank lines, duplicates and the word lengths seen.
- Compute SHA-256 of the raw file (the same key the first-guess cache uses).
- Return a machine-readable dict and provide a pretty one-line summary.

`load_dictionary` stops at the first bad line; this is the diagnostic
counterpart used by `wordle-solve --check`.

Typical use:
    from wordle_solve.datasets import validate_wordlist, pretty_summary
    rep = validate_wordlist("words")
    print(pretty_summary(rep))
"""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass, asdict, field
from pathlib import Path
from typing import Dict, List

from .io import normalize_word, sha256_file


@dataclass
class ValidationReport:
    """Diagnostics and metadata for one word list."""
    path: str            # file path (as given)
    exists: bool         # did the file exist on disk?
    count: int           # number of VALID words after cleaning
    unique_count: int    # unique valid words (after dedupe)
    invalid_lines: int   # non-blank lines that are not alphabetic
    blank_lines: int
    lengths: Dict[int, int] = field(default_factory=dict)  # word length -> count
    sha256: str = ""     # SHA-256 of raw file bytes (empty string if missing)
    passed: bool = False
    issues: List[str] = field(default_factory=list)


def validate_wordlist(path: str) -> Dict:
    """
    Validate a dictionary file.

    Returns
    -------
    Dict
        A JSON-serializable dictionary (see ValidationReport schema). `passed`
        is strict: non-empty, no invalid lines, a single word length.
        Duplicates and blank lines are reported but do not fail the check,
        since the loader tolerates them.
    """
    p = Path(path)
    if not p.exists():
        rep = ValidationReport(path=path, exists=False, count=0, unique_count=0,
                               invalid_lines=0, blank_lines=0,
                               issues=[f"file not found: {path}"])
        return asdict(rep)

    valid: List[str] = []
    invalid = 0
    blank = 0
    with p.open("r", encoding="utf-8") as f:
        for raw in f:
            w = normalize_word(raw)
            if not w:
                blank += 1
            elif w.isalpha():
                valid.append(w)
            else:
                invalid += 1

    lengths = Counter(len(w) for w in valid)
    issues: List[str] = []
    if not valid:
        issues.append("file contains 0 valid words")
    if invalid:
        issues.append(f"{invalid} invalid line(s)")
    if len(lengths) > 1:
        issues.append(f"mixed word lengths {sorted(lengths)}")
    unique_count = len(set(valid))
    if unique_count != len(valid):
        issues.append(f"{len(valid) - unique_count} duplicate line(s)")
    if blank:
        issues.append(f"{blank} blank line(s)")

    rep = ValidationReport(
        path=str(p),
        exists=True,
        count=len(valid),
        unique_count=unique_count,
        invalid_lines=invalid,
        blank_lines=blank,
        lengths=dict(sorted(lengths.items())),
        sha256=sha256_file(p),
        passed=bool(valid) and invalid == 0 and len(lengths) == 1,
        issues=issues,
    )
    return asdict(rep)


def pretty_summary(report: Dict) -> str:
    """
    Produce a compact, human-friendly one-liner for the console.

    Example:
        words | words=2315 (uniq=2315, L=5, sha=abc123...) | OK
    """
    lengths = "/".join(str(n) for n in report["lengths"]) or "?"
    status = "OK" if report["passed"] else "FAIL: " + "; ".join(report["issues"])
    return (
        f"{report['path']} | words={report['count']} (uniq={report['unique_count']}, "
        f"L={lengths}, sha={(report.get('sha256') or '')[:12]}) | {status}"
    )
