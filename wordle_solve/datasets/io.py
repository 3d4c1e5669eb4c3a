"""
Dictionary loading.

The loader is the only place that decides what a "word" is. The engine takes
its output as-is: an ordered list of unique, equal-length words.

Rules:
  - UTF-8, one word per line; surrounding whitespace stripped
  - blank lines skipped
  - NFC-normalized and lowercased
  - every word must be alphabetic (`str.isalpha`, so any Unicode letters)
  - every word must have the same length as the first one
  - duplicates dropped (first occurrence wins, original order kept)
"""

from __future__ import annotations

import hashlib
import logging
import unicodedata
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, List, Tuple

from wordle_solve.errors import EmptyDictionary, InvalidWord, LengthMismatch

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class Dictionary:
    """Loaded word list plus the metadata the solver needs."""
    words: Tuple[str, ...]   # unique, in file order
    length: int              # L, shared by every word
    sha256: str              # hash of the raw file bytes (cache key)

    def __len__(self) -> int:
        return len(self.words)


def read_lines(p: Path | str) -> List[str]:
    """
    Read a UTF-8 text file into a list of lines, stripping trailing CR/LF.
    Raises FileNotFoundError if the path doesn't exist.
    """
    p = Path(p)
    if not p.exists():
        raise FileNotFoundError(p)
    return [ln.rstrip("\r\n") for ln in p.read_text(encoding="utf-8").splitlines()]


def normalize_word(raw: str) -> str:
    """Canonical form of a word: stripped, NFC, lowercase."""
    return unicodedata.normalize("NFC", raw.strip()).lower()


def unique_preserve_order(lines: Iterable[str]) -> List[str]:
    seen, out = set(), []
    for s in lines:
        if s not in seen:
            seen.add(s)
            out.append(s)
    return out


def parse_words(lines: Iterable[str], source: str = "<words>") -> List[str]:
    """
    Apply the loader rules to already-read lines and return the word list.

    Raises:
      InvalidWord     a non-blank line contains non-letters
      LengthMismatch  lines disagree on length
      EmptyDictionary nothing usable was found
    """
    words: List[str] = []
    length = None
    for lineno, raw in enumerate(lines, start=1):
        w = normalize_word(raw)
        if not w:
            continue
        if not w.isalpha():
            raise InvalidWord(f"{source}:{lineno}: {raw.strip()!r} is not a word")
        if length is None:
            length = len(w)
        elif len(w) != length:
            raise LengthMismatch(
                f"Some lines in {source} contain {len(w)} characters while others "
                f"contain {length} characters (e.g. {w}).")
        words.append(w)

    if not words:
        raise EmptyDictionary(f"{source} contains 0 words")

    unique = unique_preserve_order(words)
    if len(unique) != len(words):
        log.warning(f"{source}: dropped {len(words) - len(unique)} duplicate word(s)")
    return unique


def sha256_file(path: Path) -> str:
    """Compute SHA-256 of a file's raw bytes."""
    h = hashlib.sha256()
    with path.open("rb") as f:
        for chunk in iter(lambda: f.read(8192), b""):
            h.update(chunk)
    return h.hexdigest()


def load_dictionary(path: Path | str) -> Dictionary:
    """Read and validate a word list file; see the module docstring for rules."""
    p = Path(path)
    words = parse_words(read_lines(p), source=str(p))
    d = Dictionary(words=tuple(words), length=len(words[0]), sha256=sha256_file(p))
    log.info(f"Loaded {len(d)} {d.length}-letter words from {p}")
    return d


def dictionary_from_words(words: Iterable[str]) -> Dictionary:
    """Build a Dictionary from in-memory words (tests, embedding)."""
    ws = parse_words(words)
    h = hashlib.sha256("\n".join(ws).encode("utf-8")).hexdigest()
    return Dictionary(words=tuple(ws), length=len(ws[0]), sha256=h)
