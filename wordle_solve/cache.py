"""
First-guess cache.

Scoring the opening move means scoring the whole dictionary, which is the most
expensive round by far and always gives the same answer for the same word
list. The chosen word's index is therefore stored in a small JSON object keyed
by the dictionary's SHA-256:

    {"<sha256 hex>": <index into the dictionary>, ...}
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Dict, Optional

log = logging.getLogger(__name__)


class FirstGuessCache:
    def __init__(self, path: Path | str):
        self.path = Path(path)
        self.entries: Dict[str, int] = {}

    def load(self) -> "FirstGuessCache":
        """Read the cache file; a missing or unreadable file means an empty cache."""
        if not self.path.exists():
            return self
        try:
            data = json.loads(self.path.read_text(encoding="utf-8"))
        except (OSError, ValueError) as e:
            log.warning(f"Ignoring unreadable cache {self.path}: {e}")
            return self
        if not isinstance(data, dict):
            log.warning(f"Ignoring malformed cache {self.path}")
            return self
        self.entries = {k: v for k, v in data.items() if isinstance(v, int) and not isinstance(v, bool)}
        return self

    def get(self, sha256: str) -> Optional[int]:
        return self.entries.get(sha256)

    def put(self, sha256: str, index: int) -> None:
        self.entries[sha256] = index

    def save(self) -> str:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.path.write_text(json.dumps(self.entries, indent=2), encoding="utf-8")
        log.debug(f"Wrote {len(self.entries)} cache entries to {self.path}")
        return str(self.path)
