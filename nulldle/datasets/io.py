"""
Plain-text word list I/O.

Word lists are UTF-8, one word per line. Lines starting with '#' are
comments and blank lines are ignored by `read_words`; `read_lines` returns
the raw lines so the validator can count bad ones.
"""

from __future__ import annotations
from pathlib import Path
from typing import Iterable, List


def read_lines(p: Path | str) -> List[str]:
    """Raw lines without their line endings. Raises FileNotFoundError."""
    p = Path(p)
    if not p.is_file():
        raise FileNotFoundError(p)
    with p.open("r", encoding="utf-8") as f:
        return [ln.rstrip("\r\n") for ln in f]


def read_words(p: Path | str) -> List[str]:
    """Non-blank, non-comment lines, stripped (case untouched)."""
    words = []
    for ln in read_lines(p):
        w = ln.strip()
        if w and not w.startswith("#"):
            words.append(w)
    return words


def write_words(words: Iterable[str], p: Path | str) -> str:
    """Write one word per line with a trailing newline; returns the path."""
    p = Path(p)
    p.parent.mkdir(parents=True, exist_ok=True)
    with p.open("w", encoding="utf-8", newline="\n") as f:
        for w in words:
            f.write(f"{w}\n")
    return str(p)
