"""
Word shape checks.

A word is well-formed iff it is a string of exactly N letters a-z once
stripped and lowercased. Dictionary membership and repetition are checked
by the session, which knows the word source and the history.
"""

from __future__ import annotations


def normalize(word: str) -> str:
    """Canonical form used everywhere: stripped, lowercase."""
    return word.strip().lower()


def is_well_formed(word, N: int) -> bool:
    if not isinstance(word, str):
        return False
    w = normalize(word)
    return len(w) == N and w.isascii() and w.isalpha()
