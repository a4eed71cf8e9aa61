"""
Word-list validator.

Checks the dictionary (allowed guesses) and, optionally, a separate answer
pool before they are handed to a WordSource:

- formatting: lowercase a-z, exact length N, one word per line
  ('#' comment lines are skipped, blank lines count as invalid)
- duplicates and invalid lines per file, SHA-256 of the raw bytes
- answers ⊆ allowed, so every possible target is also a legal guess

Typical use:
    from nulldle.datasets import validate_wordlists, pretty_summary
    rep = validate_wordlists(5, "nulldle/datasets/data/words_5.txt")
    print(pretty_summary(rep))
"""

from __future__ import annotations

import hashlib
from dataclasses import asdict, dataclass, field
from pathlib import Path
from typing import Dict, List, Optional, Tuple

from .io import read_lines


@dataclass
class FileReport:
    """Per-file diagnostics."""
    path: str
    exists: bool
    count: int = 0           # valid words, duplicates included
    unique_count: int = 0
    invalid_lines: int = 0
    sha256: str = ""         # empty when the file is missing


@dataclass
class ValidationReport:
    N: int
    allowed: FileReport
    answers: Optional[FileReport]
    answers_subset_allowed: bool
    passed: bool
    issues: List[str] = field(default_factory=list)


def _sha256_file(path: Path) -> str:
    h = hashlib.sha256()
    with path.open("rb") as f:
        for chunk in iter(lambda: f.read(8192), b""):
            h.update(chunk)
    return h.hexdigest()


def _scan(path: Path, N: int) -> Tuple[List[str], int]:
    """Return (valid_words, invalid_line_count) for one file."""
    valid: List[str] = []
    invalid = 0
    for raw in read_lines(path):
        w = raw.strip()
        if w.startswith("#"):
            continue
        # already-lowercase, ascii letters only, exact length
        if w and w == w.lower() and w.isascii() and w.isalpha() and len(w) == N:
            valid.append(w)
        else:
            invalid += 1
    return valid, invalid


def _report_file(path_str: str, N: int, label: str, issues: List[str]) -> Tuple[FileReport, set]:
    p = Path(path_str)
    if not p.is_file():
        issues.append(f"{label} file not found: {path_str}")
        return FileReport(path=path_str, exists=False), set()

    words, invalid = _scan(p, N)
    unique = set(words)
    rep = FileReport(
        path=str(p),
        exists=True,
        count=len(words),
        unique_count=len(unique),
        invalid_lines=invalid,
        sha256=_sha256_file(p),
    )
    if rep.count == 0:
        issues.append(f"{label} file contains 0 valid words")
    if invalid:
        issues.append(f"{label} has {invalid} invalid line(s)")
    if rep.count != rep.unique_count:
        issues.append(f"{label} contains duplicate lines")
    return rep, unique


def validate_wordlists(N: int, allowed_path: str, answers_path: Optional[str] = None) -> Dict:
    """
    Validate the dictionary (and optional answer pool) for word length N.

    Returns a JSON-serializable dict (ValidationReport schema). `passed` is
    strict: every file present and non-empty, no invalid lines, and the
    answers (if given) all appear in the dictionary. Duplicates are reported
    but do not fail validation; WordSource dedupes on load.
    """
    issues: List[str] = []

    allowed_rep, allowed_set = _report_file(allowed_path, N, "allowed", issues)

    answers_rep = None
    subset_ok = True
    if answers_path is not None:
        answers_rep, answers_set = _report_file(answers_path, N, "answers", issues)
        subset_ok = answers_rep.exists and allowed_rep.exists and answers_set <= allowed_set
        if answers_rep.exists and allowed_rep.exists and not subset_ok:
            # a few examples are enough to debug
            missing = sorted(answers_set - allowed_set)[:5]
            issues.append(f"answers not subset of allowed (e.g., {missing})")

    files = [allowed_rep] + ([answers_rep] if answers_rep else [])
    passed = subset_ok and all(f.exists and f.count > 0 and f.invalid_lines == 0 for f in files)

    return asdict(ValidationReport(
        N=N,
        allowed=allowed_rep,
        answers=answers_rep,
        answers_subset_allowed=subset_ok,
        passed=passed,
        issues=issues,
    ))


def pretty_summary(report: Dict) -> str:
    """
    One-line summary for the console, e.g.

        N=5 | allowed=512 (uniq=512, sha=abc123def456) | answers=- | answers⊆allowed=True | OK
    """
    def _fmt(rep: Optional[Dict]) -> str:
        if rep is None:
            return "-"
        if not rep["exists"]:
            return "missing"
        return f"{rep['count']} (uniq={rep['unique_count']}, sha={rep['sha256'][:12]})"

    status = "OK" if report["passed"] else "FAIL"
    return (
        f"N={report['N']} | allowed={_fmt(report['allowed'])} "
        f"| answers={_fmt(report['answers'])} "
        f"| answers⊆allowed={report['answers_subset_allowed']} | {status}"
    )
