from pathlib import Path

from nulldle.config import BUNDLED_WORDS_PATH
from nulldle.datasets import pretty_summary, validate_wordlists


def _write(p: Path, lines):
    p.write_text("\n".join(lines) + "\n", encoding="utf-8")


def test_validate_wordlists_happy_path(tmp_path: Path):
    allw = tmp_path / "allowed_5.txt"
    ans = tmp_path / "answers_5.txt"
    _write(allw, ["# five-letter words", "crane", "raise", "stare", "trace", "cared"])
    _write(ans, ["crane", "raise", "stare"])

    rep = validate_wordlists(5, str(allw), str(ans))
    assert rep["passed"] is True
    assert rep["answers_subset_allowed"] is True
    assert rep["allowed"]["count"] == 5
    s = pretty_summary(rep)
    assert "N=5" in s and "answers⊆allowed=True" in s and s.endswith("OK")


def test_validate_dictionary_only(tmp_path: Path):
    allw = tmp_path / "words.txt"
    _write(allw, ["crane", "raise"])
    rep = validate_wordlists(5, str(allw))
    assert rep["passed"] is True
    assert rep["answers"] is None
    assert "answers=-" in pretty_summary(rep)


def test_validate_wordlists_flags_errors(tmp_path: Path):
    allw = tmp_path / "allowed_6.txt"
    # 'crane' (len 5) invalid for N=6, '???' invalid chars, 'Raiser' not lowercase
    allw.write_text("raiser\ncrane\n???\nRaiser\n", encoding="utf-8")

    rep = validate_wordlists(6, str(allw))
    assert rep["passed"] is False
    assert rep["allowed"]["invalid_lines"] == 3
    assert any("invalid" in msg for msg in rep["issues"])


def test_validate_wordlists_subset_violation(tmp_path: Path):
    allw = tmp_path / "allowed_5.txt"
    ans = tmp_path / "answers_5.txt"
    _write(allw, ["crane", "stare"])
    _write(ans, ["crane", "raise", "stare"])  # 'raise' not allowed

    rep = validate_wordlists(5, str(allw), str(ans))
    assert rep["passed"] is False
    assert rep["answers_subset_allowed"] is False
    assert any("subset" in msg and "raise" in msg for msg in rep["issues"])


def test_duplicates_reported_but_not_fatal(tmp_path: Path):
    allw = tmp_path / "allowed_5.txt"
    _write(allw, ["crane", "crane", "stare"])
    rep = validate_wordlists(5, str(allw))
    assert rep["passed"] is True
    assert rep["allowed"]["unique_count"] == 2
    assert "allowed contains duplicate lines" in rep["issues"]


def test_missing_file(tmp_path: Path):
    rep = validate_wordlists(5, str(tmp_path / "nope.txt"))
    assert rep["passed"] is False
    assert rep["allowed"]["exists"] is False
    assert "missing" in pretty_summary(rep)


def test_bundled_dictionary_is_clean():
    rep = validate_wordlists(5, BUNDLED_WORDS_PATH)
    assert rep["passed"] is True, rep["issues"]
    assert rep["allowed"]["unique_count"] == rep["allowed"]["count"]
