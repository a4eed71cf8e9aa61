from pathlib import Path

import pytest
from nulldle.datasets import WordSource, read_words, write_words


def test_words_are_normalized_filtered_and_deduped():
    ws = WordSource([" CRANE", "crane", "raise", "cranes", "cr4ne", ""])
    assert ws.allowed == ["crane", "raise"]
    assert len(ws) == 2
    assert "Crane " in ws
    assert "stare" not in ws
    assert 12345 not in ws


def test_empty_source_raises():
    with pytest.raises(ValueError):
        WordSource(["toolong", "abc"])


def test_answers_pool_used_for_targets():
    ws = WordSource(["crane", "raise", "stare"], answers=["stare"], seed=1)
    assert {ws.pick_target() for _ in range(10)} == {"stare"}
    # answers need not be guessable twice over; allowed still drives membership
    assert "crane" in ws


def test_seeded_picks_are_reproducible():
    words = ["crane", "raise", "stare", "trace", "cared", "about", "zesty"]
    a = WordSource(words, seed=42)
    b = WordSource(words, seed=42)
    assert [a.pick_target() for _ in range(5)] == [b.pick_target() for _ in range(5)]


def test_forced_target():
    ws = WordSource(["about", "zesty"], forced_target="ABOUT")
    assert ws.pick_target() == "about"
    with pytest.raises(ValueError):
        WordSource(["about"], forced_target="abc")


def test_from_files_skips_comments(tmp_path: Path):
    allowed = tmp_path / "words.txt"
    answers = tmp_path / "answers.txt"
    write_words(["# comment", "crane", "raise", "stare"], allowed)
    write_words(["raise"], answers)

    assert read_words(allowed) == ["crane", "raise", "stare"]
    ws = WordSource.from_files(allowed, answers)
    assert ws.allowed == ["crane", "raise", "stare"]
    assert ws.answers == ["raise"]


def test_from_files_missing_path(tmp_path: Path):
    with pytest.raises(FileNotFoundError):
        WordSource.from_files(tmp_path / "missing.txt")


def test_default_dictionary_loads():
    ws = WordSource.default(seed=0)
    assert len(ws) > 100
    assert ws.pick_target() in ws
    assert "about" in ws
