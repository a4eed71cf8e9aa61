import itertools

import pytest
from nulldle.engine import (
    InvalidLength, LetterScore, evaluate, filter_candidates, from_pattern, is_solved,
    is_well_formed, to_pattern,
)

# --- N=5 golden tests (duplicates + placements) ---
@pytest.mark.parametrize("answer,guess,expected", [
    ("level", "belle", "-GYYY"),
    ("level", "level", "GGGGG"),
    ("level", "lemon", "GG---"),
    ("scoop", "cools", "YYG-Y"),
    ("crane", "raise", "YY--G"),
    ("crane", "stare", "--GYG"),
    ("alert", "belly", "-YY--"),
    ("about", "zesty", "---Y-"),
])
def test_evaluate_n5_golden(answer, guess, expected):
    assert to_pattern(evaluate(answer, guess)) == expected


# --- N=6 samples: the scorer is length-agnostic ---
@pytest.mark.parametrize("answer,guess,expected", [
    ("letter", "settle", "-GGGYY"),
    ("letter", "little", "G-GG-Y"),
    ("palate", "planet", "GYY-YY"),
    ("tinket", "kitten", "YGYYGY"),
])
def test_evaluate_n6_samples(answer, guess, expected):
    assert to_pattern(evaluate(answer, guess)) == expected


@pytest.mark.parametrize("word", ["apple", "about", "level", "zzzzz"])
def test_guess_equal_to_target_is_all_correct(word):
    fb = evaluate(word, word)
    assert all(s is LetterScore.CORRECT for s in fb)
    assert is_solved(fb)


def test_duplicate_letter_only_credited_once():
    # ALERT has one L; BELLY guesses two
    fb = evaluate("ALERT", "BELLY")
    assert fb[2] is LetterScore.PRESENT
    assert fb[3] is LetterScore.ABSENT


def test_credit_never_exceeds_target_multiplicity():
    words = ["level", "belle", "alert", "belly", "apple", "paper", "llama", "eerie"]
    for target, guess in itertools.product(words, repeat=2):
        fb = evaluate(target, guess)
        for letter in set(guess):
            credited = sum(1 for g, s in zip(guess, fb)
                           if g == letter and s is not LetterScore.ABSENT)
            assert credited <= target.count(letter), (target, guess, letter)


def test_position_matches_claim_credit_before_present():
    # target has one E, at the end; the guess's trailing E takes it
    assert to_pattern(evaluate("crane", "eerie")) == "--Y-G"


def test_evaluate_is_case_insensitive():
    assert evaluate("Apple", "PAPER") == evaluate("apple", "paper")


def test_evaluate_is_deterministic():
    assert evaluate("apple", "paper") == evaluate("apple", "paper")


def test_evaluate_rejects_mismatched_lengths():
    with pytest.raises(InvalidLength) as exc:
        evaluate("HELLO", "HELL")
    assert exc.value.expected == 5 and exc.value.actual == 4
    # also usable as a plain ValueError
    with pytest.raises(ValueError):
        evaluate("HELL", "HELLO")


def test_pattern_round_trip_symbols():
    assert from_pattern("GY-") == (LetterScore.CORRECT, LetterScore.PRESENT, LetterScore.ABSENT)


def test_letter_score_priority_order():
    assert LetterScore.CORRECT.priority > LetterScore.PRESENT.priority > LetterScore.ABSENT.priority


def test_filter_candidates_n5_history():
    words = ["crane", "raise", "stare", "trace", "cared", "racer", "scoop"]
    history = [("raise", from_pattern("YY--G"))]
    cand = filter_candidates(words, history, N=5)
    assert "crane" in cand and "stare" not in cand and "scoop" not in cand


def test_filter_candidates_skips_malformed_words():
    assert filter_candidates(["crane", "cranes", "cr4ne"], [], N=5) == ["crane"]


def test_is_well_formed():
    assert is_well_formed(" CRANE ", 5) is True
    assert is_well_formed("cranes", 5) is False
    assert is_well_formed("???", 5) is False
    assert is_well_formed(None, 5) is False
