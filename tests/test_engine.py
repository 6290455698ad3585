from collections import Counter

from wordle_term.engine import Feedback, evaluate_guess, is_valid, is_win, to_emoji, to_pattern

import pytest

WORDS = ["APPLE", "PAPER", "ROBOT", "OOZES", "LLAMA", "LABEL", "SPEED", "ERASE",
         "EERIE", "GEESE", "CRANE", "TATTY", "ABBEY", "KAYAK", "MAMMA"]


def test_valid_five_letters_any_case():
    assert is_valid("HELLO")
    assert is_valid("world")
    assert is_valid("HeLLo")


def test_invalid_lengths():
    for w in ["", "HI", "WORD", "WORLDS", "ELEPHANT"]:
        assert not is_valid(w)


def test_invalid_characters():
    for w in ["HELL0", "12345", "HEL-O", "WO RD", "HELO!", " HELO"]:
        assert not is_valid(w)


@pytest.mark.parametrize("guess,target,expected", [
    ("APPLE", "APPLE", [2, 2, 2, 2, 2]),
    ("XYZIJ", "APPLE", [0, 0, 0, 0, 0]),
    ("APPEL", "APPLE", [2, 2, 2, 1, 1]),
    ("PAPER", "APPLE", [1, 1, 2, 1, 0]),
    ("OOZES", "ROBOT", [1, 2, 0, 0, 0]),
    ("LLAMA", "LABEL", [2, 1, 1, 0, 0]),
    ("ERASE", "SPEED", [1, 0, 0, 1, 1]),
    ("AAAAA", "APPLE", [2, 0, 0, 0, 0]),
])
def test_known_feedback(guess, target, expected):
    assert evaluate_guess(guess, target) == expected


def test_single_positions():
    assert evaluate_guess("AXXXX", "APPLE")[0] == Feedback.CORRECT
    assert evaluate_guess("PXXXX", "APPLE")[0] == Feedback.PRESENT


def test_non_letters_are_just_absent():
    assert evaluate_guess("XYZ12", "APPLE") == [0, 0, 0, 0, 0]


def test_correct_wins_over_earlier_present():
    # the only E in the target is at position 4; the earlier E gets nothing
    assert evaluate_guess("EERIE", "CRANE") == [0, 0, 1, 0, 2]


def test_identity_is_all_correct():
    for w in WORDS:
        assert is_win(evaluate_guess(w, w))


def test_never_more_hits_than_target_letters():
    for guess in WORDS:
        for target in WORDS:
            fb = evaluate_guess(guess, target)
            hits = Counter(ch for ch, f in zip(guess, fb) if f != Feedback.ABSENT)
            want = Counter(target)
            for ch, n in hits.items():
                assert n <= want[ch], (guess, target)


def test_length_mismatch_is_rejected():
    with pytest.raises(ValueError):
        evaluate_guess("APPLES", "APPLE")


def test_is_win():
    assert is_win([2, 2, 2, 2, 2])
    assert not is_win([2, 2, 2, 2, 1])
    assert not is_win([])


def test_pattern_and_emoji():
    fb = evaluate_guess("PAPER", "APPLE")
    assert to_pattern(fb) == "YYGYK"
    assert to_emoji(fb) == "🟨🟨🟩🟨⬛"


def test_disjoint_words_are_all_absent():
    pairs = 0
    for guess in WORDS:
        for target in WORDS:
            if set(guess) & set(target):
                continue
            pairs += 1
            assert evaluate_guess(guess, target) == [Feedback.ABSENT] * 5, (guess, target)
    assert pairs > 0
