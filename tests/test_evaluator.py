"""
Testing pure guess evaluation.
"""

from collections import Counter
from itertools import product

import pytest

from wordgame.models.game import HintSummary, LetterStatus
from wordgame.services.evaluator import (
    evaluate, hint_summary, is_exact_match, is_letters, is_valid_word, merge_keyboard_status
)

C, P, A = LetterStatus.CORRECT, LetterStatus.PRESENT, LetterStatus.ABSENT


def statuses(guess, secret):
    return [item.status for item in evaluate(guess, secret)]


def test_duplicate_guess_letters_limited_by_secret_count():
    # secret "speed" holds two e's; the third guessed e gets nothing
    assert statuses("eerie", "speed") == [P, P, A, A, A]


def test_exact_match_reserved_before_present():
    # the p at index 2 is exact; only one p is left for the rest of the guess
    assert statuses("puppy", "apple") == [P, A, C, A, A]


def test_mixed_correct_and_present():
    assert statuses("geese", "speed") == [A, P, C, P, A]


def test_feedback_keeps_guess_letters_in_order():
    feedback = evaluate("crane", "ghost")
    assert [item.letter for item in feedback] == list("crane")
    assert len(feedback) == 5


def test_case_insensitive():
    feedback = evaluate("SPEED", "speed")
    assert all(item.status is C for item in feedback)
    assert "".join(item.letter for item in feedback) == "speed"


def test_length_mismatch_fails_loudly():
    with pytest.raises(ValueError):
        evaluate("speed", "planet")
    with pytest.raises(ValueError):
        hint_summary("planet", "speed")


def test_credit_never_exceeds_secret_letter_count():
    alphabet = "abe"
    secrets = ["abbey", "eerie", "speed", "babee"]
    for secret in secrets:
        for letters in product(alphabet, repeat=5):
            guess = "".join(letters)
            feedback = evaluate(guess, secret)
            assert len(feedback) == len(guess)
            credited = Counter(item.letter for item in feedback if item.status is not A)
            secret_counts = Counter(secret)
            for letter, count in credited.items():
                assert count <= secret_counts[letter]


def test_exact_match_iff_all_correct():
    pairs = [("speed", "speed"), ("Speed", "speed"), ("spede", "speed"), ("ghost", "speed")]
    for guess, secret in pairs:
        all_correct = all(item.status is C for item in evaluate(guess, secret))
        assert is_exact_match(guess, secret) == all_correct


def test_hint_summary_same_word_counts_distinct_letters():
    assert hint_summary("speed", "speed") == HintSummary(letters_in_word=4, correct_position=5)


def test_hint_summary_ignores_multiplicity():
    hint = hint_summary("eerie", "speed")
    assert hint.letters_in_word == 1
    assert hint.correct_position == 0


def test_hint_summary_partial():
    hint = hint_summary("crane", "plane")
    assert hint.correct_position == 3
    assert hint.letters_in_word == 3


@pytest.mark.parametrize("word,length,expected", [
    ("speed", None, True),
    ("  Speed ", 5, True),
    ("planet", 6, True),
    ("planet", 5, False),
    ("spee", None, False),
    ("sevenxx", None, False),
    ("sp3ed", 5, False),
    ("spéed", 5, False),
    ("", None, False),
])
def test_is_valid_word(word, length, expected):
    assert is_valid_word(word, length) is expected


def test_keyboard_status_only_upgrades():
    keyboard = {}
    merge_keyboard_status(keyboard, evaluate("speed", "speed"))
    assert keyboard["s"] is C

    merge_keyboard_status(keyboard, evaluate("ghost", "speed"))
    assert keyboard["s"] is C
    assert keyboard["g"] is A

    merge_keyboard_status(keyboard, evaluate("gecko", "eagle"))
    assert keyboard["g"] is P


@pytest.mark.parametrize("word,expected", [
    ("speed", True),
    (" speed", False),
    ("speed\n", False),
    ("sp3ed", False),
    ("", False),
])
def test_is_letters_rejects_padding(word, expected):
    assert is_letters(word) is expected
