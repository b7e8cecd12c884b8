"""
Testing word selection: random draws, the date hash and daily words.
"""

import datetime
import random

import pytest

from wordgame.config.game_settings import WORD_LISTS
from wordgame.services.word_source import WordSource, daily_hash, date_key
from tests.conftest import WORDS


def test_date_key_uses_zero_based_month():
    assert date_key(datetime.date(2026, 10, 17)) == "2026-9-17"
    assert date_key(datetime.date(2026, 1, 5)) == "2026-0-5"


def test_daily_hash_small_values():
    assert daily_hash("") == 0
    assert daily_hash("a") == 97
    assert daily_hash("ab") == 97 * 31 + 98


def test_daily_hash_wraps_to_signed_32_bits():
    value = daily_hash("2026-9-17" * 20)
    assert -2 ** 31 <= value < 2 ** 31


def test_daily_word_is_deterministic_for_a_date():
    day = datetime.date(2026, 10, 17)
    first = WordSource().daily_word(5, day)
    second = WordSource(rng=random.Random(99)).daily_word(5, day)
    assert first == second
    assert first in WORD_LISTS[5]


def test_daily_word_index_follows_hash():
    day = datetime.date(2026, 3, 2)
    source = WordSource(WORDS)
    expected_index = abs(daily_hash("2026-2-2")) % len(WORDS[6])
    assert source.daily_word(6, day) == WORDS[6][expected_index]


def test_daily_word_changes_across_dates():
    source = WordSource()
    start = datetime.date(2026, 1, 1)
    words = {source.daily_word(5, start + datetime.timedelta(days=n)) for n in range(30)}
    assert len(words) > 1


def test_random_word_draws_from_list_for_length():
    source = WordSource(WORDS, rng=random.Random(1))
    for _ in range(20):
        assert source.random_word(5) in WORDS[5]
        assert source.random_word(6) in WORDS[6]


def test_random_word_reproducible_with_seed():
    first = [WordSource(WORDS, rng=random.Random(3)).random_word(5) for _ in range(3)]
    second = [WordSource(WORDS, rng=random.Random(3)).random_word(5) for _ in range(3)]
    assert first == second


def test_unsupported_length_rejected():
    source = WordSource(WORDS)
    with pytest.raises(ValueError):
        source.random_word(7)
    with pytest.raises(ValueError):
        source.daily_word(4, datetime.date(2026, 10, 17))


def test_daily_challenge_length_follows_hash_parity():
    source = WordSource(WORDS)
    for offset in range(10):
        day = datetime.date(2026, 10, 1) + datetime.timedelta(days=offset)
        challenge = source.daily_challenge(day)
        value = abs(daily_hash(date_key(day)))
        assert challenge.date == date_key(day)
        assert challenge.word_length == (5 if value % 2 == 0 else 6)
        assert challenge.word_index == value % len(WORDS[challenge.word_length])
