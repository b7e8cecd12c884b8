"""
Word Source

Supplies secret words from the length-indexed word lists, either at random
or deterministically for a calendar date.
"""

import datetime
import random
from typing import Dict, List, Optional

from ..config.game_settings import SUPPORTED_WORD_LENGTHS, WORD_LISTS
from ..models.stats import DailyChallenge


def date_key(day: datetime.date) -> str:
    """
    Format a date as "year-month-day" with a zero-based month.

    This string is both the daily hash input and the DailyRecord date.
    """
    return f"{day.year}-{day.month - 1}-{day.day}"


def daily_hash(text: str) -> int:
    """
    Order-dependent 32-bit string hash (hash * 31 + char code).

    The accumulator wraps like a signed 32-bit integer.
    """
    value = 0
    for char in text:
        value = ((value << 5) - value + ord(char)) & 0xFFFFFFFF
    if value >= 0x80000000:
        value -= 0x100000000
    return value


class WordSource:
    """
    Word supplier for a session.

    Args:
        word_lists: Words keyed by length; defaults to the bundled lists
        rng: Random generator used by random_word, for reproducible draws
    """

    def __init__(self, word_lists: Optional[Dict[int, List[str]]] = None,
                 rng: Optional[random.Random] = None):
        source = word_lists if word_lists is not None else WORD_LISTS
        self.word_lists: Dict[int, List[str]] = {
            length: [word.lower() for word in words] for length, words in source.items()
        }
        self.rng = rng or random.Random()

    def _words_for(self, word_length: int) -> List[str]:
        if word_length not in SUPPORTED_WORD_LENGTHS:
            raise ValueError(f"Unsupported word length: {word_length}")
        words = self.word_lists.get(word_length)
        if not words:
            raise ValueError(f"No words available for length {word_length}")
        return words

    def random_word(self, word_length: int) -> str:
        return self.rng.choice(self._words_for(word_length))

    def daily_word(self, word_length: int, day: datetime.date) -> str:
        """
        Return the daily word for a length and date.

        Every caller gets the same word for the same (length, date).
        """
        words = self._words_for(word_length)
        index = abs(daily_hash(date_key(day))) % len(words)
        return words[index]

    def daily_challenge(self, day: datetime.date) -> DailyChallenge:
        """Describe the daily puzzle: the length alternates with hash parity."""
        key = date_key(day)
        value = abs(daily_hash(key))
        word_length = 5 if value % 2 == 0 else 6
        words = self._words_for(word_length)
        return DailyChallenge(date=key, word_index=value % len(words), word_length=word_length)
