"""
Game Configuration Constants Module

This module defines all game configuration constants. All game parameters
are centralized here to enable easy modification.
"""

import json
import os
from typing import Dict, Final, List, Tuple

SUPPORTED_WORD_LENGTHS: Final[Tuple[int, ...]] = (5, 6)
"""Word lengths a session may be started with."""

MAX_ATTEMPTS: Final[Dict[int, int]] = {5: 6, 6: 7}
"""
Maximum number of guess attempts allowed per game, keyed by word length.
Longer words get one extra attempt.
"""

# Persistent store keys
STATS_KEY: Final[str] = 'wordgame_stats'
SETTINGS_KEY: Final[str] = 'wordgame_settings'
DAILY_KEY: Final[str] = 'wordgame_daily'


def get_max_attempts(word_length: int) -> int:
    """Return the attempt budget for a word length."""
    return MAX_ATTEMPTS[word_length]


# Load word lists from JSON file
def _load_word_lists() -> Dict[int, List[str]]:
    """
    Load the length-indexed word lists from words.json.

    Returns:
        Dict[int, List[str]]: Lowercase words keyed by word length

    Raises:
        FileNotFoundError: If words.json file is not found
        ValueError: If JSON is malformed, a list is empty or contains invalid words
    """
    config_dir = os.path.dirname(os.path.abspath(__file__))
    json_file_path = os.path.join(config_dir, 'words.json')

    try:
        with open(json_file_path, 'r', encoding='utf-8') as f:
            raw_lists = json.load(f)
    except FileNotFoundError:
        raise FileNotFoundError(f"Word list file not found: {json_file_path}")
    except json.JSONDecodeError as e:
        raise ValueError(f"Invalid JSON in words.json: {e}")

    if not isinstance(raw_lists, dict):
        raise ValueError("JSON file must contain an object of word arrays keyed by length")

    word_lists = {}
    for length in SUPPORTED_WORD_LENGTHS:
        words = raw_lists.get(str(length))
        if not words:
            raise ValueError(f"Word list for length {length} cannot be empty")

        lowercase_words = [word.lower() for word in words]
        for word in lowercase_words:
            if len(word) != length:
                raise ValueError(f"Word '{word}' is not {length} characters long")
            if not word.isalpha():
                raise ValueError(f"Word '{word}' contains non-alphabetic characters")

        word_lists[length] = lowercase_words

    return word_lists


# Curated word database loaded from JSON file
WORD_LISTS: Final[Dict[int, List[str]]] = _load_word_lists()


def validate_word_list_integrity(word_lists: Dict[int, List[str]] = None) -> bool:
    """
    Validates the integrity and consistency of the word database.

    This function performs validation to ensure:
    1. Length validation: every word matches the length it is filed under
    2. Character validation: Only alphabetic characters allowed
    3. Uniqueness validation: No duplicate entries
    4. Format validation: Consistent lowercase formatting

    Returns:
        bool: True if the word lists pass all validation checks

    Raises:
        ValueError: If any validation check fails with detailed error message
    """
    if word_lists is None:
        word_lists = WORD_LISTS

    for length in SUPPORTED_WORD_LENGTHS:
        words = word_lists.get(length)
        if not words:
            raise ValueError(f"Word list for length {length} cannot be empty")

        for index, word in enumerate(words):
            if len(word) != length:
                raise ValueError(f"Word at index {index} '{word}' is not {length} characters long")

            if not word.isalpha():
                raise ValueError(f"Word at index {index} '{word}' contains non-alphabetic characters")

            if not word.islower():
                raise ValueError(f"Word at index {index} '{word}' is not in lowercase format")

        if len(words) != len(set(words)):
            duplicates = sorted({word for word in words if words.count(word) > 1})
            raise ValueError(f"Duplicate words found in {length}-letter list: {duplicates}")

    return True


def get_word_statistics() -> dict:
    """
    Analyzes the word lists and returns statistical information.

    Returns:
        dict: Statistical analysis including:
            - total_words: Number of words per length
            - avg_vowel_count: Average vowels per word per length
            - letter_frequency: Distribution of letters across all words
            - most_common_letters: Top five letters overall
    """
    vowels = set('aeiou')
    letter_frequency: Dict[str, int] = {}
    total_words = {}
    avg_vowel_count = {}

    for length, words in WORD_LISTS.items():
        total_words[length] = len(words)
        total_vowels = sum(len([char for char in word if char in vowels]) for word in words)
        avg_vowel_count[length] = round(total_vowels / len(words), 2)
        for word in words:
            for char in word:
                letter_frequency[char] = letter_frequency.get(char, 0) + 1

    return {
        "total_words": total_words,
        "avg_vowel_count": avg_vowel_count,
        "letter_frequency": letter_frequency,
        "most_common_letters": sorted(letter_frequency.items(), key=lambda x: x[1], reverse=True)[:5]
    }


# Module initialization: Validate configuration on import
if __name__ == "__main__":

    try:
        validate_word_list_integrity()
        print(" Word list validation passed")

        stats = get_word_statistics()
        print(f" Game statistics: {stats}")

        print(" All configuration validation checks passed")
    except ValueError as config_error:
        print(f" Configuration validation failed: {config_error}")
        exit(1)
