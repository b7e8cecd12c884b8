"""
Guess Evaluator

Pure functions scoring a guess against the secret word.
"""

import re
from typing import Dict, List, Optional

from ..config.game_settings import SUPPORTED_WORD_LENGTHS
from ..models.game import HintSummary, LetterFeedback, LetterStatus

_LETTERS_ONLY = re.compile(r"[a-z]+")


def normalize_word(word: str) -> str:
    return word.strip().lower()


def is_letters(word: str) -> bool:
    """True if the word is non-empty and made only of a-z, with no padding."""
    return bool(_LETTERS_ONLY.fullmatch(word))


def is_valid_word(word: str, word_length: Optional[int] = None) -> bool:
    """
    Check that a word can be played.

    Any alphabetic word of a supported length is accepted; there is no
    dictionary lookup.

    Args:
        word: Raw player input
        word_length: Required length, if the caller has one

    Returns:
        True if the word is playable
    """
    clean_word = normalize_word(word)
    if len(clean_word) not in SUPPORTED_WORD_LENGTHS:
        return False

    if word_length is not None and len(clean_word) != word_length:
        return False

    return is_letters(clean_word)


def _check_lengths(guess: str, secret: str) -> None:
    if len(guess) != len(secret):
        raise ValueError(
            f"Guess length {len(guess)} does not match secret length {len(secret)}"
        )


def evaluate(guess: str, secret: str) -> List[LetterFeedback]:
    """
    Implements the Wordle letter evaluation algorithm.

    Exact matches are reserved first so that duplicate letters are never
    over-credited: a letter is marked CORRECT or PRESENT at most as many
    times as it occurs in the secret.

    Args:
        guess: The guessed word
        secret: The secret word, same length as the guess

    Returns:
        One LetterFeedback per guess position, in guess order

    Raises:
        ValueError: If the lengths differ (caller must reject these first)
    """
    guess = guess.lower()
    secret = secret.lower()
    _check_lengths(guess, secret)

    remaining: Dict[str, int] = {}
    for char in secret:
        remaining[char] = remaining.get(char, 0) + 1

    statuses: List[Optional[LetterStatus]] = [None] * len(guess)

    # First pass: exact position matches
    for i, (g, s) in enumerate(zip(guess, secret)):
        if g == s:
            statuses[i] = LetterStatus.CORRECT
            remaining[g] -= 1

    # Second pass: left to right over unresolved positions
    for i, char in enumerate(guess):
        if statuses[i] is not None:
            continue
        if remaining.get(char, 0) > 0:
            statuses[i] = LetterStatus.PRESENT
            remaining[char] -= 1
        else:
            statuses[i] = LetterStatus.ABSENT

    return [LetterFeedback(letter, status) for letter, status in zip(guess, statuses)]


def hint_summary(guess: str, secret: str) -> HintSummary:
    """
    Calculate the hint shown after a guess.

    correct_position counts exact matches. letters_in_word counts the
    distinct guessed letters that occur anywhere in the secret, each at most
    once. This is looser than evaluate(), which honours multiplicity.
    """
    guess = guess.lower()
    secret = secret.lower()
    _check_lengths(guess, secret)

    correct_position = sum(1 for g, s in zip(guess, secret) if g == s)
    letters_in_word = len(set(guess) & set(secret))

    return HintSummary(letters_in_word=letters_in_word, correct_position=correct_position)


def is_exact_match(guess: str, secret: str) -> bool:
    return guess.lower() == secret.lower()


def merge_keyboard_status(keyboard_status: Dict[str, LetterStatus],
                          feedback: List[LetterFeedback]) -> None:
    """
    Update best-known letter statuses in place.

    A status is only overwritten by one of strictly higher rank, so a letter
    never goes from CORRECT back to PRESENT or ABSENT.
    """
    for item in feedback:
        current = keyboard_status.get(item.letter)
        if current is None or item.status.rank > current.rank:
            keyboard_status[item.letter] = item.status
