"""
Session Service

Contains the single-player game state machine: starting sessions, applying
guesses, tracking the keyboard and reporting finished games to the stats.
"""

import datetime
import logging
from typing import Callable, Dict, Optional, Tuple, Union

from ..config.game_settings import SUPPORTED_WORD_LENGTHS, get_max_attempts
from ..models.game import (
    GameMode, GameSession, GameState, GameStatus, Guess, GuessResult, LetterStatus
)
from .evaluator import (
    evaluate, hint_summary, is_exact_match, is_letters, merge_keyboard_status
)
from .stats_service import StatsStore
from .word_source import WordSource

logger = logging.getLogger(__name__)


class SessionEngine:
    """
    Core game service managing the one active session.

    This class handles:
    - Secret word selection (override, daily or random)
    - Guess validation and evaluation
    - Keyboard status and uncommitted guess buffer
    - Exactly one stats update per finished game

    Args:
        word_source: Supplier of secret words
        stats_store: Lifetime statistics and daily records
        today: Callable returning the current date; defaults to the stats store's
    """

    def __init__(self, word_source: WordSource, stats_store: StatsStore,
                 today: Optional[Callable[[], datetime.date]] = None):
        self.word_source = word_source
        self.stats_store = stats_store
        self.today = today or stats_store.today
        self.session: Optional[GameSession] = None

    def start_session(self, word_length: int, game_mode: Union[GameMode, str] = GameMode.UNLIMITED,
                      override_word: Optional[str] = None) -> GameSession:
        """
        Creates a new session, discarding any previous one.

        Args:
            word_length: 5 or 6
            game_mode: GameMode or its string value
            override_word: Secret to use instead of drawing one; ignored unless
                it is a playable word of word_length letters

        Returns:
            GameSession: The new active session
        """
        if word_length not in SUPPORTED_WORD_LENGTHS:
            raise ValueError(f"Word length must be one of {SUPPORTED_WORD_LENGTHS}")
        game_mode = GameMode(game_mode)

        status = GameStatus.PLAYING
        if self._usable_override(override_word, word_length):
            secret_word = override_word.lower()
            logger.info("Using custom word for %s session", game_mode.value)
        elif game_mode is GameMode.DAILY:
            today = self.today()
            secret_word = self.word_source.daily_word(word_length, today)
            status = self._completed_daily_status(today)
        else:
            if override_word:
                logger.warning("Ignoring custom word of wrong length or format")
            secret_word = self.word_source.random_word(word_length)

        self.session = GameSession(
            secret_word=secret_word,
            word_length=word_length,
            game_mode=game_mode,
            max_attempts=get_max_attempts(word_length),
            status=status,
        )
        logger.info("Started %s session: %d letters, %d attempts",
                    game_mode.value, word_length, self.session.max_attempts)
        return self.session

    @staticmethod
    def _usable_override(override_word, word_length: int) -> bool:
        """An override is used as-is: no trimming, exact length, letters only."""
        return (isinstance(override_word, str)
                and len(override_word) == word_length
                and is_letters(override_word.lower()))

    def _completed_daily_status(self, today: datetime.date) -> GameStatus:
        """Terminal status if today's daily was already played, else PLAYING."""
        if not self.stats_store.is_daily_completed(today):
            return GameStatus.PLAYING
        record = self.stats_store.daily_record()
        logger.info("Daily challenge already completed for %s", record.date)
        return GameStatus.WON if record.won else GameStatus.LOST

    def reset_session(self) -> GameSession:
        """Start over with the last session's length and mode (default: 5-letter unlimited)."""
        if self.session is None:
            return self.start_session(5, GameMode.UNLIMITED)
        return self.start_session(self.session.word_length, self.session.game_mode)

    def is_valid_guess(self, guess: str) -> Tuple[bool, str]:
        """
        Validates a guess for the active session.

        Returns:
            Tuple of (is_valid, error_message)
        """
        session = self.session
        if session is None:
            return False, "No active game"

        if session.status is not GameStatus.PLAYING:
            return False, "Game is already over"

        if not guess or not isinstance(guess, str):
            return False, "Guess must be a valid string"

        normalized_guess = guess.lower()

        if len(normalized_guess) != session.word_length:
            return False, f"Guess must be exactly {session.word_length} letters"

        if not is_letters(normalized_guess):
            return False, "Guess must contain only letters"

        return True, ""

    def submit_guess(self, raw: str) -> GuessResult:
        """
        Processes a guess and updates the session.

        Rejected guesses leave the session untouched. Accepted guesses are
        appended even if identical to an earlier one.
        """
        is_valid, error = self.is_valid_guess(raw)
        if not is_valid:
            logger.debug("Rejected guess %r: %s", raw, error)
            return GuessResult(accepted=False, error=error)

        session = self.session
        word = raw.lower()

        feedback = tuple(evaluate(word, session.secret_word))
        hint = hint_summary(word, session.secret_word)
        guess = Guess(word=word, feedback=feedback)

        session.guesses.append(guess)
        merge_keyboard_status(session.keyboard_status, feedback)
        session.last_feedback = feedback
        session.last_hint = hint
        session.current_guess = ""

        if is_exact_match(word, session.secret_word):
            self._finish(GameStatus.WON)
        elif len(session.guesses) >= session.max_attempts:
            self._finish(GameStatus.LOST)

        return GuessResult(accepted=True, guess=guess, hint=hint, status=session.status)

    def _finish(self, status: GameStatus) -> None:
        """Move into a terminal state and report the game exactly once."""
        session = self.session
        if session.status is not GameStatus.PLAYING:
            return
        session.status = status

        won = status is GameStatus.WON
        attempts = len(session.guesses)
        self.stats_store.record_result(won, attempts)
        if session.game_mode is GameMode.DAILY:
            self.stats_store.record_daily(won, session.word_length, attempts, self.today())
        logger.info("Session finished: %s after %d guesses", status.value, attempts)

    def submit_current(self) -> GuessResult:
        """Submit the uncommitted guess buffer."""
        if self.session is None:
            return GuessResult(accepted=False, error="No active game")
        return self.submit_guess(self.session.current_guess)

    def add_letter(self, letter: str) -> bool:
        """
        Append a letter to the guess buffer.

        No-op when the game is over, the buffer is full, the input is not a
        single letter, or the letter is already known to be absent.

        Returns:
            True if the buffer changed
        """
        session = self.session
        if session is None or session.status is not GameStatus.PLAYING:
            return False

        if not isinstance(letter, str):
            return False
        letter = letter.lower()
        if len(letter) != 1 or not ('a' <= letter <= 'z'):
            return False

        if len(session.current_guess) >= session.word_length:
            return False

        if session.keyboard_status.get(letter) is LetterStatus.ABSENT:
            return False

        session.current_guess += letter
        return True

    def remove_letter(self) -> bool:
        session = self.session
        if session is None or session.status is not GameStatus.PLAYING:
            return False
        if not session.current_guess:
            return False
        session.current_guess = session.current_guess[:-1]
        return True

    def keyboard_snapshot(self) -> Dict[str, str]:
        if self.session is None:
            return {}
        return {letter: status.value for letter, status in sorted(self.session.keyboard_status.items())}

    def get_game_state(self) -> Optional[GameState]:
        """
        Returns a snapshot of the active session (without revealing the answer).

        Returns:
            GameState object or None if no session is active
        """
        session = self.session
        if session is None:
            return None

        game_over = session.status.is_terminal
        return GameState(
            word_length=session.word_length,
            game_mode=session.game_mode.value,
            max_attempts=session.max_attempts,
            status=session.status.value,
            game_over=game_over,
            won=session.status is GameStatus.WON,
            current_guess=session.current_guess,
            guesses=[guess.to_dict() for guess in session.guesses],
            keyboard_status=self.keyboard_snapshot(),
            hint=session.last_hint.to_dict() if session.last_hint else None,
            last_feedback=[item.to_dict() for item in session.last_feedback] if session.last_feedback else None,
            answer=session.secret_word if game_over else None,
        )


# Global service instance
_session_engine = None


def get_session_engine() -> Optional[SessionEngine]:
    """Get the global session engine instance."""
    return _session_engine


def initialize_session_engine(word_source: WordSource, stats_store: StatsStore) -> SessionEngine:
    """Initialize the global session engine instance."""
    global _session_engine
    _session_engine = SessionEngine(word_source, stats_store)
    return _session_engine
