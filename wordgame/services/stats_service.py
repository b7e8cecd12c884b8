"""
Stats Service

Accumulates lifetime statistics and daily-challenge completion records on
top of an opaque key-value store.

Load and save are best-effort: a missing, unreadable or malformed value
falls back to its default and never reaches the caller. The
load-modify-save cycle is not atomic; one caller at a time.
"""

import datetime
import json
import logging
from typing import Callable, Optional

from ..config.game_settings import DAILY_KEY, STATS_KEY
from ..models.stats import DailyRecord, GameStats
from .storage import KeyValueStore, StorageError
from .word_source import date_key

logger = logging.getLogger(__name__)

# Anything a corrupt stored value can raise while being decoded
DECODE_ERRORS = (ValueError, TypeError, KeyError, AttributeError)


def load_record(store: KeyValueStore, key: str, from_dict):
    """Read and decode a stored record; None when absent or unusable."""
    try:
        raw = store.get(key)
    except StorageError as e:
        logger.warning("Failed to load %s: %s", key, e)
        return None

    if raw is None:
        return None

    try:
        return from_dict(json.loads(raw))
    except DECODE_ERRORS as e:
        logger.warning("Discarding corrupt value for %s: %s", key, e)
        return None


def save_record(store: KeyValueStore, key: str, record) -> bool:
    """Encode and write a record. Returns False if the write failed."""
    try:
        store.set(key, json.dumps(record.to_dict()))
        return True
    except StorageError as e:
        logger.warning("Failed to save %s: %s", key, e)
        return False


class StatsStore:
    """
    Lifetime statistics and daily completion tracking.

    Args:
        store: Persistent key-value store
        today: Callable returning the current date; defaults to date.today
    """

    def __init__(self, store: KeyValueStore,
                 today: Optional[Callable[[], datetime.date]] = None):
        self.store = store
        self.today = today or datetime.date.today
        self._stats = load_record(store, STATS_KEY, GameStats.from_dict) or GameStats()

    @property
    def stats(self) -> GameStats:
        return self._stats

    def record_result(self, won: bool, attempts_used: int) -> GameStats:
        """
        Fold one finished game into the lifetime statistics and persist them.

        Only wins are added to the guess distribution.
        """
        stats = self._stats
        stats.games_played += 1
        if won:
            stats.games_won += 1
            stats.current_streak += 1
            stats.best_streak = max(stats.best_streak, stats.current_streak)
            stats.guess_distribution[attempts_used] = stats.guess_distribution.get(attempts_used, 0) + 1
        else:
            stats.current_streak = 0

        save_record(self.store, STATS_KEY, stats)
        return stats

    def record_daily(self, won: bool, word_length: int, attempts_used: int,
                     day: Optional[datetime.date] = None) -> DailyRecord:
        """Overwrite the daily record with a completion for the given day."""
        record = DailyRecord(
            date=date_key(day or self.today()),
            completed=True,
            won=won,
            word_length=word_length,
            guesses=attempts_used,
        )
        save_record(self.store, DAILY_KEY, record)
        return record

    def daily_record(self) -> Optional[DailyRecord]:
        return load_record(self.store, DAILY_KEY, DailyRecord.from_dict)

    def is_daily_completed(self, day: Optional[datetime.date] = None) -> bool:
        record = self.daily_record()
        if record is None:
            return False
        return record.date == date_key(day or self.today()) and record.completed


# Global service instance
_stats_store = None


def get_stats_store() -> Optional[StatsStore]:
    """Get the global stats store instance."""
    return _stats_store


def initialize_stats_store(store: KeyValueStore) -> StatsStore:
    """Initialize the global stats store instance."""
    global _stats_store
    _stats_store = StatsStore(store)
    return _stats_store
