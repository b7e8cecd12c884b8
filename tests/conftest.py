"""
Shared fixtures: an in-memory store, a small fixed word source and a
controllable clock so daily behaviour is testable without wall-clock mocking.
"""

import datetime
import random

import pytest

from wordgame.services.session_service import SessionEngine
from wordgame.services.stats_service import StatsStore
from wordgame.services.storage import MemoryStore
from wordgame.services.word_source import WordSource

WORDS = {
    5: ["speed", "crane", "apple", "ghost", "lemon"],
    6: ["planet", "garden", "silver"],
}


class Clock:
    """Mutable 'today' for tests."""

    def __init__(self, day):
        self.day = day

    def __call__(self):
        return self.day

    def advance(self, days=1):
        self.day += datetime.timedelta(days=days)


class RecordingStatsStore(StatsStore):
    """StatsStore that remembers every result/daily call it receives."""

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.result_calls = []
        self.daily_calls = []

    def record_result(self, won, attempts_used):
        self.result_calls.append((won, attempts_used))
        return super().record_result(won, attempts_used)

    def record_daily(self, won, word_length, attempts_used, day=None):
        self.daily_calls.append((won, word_length, attempts_used))
        return super().record_daily(won, word_length, attempts_used, day)


@pytest.fixture
def clock():
    return Clock(datetime.date(2026, 10, 17))


@pytest.fixture
def store():
    return MemoryStore()


@pytest.fixture
def word_source():
    return WordSource(WORDS, rng=random.Random(7))


@pytest.fixture
def stats_store(store, clock):
    return RecordingStatsStore(store, today=clock)


@pytest.fixture
def engine(word_source, stats_store, clock):
    return SessionEngine(word_source, stats_store, today=clock)
