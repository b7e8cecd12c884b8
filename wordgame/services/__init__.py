"""
Services Package

Contains all business logic and service classes.
"""

from .evaluator import evaluate, hint_summary, is_exact_match, is_letters, is_valid_word
from .word_source import WordSource, date_key, daily_hash
from .storage import KeyValueStore, MemoryStore, JsonFileStore, MongoStore, StorageError, create_store
from .stats_service import StatsStore, get_stats_store, initialize_stats_store
from .settings_service import SettingsStore, get_settings_store, initialize_settings_store
from .session_service import SessionEngine, get_session_engine, initialize_session_engine

__all__ = [
    'evaluate', 'hint_summary', 'is_exact_match', 'is_letters', 'is_valid_word',
    'WordSource', 'date_key', 'daily_hash',
    'KeyValueStore', 'MemoryStore', 'JsonFileStore', 'MongoStore', 'StorageError', 'create_store',
    'StatsStore', 'get_stats_store', 'initialize_stats_store',
    'SettingsStore', 'get_settings_store', 'initialize_settings_store',
    'SessionEngine', 'get_session_engine', 'initialize_session_engine'
]
