"""
Settings Service

Loads and persists presentation preferences.
"""

import logging
from typing import Optional

from ..config.game_settings import SETTINGS_KEY
from ..models.stats import AppSettings
from .stats_service import load_record, save_record
from .storage import KeyValueStore

logger = logging.getLogger(__name__)


class SettingsStore:
    """Best-effort persisted AppSettings with simple toggles."""

    TOGGLES = {
        'dark_mode': 'dark_mode',
        'colorblind_mode': 'colorblind_mode',
        'sound': 'sound_enabled',
    }

    def __init__(self, store: KeyValueStore):
        self.store = store
        self.settings = load_record(store, SETTINGS_KEY, AppSettings.from_dict) or AppSettings()

    def _flip(self, attribute: str) -> AppSettings:
        setattr(self.settings, attribute, not getattr(self.settings, attribute))
        save_record(self.store, SETTINGS_KEY, self.settings)
        logger.info("Setting %s is now %s", attribute, getattr(self.settings, attribute))
        return self.settings

    def toggle(self, name: str) -> AppSettings:
        """Flip a setting by its public name ("dark_mode", "colorblind_mode", "sound")."""
        if name not in self.TOGGLES:
            raise KeyError(name)
        return self._flip(self.TOGGLES[name])

    def toggle_dark_mode(self) -> AppSettings:
        return self._flip('dark_mode')

    def toggle_colorblind_mode(self) -> AppSettings:
        return self._flip('colorblind_mode')

    def toggle_sound(self) -> AppSettings:
        return self._flip('sound_enabled')


# Global service instance
_settings_store = None


def get_settings_store() -> Optional[SettingsStore]:
    """Get the global settings store instance."""
    return _settings_store


def initialize_settings_store(store: KeyValueStore) -> SettingsStore:
    """Initialize the global settings store instance."""
    global _settings_store
    _settings_store = SettingsStore(store)
    return _settings_store
