"""
Statistics Data Models

Contains lifetime statistics, daily-challenge records and app settings.
All of them round-trip through plain dicts so any key-value store can hold them.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, Optional


@dataclass
class GameStats:
    """Lifetime statistics for the local player."""
    games_played: int = 0
    games_won: int = 0
    current_streak: int = 0
    best_streak: int = 0
    guess_distribution: Dict[int, int] = field(default_factory=dict)

    @property
    def win_percentage(self) -> int:
        if not self.games_played:
            return 0
        return round(self.games_won * 100 / self.games_played)

    def to_dict(self) -> Dict[str, Any]:
        return {
            'games_played': self.games_played,
            'games_won': self.games_won,
            'current_streak': self.current_streak,
            'best_streak': self.best_streak,
            # JSON object keys must be strings
            'guess_distribution': {str(k): v for k, v in self.guess_distribution.items()},
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'GameStats':
        """Build stats from a stored dict. Raises on malformed data."""
        distribution = {int(k): int(v) for k, v in data.get('guess_distribution', {}).items()}
        return cls(
            games_played=int(data['games_played']),
            games_won=int(data['games_won']),
            current_streak=int(data['current_streak']),
            best_streak=int(data['best_streak']),
            guess_distribution=distribution,
        )


@dataclass
class DailyRecord:
    """Completion record for one calendar day's daily challenge."""
    date: str
    completed: bool
    won: bool
    word_length: int
    guesses: int

    def to_dict(self) -> Dict[str, Any]:
        return {
            'date': self.date,
            'completed': self.completed,
            'won': self.won,
            'word_length': self.word_length,
            'guesses': self.guesses,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'DailyRecord':
        return cls(
            date=str(data['date']),
            completed=bool(data['completed']),
            won=bool(data['won']),
            word_length=int(data['word_length']),
            guesses=int(data['guesses']),
        )


@dataclass
class DailyChallenge:
    """Descriptor of the daily puzzle for a date."""
    date: str
    word_index: int
    word_length: int


@dataclass
class AppSettings:
    """Presentation preferences persisted alongside the stats."""
    dark_mode: bool = True
    colorblind_mode: bool = False
    sound_enabled: bool = True
    last_played_date: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        return {
            'dark_mode': self.dark_mode,
            'colorblind_mode': self.colorblind_mode,
            'sound_enabled': self.sound_enabled,
            'last_played_date': self.last_played_date,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'AppSettings':
        return cls(
            dark_mode=bool(data.get('dark_mode', True)),
            colorblind_mode=bool(data.get('colorblind_mode', False)),
            sound_enabled=bool(data.get('sound_enabled', True)),
            last_played_date=data.get('last_played_date'),
        )
