"""
Game Data Models

Contains all game-related data structures and enums.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, List, Optional, Tuple


class LetterStatus(Enum):
    """Per-position evaluation status of a guessed letter."""
    CORRECT = "correct"
    PRESENT = "present"
    ABSENT = "absent"

    @property
    def rank(self) -> int:
        """Ordering used by the keyboard: absent < present < correct."""
        return _STATUS_RANK[self]


_STATUS_RANK = {
    LetterStatus.ABSENT: 0,
    LetterStatus.PRESENT: 1,
    LetterStatus.CORRECT: 2,
}


class GameMode(Enum):
    """How the secret word of a session is chosen."""
    DAILY = "daily"
    UNLIMITED = "unlimited"


class GameStatus(Enum):
    """Session lifecycle. WON and LOST are terminal."""
    PLAYING = "playing"
    WON = "won"
    LOST = "lost"

    @property
    def is_terminal(self) -> bool:
        return self is not GameStatus.PLAYING


@dataclass(frozen=True)
class LetterFeedback:
    letter: str
    status: LetterStatus

    def to_dict(self) -> Dict[str, str]:
        return {'letter': self.letter, 'status': self.status.value}


@dataclass(frozen=True)
class Guess:
    """A recorded guess and its feedback; immutable once recorded."""
    word: str
    feedback: Tuple[LetterFeedback, ...]

    def to_dict(self) -> Dict:
        return {'word': self.word, 'feedback': [item.to_dict() for item in self.feedback]}


@dataclass(frozen=True)
class HintSummary:
    """Coarse hint shown after each guess."""
    letters_in_word: int
    correct_position: int

    def to_dict(self) -> Dict[str, int]:
        return {'letters_in_word': self.letters_in_word, 'correct_position': self.correct_position}


@dataclass
class GameSession:
    """Server-side state of the single active game."""
    secret_word: str
    word_length: int
    game_mode: GameMode
    max_attempts: int
    guesses: List[Guess] = field(default_factory=list)
    status: GameStatus = GameStatus.PLAYING
    current_guess: str = ""
    keyboard_status: Dict[str, LetterStatus] = field(default_factory=dict)
    last_hint: Optional[HintSummary] = None
    last_feedback: Optional[Tuple[LetterFeedback, ...]] = None


@dataclass
class GameState:
    """Read-only session snapshot handed to the UI layer."""
    word_length: int
    game_mode: str
    max_attempts: int
    status: str
    game_over: bool
    won: bool
    current_guess: str
    guesses: List[Dict]  # Plain dicts for JSON serialization
    keyboard_status: Dict[str, str]
    hint: Optional[Dict[str, int]] = None
    last_feedback: Optional[List[Dict[str, str]]] = None
    answer: Optional[str] = None  # Only included when game is over


@dataclass
class GuessResult:
    """Outcome of a guess submission."""
    accepted: bool
    error: Optional[str] = None
    guess: Optional[Guess] = None
    hint: Optional[HintSummary] = None
    status: Optional[GameStatus] = None
