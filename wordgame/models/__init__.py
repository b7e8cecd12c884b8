"""
Data Models Package

Contains all data models and schemas used throughout the application.
"""

from .game import (
    LetterStatus, GameMode, GameStatus, LetterFeedback, Guess, HintSummary,
    GameSession, GameState, GuessResult
)
from .stats import GameStats, DailyRecord, DailyChallenge, AppSettings

__all__ = [
    'LetterStatus', 'GameMode', 'GameStatus', 'LetterFeedback', 'Guess', 'HintSummary',
    'GameSession', 'GameState', 'GuessResult',
    'GameStats', 'DailyRecord', 'DailyChallenge', 'AppSettings'
]
