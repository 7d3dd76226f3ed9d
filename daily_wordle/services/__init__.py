"""
Services Package

Contains the puzzle core (selection, scoring, keyboard input) and the
session and stats services built on top of it.
"""

from .game_service import GameService, GameSession, get_game_service, initialize_game_service
from .guess_engine import GuessEngine, evaluate_guess
from .keyboard import KeyboardInput
from .puzzle_selector import PuzzleSelector, days_since_epoch, select_daily_word
from .stats_service import StatsService

__all__ = [
    'GameService', 'GameSession', 'get_game_service', 'initialize_game_service',
    'GuessEngine', 'evaluate_guess',
    'KeyboardInput',
    'PuzzleSelector', 'days_since_epoch', 'select_daily_word',
    'StatsService',
]
