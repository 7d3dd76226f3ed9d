"""
Data Models Package

Contains all data models and schemas used throughout the application.
"""

from .game import GameSnapshot, GameStatus, GuessRow, LetterResult, LetterStatus, Stats

__all__ = ['GameSnapshot', 'GameStatus', 'GuessRow', 'LetterResult', 'LetterStatus', 'Stats']
