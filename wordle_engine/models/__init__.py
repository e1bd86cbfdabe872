"""
Data Models Package

Contains all data models and schemas used throughout the application.
"""

from .game import GameNotFoundError, GameSnapshot, GameStatus, LetterStatus, SubmitOutcome

__all__ = ['GameNotFoundError', 'GameSnapshot', 'GameStatus', 'LetterStatus', 'SubmitOutcome']
