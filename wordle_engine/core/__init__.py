"""
Game Engine Package

Guess scoring, keyboard hints and the per-game state machine.
"""

from .scoring import aggregate_key_status, keyboard_statuses, score_guess
from .game import GameState

__all__ = ['GameState', 'aggregate_key_status', 'keyboard_statuses', 'score_guess']
