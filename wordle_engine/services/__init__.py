"""
Services Package

Contains all business logic and service classes.
"""

from .word_source import DatamuseWordSource, FallbackWordSource, WordSource
from .word_validator import HeuristicWordValidator, RemoteWordValidator, WordValidator
from .game_service import GameService, get_game_service, initialize_game_service

__all__ = [
    'WordSource', 'DatamuseWordSource', 'FallbackWordSource',
    'WordValidator', 'RemoteWordValidator', 'HeuristicWordValidator',
    'GameService', 'get_game_service', 'initialize_game_service'
]
