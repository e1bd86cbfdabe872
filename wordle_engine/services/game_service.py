"""
Game Service

Owns every running game and routes caller commands to the right one.
"""

import threading
from typing import Callable, Dict, List, Optional

from ..config.app_config import Config
from ..config.game_settings import MAX_ATTEMPTS, WORD_LENGTH
from ..core.game import GameState
from ..models.game import GameNotFoundError, GameSnapshot, LetterStatus, SubmitOutcome
from .word_source import DatamuseWordSource, FallbackWordSource, WordSource
from .word_validator import HeuristicWordValidator, RemoteWordValidator, WordValidator

ServiceListener = Callable[[str, GameSnapshot], None]


class GameService:
    """
    Core game service managing multiple game sessions.

    This class handles:
    - Game session management with unique game IDs
    - Routing letter input, submissions and resets to the owning game
    - Per-key and per-row feedback queries
    - Fan-out of state change notifications to registered listeners

    The word source and validator are shared by all games and hold no
    per-game state.
    """

    def __init__(self, word_source: WordSource, word_validator: WordValidator,
                 word_length: int = WORD_LENGTH, max_attempts: int = MAX_ATTEMPTS):
        self.games: Dict[str, GameState] = {}  # Store active games by game_id
        self.word_source = word_source
        self.word_validator = word_validator
        self.word_length = word_length
        self.max_attempts = max_attempts
        self._lock = threading.Lock()
        self._listeners: List[ServiceListener] = []

    def create_new_game(self) -> str:
        """
        Creates a new game session with a target word from the word source.

        Returns:
            str: Unique game ID for this session
        """
        game = GameState.start(
            self.word_source, self.word_validator,
            word_length=self.word_length, max_attempts=self.max_attempts
        )
        game.subscribe(lambda snapshot: self._broadcast(game.game_id, snapshot))

        with self._lock:
            self.games[game.game_id] = game
        return game.game_id

    def get_game(self, game_id: str) -> GameState:
        """
        Raises:
            GameNotFoundError: If no game is registered under ``game_id``
        """
        with self._lock:
            game = self.games.get(game_id)
        if game is None:
            raise GameNotFoundError(game_id)
        return game

    def get_game_state(self, game_id: str) -> GameSnapshot:
        """Read-only copy of a game's current state."""
        return self.get_game(game_id).snapshot()

    def append_letter(self, game_id: str, letter: str) -> bool:
        return self.get_game(game_id).append_letter(letter)

    def append_letters(self, game_id: str, letters: str) -> int:
        """
        Types each character of ``letters`` in order.

        Returns:
            int: How many letters were accepted
        """
        game = self.get_game(game_id)
        return sum(1 for letter in letters if game.append_letter(letter))

    def delete_letter(self, game_id: str) -> bool:
        return self.get_game(game_id).delete_letter()

    def submit_guess(self, game_id: str) -> SubmitOutcome:
        return self.get_game(game_id).submit_guess()

    def reset_game(self, game_id: str) -> GameSnapshot:
        return self.get_game(game_id).reset()

    def get_letter_statuses(self, game_id: str, row_index: int) -> List[LetterStatus]:
        return self.get_game(game_id).letter_statuses(row_index)

    def get_key_status(self, game_id: str, letter: str) -> Optional[LetterStatus]:
        return self.get_game(game_id).key_status(letter)

    def get_keyboard(self, game_id: str) -> Dict[str, Optional[LetterStatus]]:
        return self.get_game(game_id).keyboard()

    def delete_game(self, game_id: str) -> bool:
        """
        Removes a game session from memory.

        Returns:
            bool: True if game was deleted, False if not found
        """
        with self._lock:
            if game_id in self.games:
                del self.games[game_id]
                return True
        return False

    def add_listener(self, listener: ServiceListener) -> None:
        """Register ``listener(game_id, snapshot)`` for every state change."""
        with self._lock:
            if listener not in self._listeners:
                self._listeners.append(listener)

    def remove_listener(self, listener: ServiceListener) -> None:
        with self._lock:
            if listener in self._listeners:
                self._listeners.remove(listener)

    def _broadcast(self, game_id: str, snapshot: GameSnapshot) -> None:
        with self._lock:
            listeners = list(self._listeners)
        for listener in listeners:
            listener(game_id, snapshot)


def build_word_services(config_class=Config):
    """Word source and validator for a configuration class."""
    word_length = config_class.WORD_LENGTH
    fallback_source = FallbackWordSource(config_class.FALLBACK_WORDS, word_length=word_length)
    fallback_validator = HeuristicWordValidator(word_length)

    if not config_class.USE_REMOTE_SERVICES:
        return fallback_source, fallback_validator

    word_source = DatamuseWordSource(
        fallback=fallback_source,
        word_length=word_length,
        api_url=config_class.DATAMUSE_API_URL,
        timeout=config_class.REQUEST_TIMEOUT_SECONDS
    )
    word_validator = RemoteWordValidator(
        fallback=fallback_validator,
        word_length=word_length,
        datamuse_url=config_class.DATAMUSE_API_URL,
        dictionary_url=config_class.DICTIONARY_API_URL,
        timeout=config_class.REQUEST_TIMEOUT_SECONDS
    )
    return word_source, word_validator


# Global service instance
_game_service = None


def get_game_service() -> Optional[GameService]:
    """Get the global game service instance."""
    return _game_service


def initialize_game_service(config_class=Config, word_source: Optional[WordSource] = None,
                            word_validator: Optional[WordValidator] = None) -> GameService:
    """Initialize the global game service instance."""
    global _game_service
    if word_source is None or word_validator is None:
        default_source, default_validator = build_word_services(config_class)
        word_source = word_source or default_source
        word_validator = word_validator or default_validator
    _game_service = GameService(
        word_source,
        word_validator,
        word_length=config_class.WORD_LENGTH,
        max_attempts=config_class.MAX_ATTEMPTS
    )
    return _game_service
