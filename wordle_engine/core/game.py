"""
Game State Machine

A single game: target word, accepted guesses, the row being typed and the
PLAYING / WON / LOST status. All transitions of one game are serialized on
the game's own lock, including the word service calls made while submitting
or resetting.
"""

import threading
import uuid
from typing import TYPE_CHECKING, Callable, Dict, List, Optional

from ..config.game_settings import ALPHABET, MAX_ATTEMPTS, WORD_LENGTH, is_well_formed
from ..models.game import GameSnapshot, GameStatus, LetterStatus, SubmitOutcome
from ..utils.game_logger import game_logger
from .scoring import aggregate_key_status, keyboard_statuses, score_guess

# The services package imports this module, so only reference its types here
if TYPE_CHECKING:
    from ..services.word_source import WordSource
    from ..services.word_validator import WordValidator

Listener = Callable[[GameSnapshot], None]


class GameState:
    """
    Mutable game owned by one controller.

    Use ``GameState.start`` to draw the target from a word source, or pass
    ``target_word`` directly. Once the status leaves PLAYING the guesses and
    the current input are frozen until ``reset``.
    """

    def __init__(self, word_source: 'WordSource', word_validator: 'WordValidator',
                 target_word: Optional[str] = None, word_length: int = WORD_LENGTH,
                 max_attempts: int = MAX_ATTEMPTS, game_id: Optional[str] = None):
        if word_length <= 0:
            raise ValueError("word_length must be positive")
        if max_attempts <= 0:
            raise ValueError("max_attempts must be positive")

        self.game_id = game_id or str(uuid.uuid4())
        self.word_length = word_length
        self.max_attempts = max_attempts
        self.word_source = word_source
        self.word_validator = word_validator

        self._lock = threading.RLock()
        self._listeners: List[Listener] = []

        if target_word is None:
            target_word = self._draw_target_word()
        self._target_word = self._check_target(target_word)
        self._guesses: List[str] = []
        self._current_input: List[str] = []
        self._status = GameStatus.PLAYING
        self._generation = 0
        self._last_outcome: Optional[SubmitOutcome] = None

    @classmethod
    def start(cls, word_source: 'WordSource', word_validator: 'WordValidator', **kwargs) -> 'GameState':
        """Create a game whose target word comes from ``word_source``."""
        return cls(word_source, word_validator, target_word=None, **kwargs)

    # Queries

    @property
    def status(self) -> GameStatus:
        return self._status

    @property
    def generation(self) -> int:
        return self._generation

    def snapshot(self) -> GameSnapshot:
        with self._lock:
            return GameSnapshot(
                game_id=self.game_id,
                generation=self._generation,
                target_word=self._target_word,
                guesses=tuple(self._guesses),
                current_input=''.join(self._current_input),
                status=self._status,
                word_length=self.word_length,
                max_attempts=self.max_attempts,
                last_outcome=self._last_outcome,
                guess_results=tuple(
                    tuple(score_guess(guess, self._target_word)) for guess in self._guesses
                )
            )

    def letter_statuses(self, row_index: int) -> List[LetterStatus]:
        """
        Scored letters of a completed row.

        Raises:
            IndexError: If ``row_index`` does not name an accepted guess
        """
        with self._lock:
            if not 0 <= row_index < len(self._guesses):
                raise IndexError(f"Row {row_index} has not been completed")
            return score_guess(self._guesses[row_index], self._target_word)

    def key_status(self, letter: str) -> Optional[LetterStatus]:
        with self._lock:
            return aggregate_key_status(letter.upper(), self._guesses, self._target_word)

    def keyboard(self) -> Dict[str, Optional[LetterStatus]]:
        with self._lock:
            return keyboard_statuses(self._guesses, self._target_word)

    # Listeners

    def subscribe(self, listener: Listener) -> None:
        with self._lock:
            if listener not in self._listeners:
                self._listeners.append(listener)

    def unsubscribe(self, listener: Listener) -> None:
        with self._lock:
            if listener in self._listeners:
                self._listeners.remove(listener)

    # Transitions

    def append_letter(self, letter: str) -> bool:
        """Add one letter to the current row. Returns False when rejected."""
        with self._lock:
            if self._status is not GameStatus.PLAYING:
                return False
            if not isinstance(letter, str):
                return False
            # Upper-casing can expand one character (e.g. a ligature) into several
            letter = letter.upper()
            if len(letter) != 1 or letter not in ALPHABET:
                return False
            if len(self._current_input) >= self.word_length:
                return False

            self._current_input.append(letter)
            self._last_outcome = None
            self._notify()
            return True

    def delete_letter(self) -> bool:
        """Remove the last typed letter. Returns False when there was none."""
        with self._lock:
            if self._status is not GameStatus.PLAYING or not self._current_input:
                return False

            self._current_input.pop()
            self._last_outcome = None
            self._notify()
            return True

    def submit_guess(self) -> SubmitOutcome:
        """
        Submit the current row.

        The validator is consulted while the lock is held, so the state is
        untouched until it answers. A rejected word keeps the typed letters.
        """
        with self._lock:
            if self._status is not GameStatus.PLAYING:
                return SubmitOutcome.GAME_OVER
            candidate = ''.join(self._current_input)
            if not is_well_formed(candidate, self.word_length):
                return SubmitOutcome.INCOMPLETE

            if not self.word_validator.is_acceptable(candidate):
                self._last_outcome = SubmitOutcome.INVALID_WORD
                game_logger.log_game_event(
                    self.game_id, 'invalid_word', 'engine', guess=candidate,
                    generation=self._generation
                )
                self._notify()
                return SubmitOutcome.INVALID_WORD

            self._guesses.append(candidate)
            self._current_input = []
            self._last_outcome = SubmitOutcome.ACCEPTED

            if candidate == self._target_word:
                self._status = GameStatus.WON
                game_logger.log_game_event(
                    self.game_id, 'game_won', 'engine', rounds_used=len(self._guesses),
                    target_word=self._target_word, generation=self._generation
                )
            elif len(self._guesses) >= self.max_attempts:
                self._status = GameStatus.LOST
                game_logger.log_game_event(
                    self.game_id, 'game_lost', 'engine', rounds_used=len(self._guesses),
                    target_word=self._target_word, generation=self._generation
                )

            self._notify()
            return SubmitOutcome.ACCEPTED

    def reset(self) -> GameSnapshot:
        """
        Start a new round with a fresh target word. Allowed in any state.

        The previous round is discarded only after the word source answers.
        """
        with self._lock:
            target_word = self._check_target(self._draw_target_word())

            self._target_word = target_word
            self._guesses = []
            self._current_input = []
            self._status = GameStatus.PLAYING
            self._generation += 1
            self._last_outcome = None

            game_logger.log_game_event(
                self.game_id, 'game_reset', 'engine', generation=self._generation
            )
            self._notify()
            return self.snapshot()

    # Internals

    def _draw_target_word(self) -> str:
        return self.word_source.fetch_target_word().upper()

    def _check_target(self, target_word: str) -> str:
        target_word = target_word.upper()
        if not is_well_formed(target_word, self.word_length):
            raise ValueError(
                f"Target word must be {self.word_length} letters A-Z, got '{target_word}'"
            )
        return target_word

    def _notify(self) -> None:
        snapshot = self.snapshot()
        for listener in list(self._listeners):
            try:
                listener(snapshot)
            except Exception as e:
                game_logger.logger.error(f"Game {self.game_id}: state listener failed: {e}")
