"""
Game Data Models

Contains all game-related data structures and enums.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, Optional, Tuple


class LetterStatus(Enum):
    """Per-letter feedback for a scored guess."""
    CORRECT = "correct"
    PRESENT = "present"
    ABSENT = "absent"


class GameStatus(Enum):
    """Lifecycle of a single game. WON and LOST are terminal."""
    PLAYING = "playing"
    WON = "won"
    LOST = "lost"


class SubmitOutcome(Enum):
    """Result of submitting the current input as a guess."""
    ACCEPTED = "accepted"
    INVALID_WORD = "invalid_word"
    INCOMPLETE = "incomplete"  # fewer letters than the word length
    GAME_OVER = "game_over"    # game already won or lost


class GameNotFoundError(KeyError):
    """Raised when a game id is not registered with the game service."""

    def __init__(self, game_id: str):
        super().__init__(game_id)
        self.game_id = game_id

    def __str__(self) -> str:
        return f"Game not found: {self.game_id}"


@dataclass(frozen=True)
class GameSnapshot:
    """Read-only copy of a game's state."""
    game_id: str
    generation: int
    target_word: str
    guesses: Tuple[str, ...]
    current_input: str
    status: GameStatus
    word_length: int
    max_attempts: int
    last_outcome: Optional[SubmitOutcome] = None
    guess_results: Tuple[Tuple[LetterStatus, ...], ...] = field(default=())

    @property
    def attempts_used(self) -> int:
        return len(self.guesses)

    @property
    def attempts_remaining(self) -> int:
        return self.max_attempts - len(self.guesses)

    @property
    def is_over(self) -> bool:
        return self.status is not GameStatus.PLAYING

    def to_public_dict(self) -> Dict:
        """
        JSON-friendly view of the snapshot.

        The target word is only revealed once the game is over.
        """
        return {
            'game_id': self.game_id,
            'generation': self.generation,
            'status': self.status.value,
            'game_over': self.is_over,
            'won': self.status is GameStatus.WON,
            'word_length': self.word_length,
            'max_attempts': self.max_attempts,
            'attempts_used': self.attempts_used,
            'attempts_remaining': self.attempts_remaining,
            'current_input': self.current_input,
            'guesses': list(self.guesses),
            'guess_results': [
                [status.value for status in row] for row in self.guess_results
            ],
            'last_outcome': self.last_outcome.value if self.last_outcome else None,
            'answer': self.target_word if self.is_over else None
        }
