import pytest

from wordle_engine.config import TestingConfig
from wordle_engine.core.game import GameState
from wordle_engine.services.word_source import WordSource
from wordle_engine.services.word_validator import HeuristicWordValidator, WordValidator


class QueueWordSource(WordSource):
    """Hands out target words in order, repeating the last one."""

    def __init__(self, *words):
        self.words = list(words)
        self.calls = 0

    def fetch_target_word(self):
        word = self.words[min(self.calls, len(self.words) - 1)]
        self.calls += 1
        return word


class RecordingValidator(WordValidator):
    """Heuristic validator that remembers every candidate it judged."""

    def __init__(self, rejected=()):
        self.rejected = set(rejected)
        self.seen = []
        self.heuristic = HeuristicWordValidator()

    def is_acceptable(self, candidate):
        self.seen.append(candidate)
        if candidate in self.rejected:
            return False
        return self.heuristic.is_acceptable(candidate)


def type_word(game, word):
    for letter in word:
        game.append_letter(letter)


def play(game, word):
    type_word(game, word)
    return game.submit_guess()


@pytest.fixture
def word_source():
    return QueueWordSource('PYTHON', 'CASTLE', 'BRIDGE')


@pytest.fixture
def validator():
    return RecordingValidator()


@pytest.fixture
def game(word_source, validator):
    return GameState.start(word_source, validator)


@pytest.fixture
def app_and_socketio(word_source, validator):
    from wordle_engine import create_app
    app, socketio = create_app(TestingConfig, word_source=word_source, word_validator=validator)
    return app, socketio


@pytest.fixture
def client(app_and_socketio):
    app, _ = app_and_socketio
    return app.test_client()
