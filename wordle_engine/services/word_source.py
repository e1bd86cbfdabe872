"""
Word Source Service

Supplies target words. The Datamuse-backed source degrades to a fixed local
word list whenever the remote lookup fails or returns something unusable.
"""

import random
from abc import ABC, abstractmethod
from typing import List, Optional

import requests

from ..config.game_settings import FALLBACK_WORDS, WORD_LENGTH, is_well_formed
from ..utils.game_logger import game_logger

DATAMUSE_API_URL = 'https://api.datamuse.com/words'
DATAMUSE_MAX_RESULTS = 100
DATAMUSE_PICK_WINDOW = 50


class WordSource(ABC):
    """Contract for anything that can pick a target word."""

    word_length: int = WORD_LENGTH

    @abstractmethod
    def fetch_target_word(self) -> str:
        """Return an uppercase word of ``word_length`` letters A-Z."""


class FallbackWordSource(WordSource):
    """Random choice from a fixed local word list."""

    def __init__(self, words: Optional[List[str]] = None, word_length: int = WORD_LENGTH,
                 rng: Optional[random.Random] = None):
        candidates = [word.upper() for word in (words if words is not None else FALLBACK_WORDS)]
        self.words = [word for word in candidates if is_well_formed(word, word_length)]
        if not self.words:
            raise ValueError(
                f"Fallback word list has no {word_length}-letter words; set FALLBACK_WORDS to match WORD_LENGTH"
            )
        self.word_length = word_length
        self.rng = rng or random.Random()

    def fetch_target_word(self) -> str:
        return self.rng.choice(self.words)


class DatamuseWordSource(WordSource):
    """
    Picks a random word of the configured length from the Datamuse API.

    The query asks for spelling pattern ``??????`` (one ``?`` per letter) and
    chooses among the first results. Network errors, HTTP errors, bad JSON,
    empty results and malformed words all fall back to ``fallback``.
    """

    def __init__(self, fallback: Optional[WordSource] = None, word_length: int = WORD_LENGTH,
                 api_url: str = DATAMUSE_API_URL, timeout: float = 5,
                 rng: Optional[random.Random] = None):
        self.word_length = word_length
        self.api_url = api_url
        self.timeout = timeout
        self.rng = rng or random.Random()
        self.fallback = fallback or FallbackWordSource(word_length=word_length, rng=self.rng)

    def fetch_target_word(self) -> str:
        try:
            word = self._fetch_remote_word()
        except (requests.RequestException, ValueError) as e:
            game_logger.logger.warning(f"Word source unavailable, using fallback list: {e}")
            return self.fallback.fetch_target_word()

        if word is None:
            game_logger.logger.warning("Word source returned no usable word, using fallback list")
            return self.fallback.fetch_target_word()
        return word

    def _fetch_remote_word(self) -> Optional[str]:
        response = requests.get(
            self.api_url,
            params={'sp': '?' * self.word_length, 'max': DATAMUSE_MAX_RESULTS},
            timeout=self.timeout
        )
        response.raise_for_status()
        data = response.json()

        if not isinstance(data, list) or not data:
            return None

        entry = data[self.rng.randrange(min(len(data), DATAMUSE_PICK_WINDOW))]
        if not isinstance(entry, dict) or not isinstance(entry.get('word'), str):
            return None

        word = entry['word'].upper()
        return word if is_well_formed(word, self.word_length) else None
