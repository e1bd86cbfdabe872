"""
Word Validator Service

Decides whether a submitted guess is an acceptable word. Remote dictionary
checks come first; when they cannot be reached the heuristic validator makes
the call so a submission always resolves to accept or reject.
"""

import re
from abc import ABC, abstractmethod
from typing import Optional

import requests

from ..config.game_settings import WORD_LENGTH, is_well_formed
from ..utils.game_logger import game_logger

DATAMUSE_API_URL = 'https://api.datamuse.com/words'
DICTIONARY_API_URL = 'https://api.dictionaryapi.dev/api/v2/entries/en'

# Three or more identical consecutive letters
_REPEATED_RUN = re.compile(r'(.)\1{2,}')


class WordValidator(ABC):
    """Contract for guess acceptance checks."""

    @abstractmethod
    def is_acceptable(self, candidate: str) -> bool:
        """Return True to accept ``candidate`` as a guess. Never raises."""


class HeuristicWordValidator(WordValidator):
    """
    Offline acceptance policy.

    Rejects runs of three identical letters and words made of one repeated
    letter; accepts anything else that has the right length and only A-Z.
    """

    def __init__(self, word_length: int = WORD_LENGTH):
        self.word_length = word_length

    def is_acceptable(self, candidate: str) -> bool:
        if not isinstance(candidate, str) or not candidate:
            return False
        if _REPEATED_RUN.search(candidate) or len(set(candidate)) == 1:
            return False
        return is_well_formed(candidate, self.word_length)


class RemoteWordValidator(WordValidator):
    """
    Dictionary lookups against Datamuse, then dictionaryapi.dev.

    A Datamuse exact-spelling hit accepts immediately. Otherwise the
    dictionary API decides: a definitions list accepts, a ``title`` payload
    ("No Definitions Found") rejects. Transport or decoding failures hand the
    decision to ``fallback``.
    """

    def __init__(self, fallback: Optional[WordValidator] = None, word_length: int = WORD_LENGTH,
                 datamuse_url: str = DATAMUSE_API_URL, dictionary_url: str = DICTIONARY_API_URL,
                 timeout: float = 5):
        self.word_length = word_length
        self.datamuse_url = datamuse_url
        self.dictionary_url = dictionary_url.rstrip('/')
        self.timeout = timeout
        self.fallback = fallback or HeuristicWordValidator(word_length)

    def is_acceptable(self, candidate: str) -> bool:
        try:
            if self._datamuse_exact_match(candidate):
                return True
            return self._dictionary_has_entry(candidate)
        except (requests.RequestException, ValueError) as e:
            game_logger.logger.warning(f"Word validator unavailable for '{candidate}', using heuristic: {e}")
            return self.fallback.is_acceptable(candidate)

    def _datamuse_exact_match(self, candidate: str) -> bool:
        response = requests.get(
            self.datamuse_url,
            params={'sp': candidate.lower(), 'max': 1},
            timeout=self.timeout
        )
        response.raise_for_status()
        data = response.json()

        if not isinstance(data, list) or not data or not isinstance(data[0], dict):
            return False
        word = data[0].get('word')
        return isinstance(word, str) and word.upper() == candidate.upper()

    def _dictionary_has_entry(self, candidate: str) -> bool:
        # 404 carries a JSON body with a title, so no raise_for_status here
        response = requests.get(
            f"{self.dictionary_url}/{candidate.lower()}",
            timeout=self.timeout
        )
        data = response.json()

        if not data:
            return False
        if isinstance(data, dict) and 'title' in data:
            return False
        return True
