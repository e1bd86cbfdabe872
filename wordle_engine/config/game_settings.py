"""
Game Configuration Constants Module

Board dimensions and the local word list used when the remote dictionary
service cannot supply a target word.
"""

from typing import Dict, List, Final

# Core Game Configuration Constants
WORD_LENGTH: Final[int] = 6
"""
Number of letters in the target word and in every accepted guess.
"""

MAX_ATTEMPTS: Final[int] = 6
"""
Maximum number of accepted guesses per game.
"""

ALPHABET: Final[str] = "ABCDEFGHIJKLMNOPQRSTUVWXYZ"

# Local fallback word list
FALLBACK_WORDS: Final[List[str]] = [
    'PYTHON', 'PUZZLE', 'GALAXY', 'JUNGLE', 'WIZARD', 'FROZEN', 'CASTLE', 'BRIDGE'
]


def is_well_formed(word: str, word_length: int = WORD_LENGTH) -> bool:
    """True when ``word`` is exactly ``word_length`` uppercase letters A-Z."""
    return (
        isinstance(word, str)
        and len(word) == word_length
        and all(char in ALPHABET for char in word)
    )


def validate_word_list_integrity(words: List[str] = FALLBACK_WORDS, word_length: int = WORD_LENGTH) -> bool:
    """
    Validates the integrity and consistency of a word list.

    This function performs validation to ensure:
    1. Length validation: All words must be exactly ``word_length`` characters
    2. Character validation: Only uppercase letters A-Z allowed
    3. Uniqueness validation: No duplicate entries

    Returns:
        bool: True if word list passes all validation checks

    Raises:
        ValueError: If any validation check fails with detailed error message
    """
    if not words:
        raise ValueError("Word list cannot be empty")

    for index, word in enumerate(words):
        if len(word) != word_length:
            raise ValueError(f"Word at index {index} '{word}' is not {word_length} characters long")

        if not is_well_formed(word, word_length):
            raise ValueError(f"Word at index {index} '{word}' is not uppercase A-Z")

    if len(words) != len(set(words)):
        duplicates = sorted({word for word in words if words.count(word) > 1})
        raise ValueError(f"Duplicate words found in word list: {duplicates}")

    return True


def get_word_statistics(words: List[str] = FALLBACK_WORDS) -> Dict:
    """
    Analyzes a word list and returns statistical information.

    Returns:
        dict: total_words, avg_vowel_count, letter_frequency and
        most_common_letters
    """
    if not words:
        return {"error": "Word list is empty"}

    vowels = set('AEIOU')
    total_vowels = sum(len([char for char in word if char in vowels]) for word in words)

    letter_frequency: Dict[str, int] = {}
    for word in words:
        for char in word:
            letter_frequency[char] = letter_frequency.get(char, 0) + 1

    return {
        "total_words": len(words),
        "avg_vowel_count": round(total_vowels / len(words), 2),
        "letter_frequency": letter_frequency,
        "most_common_letters": sorted(letter_frequency.items(), key=lambda x: x[1], reverse=True)[:5]
    }
