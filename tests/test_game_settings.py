import pytest

from wordle_engine.config import (
    FALLBACK_WORDS, get_word_statistics, is_well_formed, validate_word_list_integrity
)


def test_fallback_list_is_valid():
    assert validate_word_list_integrity()


@pytest.mark.parametrize('words', [
    [],
    ['PYTHON', 'CAT'],
    ['PYTHON', 'python'],
    ['PYTHON', 'PYTHON'],
])
def test_integrity_failures(words):
    with pytest.raises(ValueError):
        validate_word_list_integrity(words)


def test_is_well_formed():
    assert is_well_formed('PYTHON')
    assert not is_well_formed('PYTHO')
    assert not is_well_formed('Python')
    assert is_well_formed('CAT', word_length=3)


def test_statistics():
    stats = get_word_statistics()
    assert stats['total_words'] == len(FALLBACK_WORDS)
    assert stats['letter_frequency']['Z'] == 4
    assert get_word_statistics([]) == {'error': 'Word list is empty'}


def test_fallback_words_from_environment(monkeypatch):
    from wordle_engine.config.app_config import _env_words

    monkeypatch.setenv('FALLBACK_WORDS', ' crane, slate ,,')
    assert _env_words('FALLBACK_WORDS', FALLBACK_WORDS) == ['CRANE', 'SLATE']

    monkeypatch.delenv('FALLBACK_WORDS')
    assert _env_words('FALLBACK_WORDS', FALLBACK_WORDS) == FALLBACK_WORDS


def test_list_checked_against_configured_length():
    with pytest.raises(ValueError):
        validate_word_list_integrity(FALLBACK_WORDS, word_length=5)
    assert validate_word_list_integrity(['CRANE', 'SLATE'], word_length=5)
