import random
from unittest import mock

import pytest
import requests

from wordle_engine.services.word_source import DatamuseWordSource, FallbackWordSource

GET = 'wordle_engine.services.word_source.requests.get'


def datamuse_response(payload):
    response = mock.Mock()
    response.json.return_value = payload
    response.raise_for_status.return_value = None
    return response


@pytest.fixture
def source():
    return DatamuseWordSource(
        fallback=FallbackWordSource(['BRIDGE']),
        rng=random.Random(7)
    )


def test_fallback_source_filters_by_length():
    source = FallbackWordSource(['cat', 'castle', 'PYTH0N'])
    assert source.words == ['CASTLE']
    assert source.fetch_target_word() == 'CASTLE'


def test_fallback_source_without_usable_words():
    with pytest.raises(ValueError):
        FallbackWordSource(['CAT', 'DOG'])


def test_default_fallback_list_is_six_letters():
    source = FallbackWordSource()
    assert all(len(word) == 6 for word in source.words)
    assert 'PYTHON' in source.words


def test_remote_word_is_uppercased(source):
    with mock.patch(GET, return_value=datamuse_response([{'word': 'garden', 'score': 1}] * 3)) as get:
        assert source.fetch_target_word() == 'GARDEN'

    _, kwargs = get.call_args
    assert kwargs['params'] == {'sp': '??????', 'max': 100}
    assert kwargs['timeout'] == 5


def test_pattern_follows_word_length():
    source = DatamuseWordSource(fallback=FallbackWordSource(['WORD'], word_length=4), word_length=4)
    with mock.patch(GET, return_value=datamuse_response([{'word': 'barn'}])) as get:
        assert source.fetch_target_word() == 'BARN'
    assert get.call_args[1]['params']['sp'] == '????'


def test_picks_within_first_fifty(source):
    payload = [{'word': 'garden'}] * 50 + [{'word': 'orange'}] * 50
    with mock.patch(GET, return_value=datamuse_response(payload)):
        for _ in range(20):
            assert source.fetch_target_word() == 'GARDEN'


@pytest.mark.parametrize('payload', [
    [],
    {'error': 'nope'},
    [{'word': 'ice cream'}],
    [{'word': 'cat'}],
    [{'word': 'café00'}],
    [{'score': 10}],
    ['garden'],
])
def test_unusable_results_fall_back(source, payload):
    with mock.patch(GET, return_value=datamuse_response(payload)):
        assert source.fetch_target_word() == 'BRIDGE'


def test_network_error_falls_back(source):
    with mock.patch(GET, side_effect=requests.ConnectionError('offline')):
        assert source.fetch_target_word() == 'BRIDGE'


def test_http_error_falls_back(source):
    response = datamuse_response([{'word': 'garden'}])
    response.raise_for_status.side_effect = requests.HTTPError('503')
    with mock.patch(GET, return_value=response):
        assert source.fetch_target_word() == 'BRIDGE'


def test_bad_json_falls_back(source):
    response = datamuse_response(None)
    response.json.side_effect = ValueError('not json')
    with mock.patch(GET, return_value=response):
        assert source.fetch_target_word() == 'BRIDGE'
