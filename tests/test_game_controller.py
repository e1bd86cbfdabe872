import pytest


@pytest.fixture
def game_id(client):
    response = client.post('/api/new_game')
    assert response.status_code == 200
    return response.get_json()['game_id']


def type_letters(client, game_id, letters):
    return client.post(f'/api/game/{game_id}/letters', json={'letters': letters})


def test_new_game_hides_answer(client):
    data = client.post('/api/new_game').get_json()
    assert data['success']
    assert data['state']['status'] == 'playing'
    assert data['state']['answer'] is None
    assert data['state']['word_length'] == 6
    assert data['state']['max_attempts'] == 6


def test_unknown_game_is_404(client):
    response = client.get('/api/game/nope/state')
    assert response.status_code == 404
    assert not response.get_json()['success']


def test_type_and_delete(client, game_id):
    data = type_letters(client, game_id, 'pyt').get_json()
    assert data['accepted'] == 3
    assert data['state']['current_input'] == 'PYT'

    data = client.delete(f'/api/game/{game_id}/letters').get_json()
    assert data['deleted']
    assert data['state']['current_input'] == 'PY'


def test_letters_required(client, game_id):
    assert client.post(f'/api/game/{game_id}/letters', json={}).status_code == 400


def test_incomplete_guess(client, game_id):
    type_letters(client, game_id, 'PYT')
    response = client.post(f'/api/game/{game_id}/guess')
    assert response.status_code == 400
    assert response.get_json()['outcome'] == 'incomplete'


def test_invalid_word_keeps_input(client, game_id):
    type_letters(client, game_id, 'ZZZZZZ')
    response = client.post(f'/api/game/{game_id}/guess')
    assert response.status_code == 422
    data = response.get_json()
    assert data['outcome'] == 'invalid_word'
    assert data['state']['current_input'] == 'ZZZZZZ'
    assert data['state']['guesses'] == []


def test_guess_feedback_and_queries(client, game_id):
    type_letters(client, game_id, 'PYTHOM')
    data = client.post(f'/api/game/{game_id}/guess').get_json()
    assert data['outcome'] == 'accepted'
    assert data['result'] == ['correct'] * 5 + ['absent']
    assert data['state']['status'] == 'playing'

    row = client.get(f'/api/game/{game_id}/rows/0').get_json()
    assert row['statuses'] == data['result']
    assert client.get(f'/api/game/{game_id}/rows/1').status_code == 404

    keys = client.get(f'/api/game/{game_id}/keys').get_json()['keys']
    assert keys['M'] == 'absent'
    assert keys['Q'] is None

    key = client.get(f'/api/game/{game_id}/keys/p').get_json()
    assert key['letter'] == 'P'
    assert key['status'] == 'correct'
    assert client.get(f'/api/game/{game_id}/keys/1').status_code == 400


def test_win_then_game_over(client, game_id):
    type_letters(client, game_id, 'PYTHON')
    data = client.post(f'/api/game/{game_id}/guess').get_json()
    assert data['state']['status'] == 'won'
    assert data['state']['answer'] == 'PYTHON'

    response = client.post(f'/api/game/{game_id}/guess')
    assert response.status_code == 409
    assert response.get_json()['outcome'] == 'game_over'


def test_reset(client, game_id):
    type_letters(client, game_id, 'PYTHON')
    client.post(f'/api/game/{game_id}/guess')

    data = client.post(f'/api/game/{game_id}/reset').get_json()
    assert data['state']['status'] == 'playing'
    assert data['state']['generation'] == 1
    assert data['state']['guesses'] == []


def test_delete_game(client, game_id):
    assert client.delete(f'/api/game/{game_id}').status_code == 200
    assert client.delete(f'/api/game/{game_id}').status_code == 404


def test_health(client, game_id):
    data = client.get('/api/health').get_json()
    assert data['status'] == 'healthy'
    assert data['active_games'] == 1


def test_state_pushed_over_websocket(app_and_socketio, client, game_id):
    app, socketio = app_and_socketio
    ws = socketio.test_client(app, flask_test_client=client)
    ws.emit('join_game', {'game_id': game_id})

    joined = ws.get_received()
    assert joined[0]['name'] == 'game_state'
    assert joined[0]['args'][0]['state']['current_input'] == ''

    type_letters(client, game_id, 'A')
    pushed = [event for event in ws.get_received() if event['name'] == 'game_state']
    assert pushed[-1]['args'][0]['state']['current_input'] == 'A'


def test_websocket_requires_known_game(app_and_socketio):
    app, socketio = app_and_socketio
    ws = socketio.test_client(app)
    ws.emit('join_game', {'game_id': 'missing'})
    received = ws.get_received()
    assert received[0]['name'] == 'error'


def test_ligature_letters_are_rejected(client, game_id):
    data = type_letters(client, game_id, 'PLAﬆER').get_json()
    assert data['accepted'] == 5
    assert data['state']['current_input'] == 'PLAER'

    response = client.post(f'/api/game/{game_id}/guess')
    assert response.status_code == 400
    assert response.get_json()['outcome'] == 'incomplete'
    assert client.get(f'/api/game/{game_id}/state').status_code == 200


@pytest.mark.parametrize('payload', [{'game_id': ['a', 'b']}, {'game_id': {'x': 1}}, {'game_id': 7}, 'oops'])
def test_websocket_rejects_malformed_game_id(app_and_socketio, payload):
    app, socketio = app_and_socketio
    ws = socketio.test_client(app)
    ws.emit('join_game', payload)
    received = ws.get_received()
    assert received[0]['name'] == 'error'


def test_five_letter_server():
    from wordle_engine import create_app
    from wordle_engine.config import TestingConfig

    class FiveLetterConfig(TestingConfig):
        WORD_LENGTH = 5
        FALLBACK_WORDS = ['CRANE']

    app, _ = create_app(FiveLetterConfig)
    client = app.test_client()
    game_id = client.post('/api/new_game').get_json()['game_id']
    type_letters(client, game_id, 'CRANE')
    data = client.post(f'/api/game/{game_id}/guess').get_json()
    assert data['state']['status'] == 'won'
    assert data['state']['word_length'] == 5
