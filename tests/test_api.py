"""
Testing the HTTP and Socket.IO surface.
"""

import pytest

from wordgame import create_app
from wordgame.config import TestingConfig
from wordgame.services.storage import MemoryStore


@pytest.fixture
def app_and_socketio():
    return create_app(TestingConfig, store=MemoryStore())


@pytest.fixture
def client(app_and_socketio):
    app, _ = app_and_socketio
    return app.test_client()


@pytest.fixture
def socket_client(app_and_socketio):
    app, socketio = app_and_socketio
    return socketio.test_client(app)


def new_game(client, **payload):
    return client.post('/api/new_game', json=payload)


def events(socket_client, name):
    return [event['args'][0] for event in socket_client.get_received() if event['name'] == name]


def test_new_game_returns_snapshot_without_answer(client):
    response = new_game(client, word_length=6, game_mode='unlimited')
    assert response.status_code == 200
    state = response.get_json()['state']
    assert state['word_length'] == 6
    assert state['max_attempts'] == 7
    assert state['status'] == 'playing'
    assert state['answer'] is None


def test_new_game_validates_input(client):
    assert new_game(client, word_length=4).status_code == 400
    assert new_game(client, game_mode='weekly').status_code == 400


def test_state_requires_session(client):
    response = client.get('/api/game/state')
    assert response.status_code == 404
    assert response.get_json()['error'] == 'No active game'


def test_guess_flow_and_stats(client):
    new_game(client, word_length=5, custom_word='speed')

    response = client.post('/api/game/guess', json={'guess': 'eerie'})
    assert response.status_code == 200
    state = response.get_json()['state']
    assert [item['status'] for item in state['last_feedback']] == [
        'present', 'present', 'absent', 'absent', 'absent'
    ]
    assert state['hint'] == {'letters_in_word': 1, 'correct_position': 0}

    rejected = client.post('/api/game/guess', json={'guess': 'spe'})
    assert rejected.status_code == 400
    assert 'exactly 5 letters' in rejected.get_json()['error']

    assert client.post('/api/game/guess', json={}).status_code == 400

    won = client.post('/api/game/guess', json={'guess': 'SPEED'}).get_json()['state']
    assert won['status'] == 'won'
    assert won['answer'] == 'speed'

    stats = client.get('/api/stats').get_json()['stats']
    assert stats['games_played'] == 1
    assert stats['guess_distribution'] == {'2': 1}
    assert stats['win_percentage'] == 100


def test_reset_keeps_length(client):
    new_game(client, word_length=6, custom_word='planet')
    state = client.post('/api/game/reset').get_json()['state']
    assert state['word_length'] == 6
    assert state['guesses'] == []


def test_daily_endpoint(client):
    daily = client.get('/api/daily').get_json()
    assert daily['completed'] is False
    assert daily['record'] is None
    assert daily['challenge']['word_length'] in (5, 6)


def test_settings_toggle(client):
    assert client.get('/api/settings').get_json()['settings']['dark_mode'] is True
    toggled = client.post('/api/settings/dark_mode/toggle').get_json()['settings']
    assert toggled['dark_mode'] is False
    assert client.post('/api/settings/volume/toggle').status_code == 404


def test_health(client):
    health = client.get('/api/health').get_json()
    assert health['status'] == 'healthy'
    assert health['session_active'] is False


def test_socket_keystrokes(client, socket_client):
    socket_client.emit('add_letter', {'letter': 's'})
    assert events(socket_client, 'error') == [{'error': 'No active game'}]

    new_game(client, word_length=5, custom_word='speed')
    for letter in 'speex':
        socket_client.emit('add_letter', {'letter': letter})
    socket_client.emit('remove_letter')
    states = events(socket_client, 'game_state')
    assert states[-1]['state']['current_guess'] == 'spee'

    socket_client.emit('submit_guess')
    assert events(socket_client, 'error')[0]['error'] == 'Guess must be exactly 5 letters'

    socket_client.emit('add_letter', {'letter': 'd'})
    socket_client.emit('submit_guess')
    final = events(socket_client, 'game_state')[-1]['state']
    assert final['status'] == 'won'
    assert final['current_guess'] == ''


def test_new_game_rejects_non_string_custom_word(client):
    response = new_game(client, word_length=5, custom_word=12345)
    assert response.status_code == 400
    assert response.get_json()['error'] == 'Custom word must be a string'
    assert client.post('/api/new_game', json=[5]).status_code == 400


def test_socket_add_letter_payload_shapes(client, socket_client):
    new_game(client, word_length=5, custom_word='speed')
    socket_client.get_received()

    socket_client.emit('add_letter', 's')
    assert events(socket_client, 'game_state')[-1]['state']['current_guess'] == 's'

    socket_client.emit('add_letter', 42)
    assert events(socket_client, 'error') == [{'error': 'Letter is required'}]
