from datetime import date

import pytest

from conftest import SALT, SECRET, TODAY_KEY
from zkwordle import create_app
from zkwordle.config import TestingConfig
from zkwordle.services.client_validator import (
    ZKGameState, validate_guess_with_zk, verify_zk_guess_result, verify_zk_proof
)
from zkwordle.services.game_service import initialize_game_service
from zkwordle.services.session_store import InMemorySessionStore
from zkwordle.services.word_service import initialize_word_service


def start_game(client):
    response = client.post('/api/zk-wordle', json={'action': 'start_game'})
    assert response.status_code == 200
    return response.get_json()


def guess(client, session_id, word):
    return client.post('/api/zk-wordle', json={
        'action': 'validate_guess', 'sessionId': session_id, 'guess': word
    })


def test_start_game_publishes_commitment_without_word(client):
    data = start_game(client)

    assert set(data) == {'sessionId', 'zkProof', 'salt'}
    assert data['salt'] == SALT
    assert data['zkProof']['wordLength'] == 5
    assert verify_zk_proof(data['zkProof'])
    assert SECRET not in str(data)


def test_validate_guess_returns_letter_states(client):
    session = start_game(client)

    response = guess(client, session['sessionId'], 'trace')
    data = response.get_json()

    assert response.status_code == 200
    assert data['guess'] == 'TRACE'
    assert [ls['state'] for ls in data['letterStates']] == ['absent', 'correct', 'correct', 'present', 'correct']
    assert data['isWinner'] is False
    assert 'word' not in data
    assert data['letterStates'][3]['presenceProof']['isPresent'] is True
    assert 'presenceProof' not in data['letterStates'][0]
    assert data['letterStates'][0]['proof']['letter'] == ''
    assert verify_zk_guess_result(data, session)


def test_winning_guess_reveals_word(client):
    session = start_game(client)

    data = guess(client, session['sessionId'], 'CRANE').get_json()

    assert data['isWinner'] is True
    assert data['word'] == SECRET

    response = guess(client, session['sessionId'], 'TRACE')
    assert response.status_code == 400
    assert response.get_json()['error'] == 'Game is already over'


def test_unknown_session_is_recreated(client):
    response = guess(client, 'never-issued', 'TRACE')

    assert response.status_code == 200
    assert response.get_json()['sessionId'] == 'never-issued'


@pytest.mark.parametrize('body, error', [
    ({'action': 'validate_guess', 'sessionId': 'abc'}, 'Session ID and guess required'),
    ({'action': 'validate_guess', 'sessionId': 'abc', 'guess': 'TRACES'}, 'Invalid guess length'),
    ({'action': 'validate_guess', 'sessionId': 'abc', 'guess': 'straß'}, 'Invalid guess length'),
    ({'action': 'validate_guess', 'sessionId': 'abc', 'guess': 'CAFÉS'}, 'Guess must contain only letters A-Z'),
    ({'action': 'nope'}, 'Invalid action'),
    ({}, 'Invalid action'),
])
def test_bad_requests(client, body, error):
    response = client.post('/api/zk-wordle', json=body)

    assert response.status_code == 400
    assert response.get_json()['error'] == error


def test_session_state_endpoint(client):
    session = start_game(client)
    guess(client, session['sessionId'], 'TRACE')

    response = client.get(f"/api/zk-wordle/{session['sessionId']}")
    data = response.get_json()

    assert response.status_code == 200
    assert data['guesses'] == ['TRACE']
    assert data['letterStatus']['C'] == 'present'
    assert data['word'] is None
    assert client.get('/api/zk-wordle/missing').status_code == 404


def test_delete_session_endpoint(client):
    session = start_game(client)

    assert client.delete(f"/api/zk-wordle/{session['sessionId']}").get_json() == {'success': True}
    assert client.delete(f"/api/zk-wordle/{session['sessionId']}").get_json() == {'success': False}


def test_word_of_day_supports_client_side_validation(client):
    response = client.get('/api/word-of-day')
    data = response.get_json()

    assert response.status_code == 200
    assert data['date'] == TODAY_KEY
    assert data['salt'] == f'wordle-{TODAY_KEY}-salt'
    assert len(data['positionHashes']) == 5
    assert 'word' not in data

    state = ZKGameState.from_published(data)
    local = validate_guess_with_zk('TRACE', state)
    server = client.post('/api/wordle', json={'guess': 'TRACE'}).get_json()
    assert local.states == server['result']


def test_plain_guess_check(client):
    response = client.post('/api/wordle', json={'guess': 'ERASE', 'gameId': 'practice-SPEED'})

    assert response.status_code == 200
    assert response.get_json() == {
        'result': ['present', 'absent', 'absent', 'present', 'present'],
        'isCorrect': False
    }
    assert client.post('/api/wordle', json={'guess': 'AB'}).status_code == 400


def test_word_service_ready(client):
    assert client.get('/api/wordle').get_json() == {'ready': True, 'date': TODAY_KEY}


def test_health_check(client):
    start_game(client)

    data = client.get('/api/health').get_json()

    assert data['status'] == 'healthy'
    assert data['active_sessions'] == 1
    assert data['session_backend'] == 'InMemorySessionStore'


@pytest.fixture
def client_without_words():
    word_service = initialize_word_service(word_list=[], today=lambda: date(2026, 10, 19))
    initialize_game_service(word_service, InMemorySessionStore(), TestingConfig)
    return create_app(TestingConfig).test_client()


def test_start_game_fails_without_words(client_without_words):
    response = client_without_words.post('/api/zk-wordle', json={'action': 'start_game'})

    assert response.status_code == 500
    assert response.get_json()['error'] == 'Failed to start game'


def test_unrecoverable_session_is_not_found(client_without_words):
    response = guess(client_without_words, 'never-issued', 'TRACE')

    assert response.status_code == 404
    assert response.get_json()['error'] == 'Invalid session - could not recreate'


def test_word_of_day_fails_without_words(client_without_words):
    response = client_without_words.get('/api/word-of-day')

    assert response.status_code == 500
    assert response.get_json()['error'] == 'Word fetch failed'
