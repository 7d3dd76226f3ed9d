"""
HTTP API through the Flask test client. Today's answer is always HOMER.
"""


def new_game(client):
    response = client.post('/api/new_game')
    assert response.status_code == 200
    return response.get_json()['game_id']


def test_new_game(client):
    response = client.post('/api/new_game')
    data = response.get_json()

    assert data['success'] is True
    assert data['state']['status'] == 'playing'
    assert data['state']['answer'] is None
    assert data['state']['max_guesses'] == 6
    assert len(data['state']['letter_status']) == 26


def test_guess_and_win(client):
    game_id = new_game(client)

    data = client.post(f'/api/game/{game_id}/guess', json={'guess': 'marge'}).get_json()
    assert data['state']['guesses'] == ['MARGE']
    assert data['state']['guess_results'][0][0] == ['M', 'present']

    data = client.post(f'/api/game/{game_id}/guess', json={'guess': 'HOMER'}).get_json()
    assert data['state']['status'] == 'won'
    assert data['state']['answer'] == 'HOMER'


def test_guess_after_game_over_is_conflict(client):
    game_id = new_game(client)
    client.post(f'/api/game/{game_id}/guess', json={'guess': 'HOMER'})

    response = client.post(f'/api/game/{game_id}/guess', json={'guess': 'MARGE'})
    assert response.status_code == 409
    assert response.get_json()['error_type'] == 'GameAlreadyOver'


def test_invalid_guesses(client):
    game_id = new_game(client)

    response = client.post(f'/api/game/{game_id}/guess', json={'guess': 'HOM'})
    assert response.status_code == 400
    assert response.get_json()['error_type'] == 'InvalidGuessLength'

    response = client.post(f'/api/game/{game_id}/guess', json={'guess': 'H0MER'})
    assert response.status_code == 400
    assert response.get_json()['error_type'] == 'InvalidCharacter'

    response = client.post(f'/api/game/{game_id}/guess', json={})
    assert response.status_code == 400

    state = client.get(f'/api/game/{game_id}/state').get_json()['state']
    assert state['current_round'] == 0


def test_unknown_game_is_not_found(client):
    response = client.get('/api/game/does-not-exist/state')
    assert response.status_code == 404
    assert response.get_json()['error_type'] == 'GameNotFound'


def test_keyboard_endpoint(client):
    game_id = new_game(client)
    for key in 'HOMER':
        data = client.post(f'/api/game/{game_id}/key', json={'key': key}).get_json()
    assert data['state']['pending'] == 'HOMER'

    data = client.post(f'/api/game/{game_id}/key', json={'key': 'ENTER'}).get_json()
    assert data['state']['won'] is True

    response = client.post(f'/api/game/{game_id}/key', json={'key': 'A'})
    assert response.status_code == 409

    response = client.post(f'/api/game/{game_id}/key', json={})
    assert response.status_code == 400


def test_share_reset_and_stats(client):
    game_id = new_game(client)
    client.post(f'/api/game/{game_id}/guess', json={'guess': 'MARGE'})
    client.post(f'/api/game/{game_id}/guess', json={'guess': 'HOMER'})

    text = client.get(f'/api/game/{game_id}/share').get_json()['text']
    assert text.startswith('Simpsonspedia Wordle\n2/6\n\n')
    assert 'HOMER' not in text

    stats = client.get('/api/stats').get_json()['stats']
    assert stats == {'played': 1, 'won': 1, 'streak': 1, 'maxStreak': 1, 'winPercentage': 100}

    data = client.post(f'/api/game/{game_id}/reset').get_json()
    assert data['state']['status'] == 'playing'
    assert data['state']['guesses'] == []

    client.post(f'/api/game/{game_id}/guess', json={'guess': 'HOMER'})
    assert client.get('/api/stats').get_json()['stats']['played'] == 1


def test_delete_game(client):
    game_id = new_game(client)
    assert client.delete(f'/api/game/{game_id}').status_code == 200
    assert client.delete(f'/api/game/{game_id}').status_code == 404


def test_health(client):
    new_game(client)
    data = client.get('/api/health').get_json()
    assert data['status'] == 'healthy'
    assert data['active_games'] >= 1
