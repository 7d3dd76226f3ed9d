"""
Game Controller

Handles all game-related HTTP endpoints.
"""

from dataclasses import asdict

from flask import Blueprint, jsonify, request

from ..exceptions import GameAlreadyOver, GameNotFound, GuessError
from ..services.game_service import get_game_service
from ..utils.game_logger import game_logger

game_bp = Blueprint('game', __name__)


def _status_code(error: Exception) -> int:
    if isinstance(error, GameNotFound):
        return 404
    if isinstance(error, GameAlreadyOver):
        return 409
    if isinstance(error, GuessError):
        return 400
    return 500


def _error_response(action: str, error: Exception, game_id=None):
    """Logs a failed action and builds its JSON error response."""
    status = _status_code(error)
    if status == 500:
        game_logger.log_error(request, error, action, game_id)

    error_response = {
        'success': False,
        'error': str(error),
        'error_type': type(error).__name__
    }
    game_logger.log_server_response(request, action, False, error_response, game_id)
    return jsonify(error_response), status


def _service_unavailable():
    return jsonify({
        'success': False,
        'error': 'Game service unavailable'
    }), 500


def _log_game_end(game_id, state, final_guess):
    if not state.game_over:
        return
    game_logger.log_game_event(
        game_id, 'game_won' if state.won else 'game_lost', request.remote_addr,
        rounds_used=state.current_round, target_word=state.answer,
        final_guess=final_guess, puzzle_number=state.puzzle_number
    )


@game_bp.route('/new_game', methods=['POST'])
def new_game():
    """Create a new session for today's puzzle."""
    game_service = get_game_service()
    if not game_service:
        return _service_unavailable()

    try:
        game_logger.log_user_action(request, 'new_game')

        game_id = game_service.create_new_game()
        state = game_service.get_game_state(game_id)

        response_data = {
            'success': True,
            'game_id': game_id,
            'state': asdict(state)
        }

        game_logger.log_server_response(
            request, 'new_game', True, response_data, game_id,
            puzzle_number=state.puzzle_number, max_guesses=state.max_guesses
        )
        return jsonify(response_data)

    except Exception as e:
        return _error_response('new_game', e)


@game_bp.route('/game/<game_id>/state', methods=['GET'])
def get_state(game_id):
    """Get current game state."""
    game_service = get_game_service()
    if not game_service:
        return _service_unavailable()

    try:
        game_logger.log_user_action(request, 'get_state', game_id)

        state = game_service.get_game_state(game_id)
        response_data = {
            'success': True,
            'state': asdict(state)
        }

        game_logger.log_server_response(
            request, 'get_state', True, response_data, game_id,
            current_round=state.current_round, game_over=state.game_over
        )
        return jsonify(response_data)

    except Exception as e:
        return _error_response('get_state', e, game_id)


@game_bp.route('/game/<game_id>/guess', methods=['POST'])
def make_guess(game_id):
    """Submit a whole word for evaluation."""
    game_service = get_game_service()
    if not game_service:
        return _service_unavailable()

    data = request.get_json(silent=True)
    if not data or 'guess' not in data:
        error_response = {
            'success': False,
            'error': 'Guess is required'
        }
        game_logger.log_server_response(request, 'submit_guess', False, error_response, game_id)
        return jsonify(error_response), 400

    guess = data['guess']

    try:
        game_logger.log_user_action(request, 'submit_guess', game_id, guess=guess)

        state = game_service.make_guess(game_id, guess)
        response_data = {
            'success': True,
            'state': asdict(state)
        }

        game_logger.log_server_response(
            request, 'submit_guess', True, response_data, game_id,
            round=state.current_round, game_over=state.game_over
        )
        _log_game_end(game_id, state, guess)
        return jsonify(response_data)

    except Exception as e:
        return _error_response('submit_guess', e, game_id)


@game_bp.route('/game/<game_id>/key', methods=['POST'])
def press_key(game_id):
    """Apply one on-screen keyboard token (A-Z, ENTER, BACKSPACE)."""
    game_service = get_game_service()
    if not game_service:
        return _service_unavailable()

    data = request.get_json(silent=True)
    if not data or not isinstance(data.get('key'), str):
        error_response = {
            'success': False,
            'error': 'Key is required'
        }
        game_logger.log_server_response(request, 'press_key', False, error_response, game_id)
        return jsonify(error_response), 400

    key = data['key']

    try:
        game_logger.log_user_action(request, 'press_key', game_id, key=key)

        state = game_service.press_key(game_id, key)
        response_data = {
            'success': True,
            'state': asdict(state)
        }

        game_logger.log_server_response(
            request, 'press_key', True, response_data, game_id,
            pending_length=len(state.pending), game_over=state.game_over
        )
        if key.upper() == 'ENTER':
            _log_game_end(game_id, state, state.guesses[-1] if state.guesses else None)
        return jsonify(response_data)

    except Exception as e:
        return _error_response('press_key', e, game_id)


@game_bp.route('/game/<game_id>/reset', methods=['POST'])
def reset_game(game_id):
    """Practice replay of the same puzzle."""
    game_service = get_game_service()
    if not game_service:
        return _service_unavailable()

    try:
        game_logger.log_user_action(request, 'reset_game', game_id)

        state = game_service.reset_game(game_id)
        response_data = {
            'success': True,
            'state': asdict(state)
        }

        game_logger.log_server_response(request, 'reset_game', True, response_data, game_id)
        game_logger.log_game_event(game_id, 'game_reset', request.remote_addr)
        return jsonify(response_data)

    except Exception as e:
        return _error_response('reset_game', e, game_id)


@game_bp.route('/game/<game_id>/share', methods=['GET'])
def share(game_id):
    """Emoji summary of the guesses so far, safe to post publicly."""
    game_service = get_game_service()
    if not game_service:
        return _service_unavailable()

    try:
        game_logger.log_user_action(request, 'share', game_id)

        response_data = {
            'success': True,
            'text': game_service.get_share_text(game_id)
        }

        game_logger.log_server_response(request, 'share', True, response_data, game_id)
        return jsonify(response_data)

    except Exception as e:
        return _error_response('share', e, game_id)


@game_bp.route('/game/<game_id>', methods=['DELETE'])
def delete_game(game_id):
    """Delete a game session."""
    game_service = get_game_service()
    if not game_service:
        return _service_unavailable()

    game_logger.log_user_action(request, 'delete_game', game_id)

    success = game_service.delete_game(game_id)
    response_data = {
        'success': success
    }

    if not success:
        error_response = {
            'success': False,
            'error': 'Game not found'
        }
        game_logger.log_server_response(request, 'delete_game', False, error_response, game_id)
        return jsonify(error_response), 404

    game_logger.log_server_response(request, 'delete_game', True, response_data, game_id)
    game_logger.log_game_event(game_id, 'game_deleted', request.remote_addr)
    return jsonify(response_data)


@game_bp.route('/stats', methods=['GET'])
def get_stats():
    """Cumulative stats of official (first-of-the-day) games."""
    game_service = get_game_service()
    if not game_service:
        return _service_unavailable()

    try:
        game_logger.log_user_action(request, 'get_stats')

        stats = game_service.get_stats()
        response_data = {
            'success': True,
            'stats': {**stats.to_dict(), 'winPercentage': stats.win_percentage}
        }

        game_logger.log_server_response(request, 'get_stats', True, response_data)
        return jsonify(response_data)

    except Exception as e:
        return _error_response('get_stats', e)


@game_bp.route('/health', methods=['GET'])
def health_check():
    """Health check endpoint."""
    game_service = get_game_service()

    game_logger.log_user_action(request, 'health_check')

    response_data = {
        'status': 'healthy',
        'active_games': game_service.active_games() if game_service else 0,
        'log_stats': game_logger.get_log_stats()
    }

    game_logger.log_server_response(request, 'health_check', True, response_data)
    return jsonify(response_data)
