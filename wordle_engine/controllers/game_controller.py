"""
Game Controller

Handles all game-related HTTP endpoints.
"""

from flask import Blueprint, request, jsonify
from ..models.game import SubmitOutcome
from ..services.game_service import get_game_service
from ..utils.decorators import require_game_service
from ..utils.game_logger import game_logger
from ..utils.helpers import status_value

game_bp = Blueprint('game', __name__)

# HTTP status for every rejected submission
SUBMIT_ERROR_CODES = {
    SubmitOutcome.INVALID_WORD: 422,
    SubmitOutcome.INCOMPLETE: 400,
    SubmitOutcome.GAME_OVER: 409,
}

SUBMIT_ERROR_MESSAGES = {
    SubmitOutcome.INVALID_WORD: 'Not a valid word',
    SubmitOutcome.INCOMPLETE: 'Not enough letters',
    SubmitOutcome.GAME_OVER: 'Game is already over',
}


@game_bp.route('/new_game', methods=['POST'])
@require_game_service('new_game')
def new_game(game_service):
    """Create a new game session."""
    game_logger.log_user_action(request, 'new_game')

    game_id = game_service.create_new_game()
    state = game_service.get_game_state(game_id)

    response_data = {
        'success': True,
        'game_id': game_id,
        'state': state.to_public_dict()
    }

    game_logger.log_server_response(
        request, 'new_game', True, response_data, game_id,
        word_length=state.word_length, max_attempts=state.max_attempts
    )
    return jsonify(response_data)


@game_bp.route('/game/<game_id>/state', methods=['GET'])
@require_game_service('get_state')
def get_state(game_id, game_service):
    """Get current game state."""
    game_logger.log_user_action(request, 'get_state', game_id)

    state = game_service.get_game_state(game_id)
    response_data = {
        'success': True,
        'state': state.to_public_dict()
    }

    game_logger.log_server_response(
        request, 'get_state', True, response_data, game_id,
        attempts_used=state.attempts_used, status=state.status.value
    )
    return jsonify(response_data)


@game_bp.route('/game/<game_id>/letters', methods=['POST'])
@require_game_service('append_letters')
def append_letters(game_id, game_service):
    """Type one or more letters into the current row."""
    data = request.get_json(silent=True)
    letters = data.get('letters') if isinstance(data, dict) else None
    if not isinstance(letters, str) or not letters:
        error_response = {
            'success': False,
            'error': 'Letters are required'
        }
        game_logger.log_server_response(request, 'append_letters', False, error_response, game_id)
        return jsonify(error_response), 400

    game_logger.log_user_action(request, 'append_letters', game_id, letters=letters)

    accepted = game_service.append_letters(game_id, letters)
    state = game_service.get_game_state(game_id)
    response_data = {
        'success': True,
        'accepted': accepted,
        'state': state.to_public_dict()
    }

    game_logger.log_server_response(request, 'append_letters', True, response_data, game_id, accepted=accepted)
    return jsonify(response_data)


@game_bp.route('/game/<game_id>/letters', methods=['DELETE'])
@require_game_service('delete_letter')
def delete_letter(game_id, game_service):
    """Remove the last typed letter."""
    game_logger.log_user_action(request, 'delete_letter', game_id)

    deleted = game_service.delete_letter(game_id)
    state = game_service.get_game_state(game_id)
    response_data = {
        'success': True,
        'deleted': deleted,
        'state': state.to_public_dict()
    }

    game_logger.log_server_response(request, 'delete_letter', True, response_data, game_id)
    return jsonify(response_data)


@game_bp.route('/game/<game_id>/guess', methods=['POST'])
@require_game_service('submit_guess')
def submit_guess(game_id, game_service):
    """Submit the current row for validation and evaluation."""
    game_logger.log_user_action(request, 'submit_guess', game_id)

    outcome = game_service.submit_guess(game_id)
    state = game_service.get_game_state(game_id)

    if outcome is not SubmitOutcome.ACCEPTED:
        error_response = {
            'success': False,
            'outcome': outcome.value,
            'error': SUBMIT_ERROR_MESSAGES[outcome],
            'state': state.to_public_dict()
        }
        game_logger.log_server_response(
            request, 'submit_guess', False, error_response, game_id,
            outcome=outcome.value, attempted_guess=state.current_input
        )
        return jsonify(error_response), SUBMIT_ERROR_CODES[outcome]

    response_data = {
        'success': True,
        'outcome': outcome.value,
        'result': [status.value for status in state.guess_results[-1]],
        'state': state.to_public_dict()
    }

    game_logger.log_server_response(
        request, 'submit_guess', True, response_data, game_id,
        guess=state.guesses[-1], round=state.attempts_used, status=state.status.value
    )
    return jsonify(response_data)


@game_bp.route('/game/<game_id>/rows/<int:row_index>', methods=['GET'])
@require_game_service('get_row')
def get_row(game_id, row_index, game_service):
    """Letter statuses of a completed row."""
    game_logger.log_user_action(request, 'get_row', game_id, row=row_index)

    try:
        statuses = game_service.get_letter_statuses(game_id, row_index)
    except IndexError as e:
        error_response = {
            'success': False,
            'error': str(e)
        }
        game_logger.log_server_response(request, 'get_row', False, error_response, game_id)
        return jsonify(error_response), 404

    response_data = {
        'success': True,
        'row': row_index,
        'statuses': [status.value for status in statuses]
    }
    game_logger.log_server_response(request, 'get_row', True, response_data, game_id)
    return jsonify(response_data)


@game_bp.route('/game/<game_id>/keys', methods=['GET'])
@require_game_service('get_keyboard')
def get_keyboard(game_id, game_service):
    """Key status for every letter A-Z."""
    game_logger.log_user_action(request, 'get_keyboard', game_id)

    keyboard = game_service.get_keyboard(game_id)
    response_data = {
        'success': True,
        'keys': {letter: status_value(status) for letter, status in keyboard.items()}
    }
    game_logger.log_server_response(request, 'get_keyboard', True, response_data, game_id)
    return jsonify(response_data)


@game_bp.route('/game/<game_id>/keys/<letter>', methods=['GET'])
@require_game_service('get_key')
def get_key(game_id, letter, game_service):
    """Key status for a single letter."""
    game_logger.log_user_action(request, 'get_key', game_id, letter=letter)

    if len(letter) != 1 or not letter.isalpha() or not letter.isascii():
        error_response = {
            'success': False,
            'error': 'Key must be a single letter A-Z'
        }
        game_logger.log_server_response(request, 'get_key', False, error_response, game_id)
        return jsonify(error_response), 400

    status = game_service.get_key_status(game_id, letter)
    response_data = {
        'success': True,
        'letter': letter.upper(),
        'status': status_value(status)
    }
    game_logger.log_server_response(request, 'get_key', True, response_data, game_id)
    return jsonify(response_data)


@game_bp.route('/game/<game_id>/reset', methods=['POST'])
@require_game_service('reset_game')
def reset_game(game_id, game_service):
    """Start over with a fresh target word."""
    game_logger.log_user_action(request, 'reset_game', game_id)

    state = game_service.reset_game(game_id)
    response_data = {
        'success': True,
        'state': state.to_public_dict()
    }

    game_logger.log_server_response(
        request, 'reset_game', True, response_data, game_id, generation=state.generation
    )
    return jsonify(response_data)


@game_bp.route('/game/<game_id>', methods=['DELETE'])
@require_game_service('delete_game')
def delete_game(game_id, game_service):
    """Delete a game session."""
    game_logger.log_user_action(request, 'delete_game', game_id)

    success = game_service.delete_game(game_id)
    response_data = {
        'success': success
    }

    game_logger.log_server_response(request, 'delete_game', success, response_data, game_id)

    if success:
        game_logger.log_game_event(game_id, 'game_deleted', request.remote_addr)
        return jsonify(response_data)
    return jsonify(response_data), 404


@game_bp.route('/health', methods=['GET'])
def health_check():
    """Health check endpoint."""
    game_service = get_game_service()

    game_logger.log_user_action(request, 'health_check')

    response_data = {
        'status': 'healthy' if game_service else 'degraded',
        'active_games': len(game_service.games) if game_service else 0,
        'log_stats': game_logger.get_log_stats()
    }

    game_logger.log_server_response(request, 'health_check', True, response_data)
    return jsonify(response_data)
