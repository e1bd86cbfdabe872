"""
Endpoint Decorators

Contains decorators shared by the HTTP and WebSocket handlers.
"""

from functools import wraps
from flask import request, jsonify
from flask_socketio import emit

from ..models.game import GameNotFoundError
from .game_logger import game_logger


def require_game_service(action: str):
    """
    Decorator for game HTTP endpoints.

    Injects the game service as ``game_service``, answers 500 when it has not
    been initialised, 404 for unknown game ids and 500 for anything else.
    """
    def decorator(f):
        @wraps(f)
        def decorated_function(*args, **kwargs):
            from ..services.game_service import get_game_service

            game_id = kwargs.get('game_id')
            game_service = get_game_service()
            if not game_service:
                return jsonify({
                    'success': False,
                    'error': 'Game service unavailable'
                }), 500

            try:
                return f(*args, game_service=game_service, **kwargs)
            except GameNotFoundError as e:
                error_response = {
                    'success': False,
                    'error': str(e)
                }
                game_logger.log_server_response(request, action, False, error_response, game_id)
                return jsonify(error_response), 404
            except Exception as e:
                game_logger.log_error(request, e, action, game_id)
                error_response = {
                    'success': False,
                    'error': str(e)
                }
                game_logger.log_server_response(request, action, False, error_response, game_id)
                return jsonify(error_response), 500

        return decorated_function
    return decorator


def websocket_game_required(f):
    """Decorator for WebSocket events that name a game."""
    @wraps(f)
    def decorated_function(*args, **kwargs):
        from ..services.game_service import get_game_service

        game_service = get_game_service()
        data = args[0] if args else None
        if not game_service or not isinstance(data, dict) or not isinstance(data.get('game_id'), str):
            emit('error', {'error': 'game_id required'})
            return

        try:
            game = game_service.get_game(data['game_id'])
        except GameNotFoundError as e:
            emit('error', {'error': str(e)})
            return

        kwargs['game'] = game
        return f(*args, **kwargs)

    return decorated_function
