"""
Word Guessing Game Server Application Package

Six-letter word-guessing game: scoring and the per-game state machine live
in ``core``, word sourcing and validation in ``services``, and the HTTP and
WebSocket surfaces in ``controllers`` and ``websocket``.
"""

from flask import Flask
from flask_cors import CORS
from flask_socketio import SocketIO
from .config import Config


def create_app(config_class=Config, word_source=None, word_validator=None):
    """
    Application factory pattern for creating Flask app instances.

    Args:
        config_class: Configuration class to use
        word_source: Overrides the configured word source
        word_validator: Overrides the configured word validator

    Returns:
        Flask application instance and its SocketIO server
    """
    from .services.game_service import initialize_game_service

    app = Flask(__name__)
    app.config.from_object(config_class)

    game_service = initialize_game_service(config_class, word_source, word_validator)

    # Initialize extensions
    CORS(app)
    socketio = SocketIO(app, cors_allowed_origins="*", logger=False, engineio_logger=False)

    # Register blueprints
    from .controllers.game_controller import game_bp

    app.register_blueprint(game_bp, url_prefix='/api')

    # Register WebSocket handlers
    from .websocket.handlers import register_websocket_handlers
    register_websocket_handlers(socketio, game_service)

    # Store socketio instance for use in other modules
    app.socketio = socketio
    app.game_service = game_service

    return app, socketio
