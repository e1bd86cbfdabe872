"""
Word Guessing Game Server - Main Entry Point

This is the main entry point for the game server.
It builds the Flask-SocketIO application and starts serving.
"""

import os

from wordle_engine import create_app
from wordle_engine.config import config, validate_word_list_integrity, get_word_statistics
from wordle_engine.utils.game_logger import game_logger


def main():
    """Main function to initialize services and start the server."""
    config_class = config[os.getenv('APP_ENV', 'default')]
    try:
        print("Initializing services...")

        validate_word_list_integrity(config_class.FALLBACK_WORDS, word_length=config_class.WORD_LENGTH)
        stats = get_word_statistics(config_class.FALLBACK_WORDS)
        print(f"✓ Fallback word list validated ({stats['total_words']} words)")

        print("Creating Flask application...")
        app, socketio = create_app(config_class)
        print("✓ Flask application created successfully")
        print(f"✓ Word services: {'remote with local fallback' if config_class.USE_REMOTE_SERVICES else 'local only'}")

        game_logger.logger.info("Game Server Starting")

        print(f"\nStarting Game Server on {config_class.HOST}:{config_class.PORT}")
        print(f"Word length: {config_class.WORD_LENGTH}, attempts: {config_class.MAX_ATTEMPTS}")
        print(f"Debug mode: {config_class.DEBUG}")
        print("=" * 50)

        socketio.run(app, host=config_class.HOST, port=config_class.PORT, debug=config_class.DEBUG)

    except KeyboardInterrupt:
        print("\nServer shutting down...")
        game_logger.logger.info("Game Server shutting down (KeyboardInterrupt)")
    except Exception as e:
        print(f"Error starting server: {e}")
        game_logger.logger.error(f"Error starting server: {e}")
        raise


if __name__ == '__main__':
    main()
