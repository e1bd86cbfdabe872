"""
Configuration Management Module

Centralized configuration management following the 12-factor app methodology.
All configuration is loaded from environment variables with sensible defaults.
"""

import os
from dotenv import load_dotenv

from .game_settings import FALLBACK_WORDS

# Load environment variables from config.env
load_dotenv(os.path.join(os.path.dirname(os.path.abspath(__file__)), 'config.env'))


def _env_flag(name: str, default: str) -> bool:
    return os.getenv(name, default).lower() == 'true'


def _env_words(name: str, default):
    words = [word.strip().upper() for word in os.getenv(name, '').split(',') if word.strip()]
    return words or list(default)


class Config:
    """Base configuration class with all settings."""

    # Flask Settings
    SECRET_KEY = os.getenv('SECRET_KEY', 'dev-secret-key-change-in-production')
    DEBUG = _env_flag('DEBUG', 'False')

    # Server Settings
    HOST = os.getenv('HOST', '127.0.0.1')
    PORT = int(os.getenv('PORT', 5000))

    # Game Settings
    WORD_LENGTH = int(os.getenv('WORD_LENGTH', 6))
    MAX_ATTEMPTS = int(os.getenv('MAX_ATTEMPTS', 6))

    # Comma-separated; every word must be WORD_LENGTH letters
    FALLBACK_WORDS = _env_words('FALLBACK_WORDS', FALLBACK_WORDS)

    # Word Services
    USE_REMOTE_SERVICES = _env_flag('USE_REMOTE_SERVICES', 'True')
    DATAMUSE_API_URL = os.getenv('DATAMUSE_API_URL', 'https://api.datamuse.com/words')
    DICTIONARY_API_URL = os.getenv('DICTIONARY_API_URL', 'https://api.dictionaryapi.dev/api/v2/entries/en')
    REQUEST_TIMEOUT_SECONDS = float(os.getenv('REQUEST_TIMEOUT_SECONDS', 5))

    # Logging Settings
    LOG_LEVEL = os.getenv('LOG_LEVEL', 'INFO')
    LOG_DIR = os.getenv('LOG_DIR', 'logs')


class DevelopmentConfig(Config):
    """Development configuration."""
    DEBUG = True


class ProductionConfig(Config):
    """Production configuration."""
    DEBUG = False


class TestingConfig(Config):
    """Testing configuration. Word services stay offline."""
    TESTING = True
    DEBUG = True
    USE_REMOTE_SERVICES = False


# Configuration mapping
config = {
    'development': DevelopmentConfig,
    'production': ProductionConfig,
    'testing': TestingConfig,
    'default': DevelopmentConfig
}
