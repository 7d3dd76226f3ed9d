"""
Configuration Management Module

Centralized configuration management following the 12-factor app methodology.
All configuration is loaded from environment variables with sensible defaults.
"""

import os
from dotenv import load_dotenv

# Load environment variables from config.env
load_dotenv(os.path.join(os.path.dirname(os.path.abspath(__file__)), 'config.env'))


class Config:
    """Base configuration class with all settings."""

    # Flask Settings
    SECRET_KEY = os.getenv('SECRET_KEY', 'dev-secret-key-change-in-production')
    DEBUG = os.getenv('DEBUG', 'False').lower() == 'true'

    # Server Settings
    HOST = os.getenv('HOST', '127.0.0.1')
    PORT = int(os.getenv('PORT', 5000))

    # Game Settings
    MAX_GUESSES = int(os.getenv('MAX_GUESSES', 6))
    PUZZLE_TIMEZONE = os.getenv('PUZZLE_TIMEZONE') or None
    SHARE_TITLE = os.getenv('SHARE_TITLE', 'Simpsonspedia Wordle')

    # Storage Settings
    STORE_BACKEND = os.getenv('STORE_BACKEND', 'memory')
    STORE_FILE = os.getenv('STORE_FILE', 'data/store.json')
    STATS_KEY = os.getenv('STATS_KEY', 'simpsonspedia-wordle-stats')
    COMPLETED_KEY_PREFIX = os.getenv('COMPLETED_KEY_PREFIX', 'simpsonspedia-wordle-completed-')
    MONGO_URI = os.getenv('MONGO_URI')
    MONGO_DB = os.getenv('MONGO_DB', 'wordle_game')
    MONGO_COLLECTION = os.getenv('MONGO_COLLECTION', 'key_value')

    # Logging Settings
    LOG_LEVEL = os.getenv('LOG_LEVEL', 'INFO')
    LOG_DIR = os.getenv('LOG_DIR', 'logs')


class DevelopmentConfig(Config):
    """Development configuration."""
    DEBUG = True


class ProductionConfig(Config):
    """Production configuration."""
    DEBUG = False
    STORE_BACKEND = os.getenv('STORE_BACKEND', 'file')


class TestingConfig(Config):
    """Testing configuration."""
    TESTING = True
    DEBUG = True
    STORE_BACKEND = 'memory'
    PUZZLE_TIMEZONE = None


# Configuration mapping
config = {
    'development': DevelopmentConfig,
    'production': ProductionConfig,
    'testing': TestingConfig,
    'default': DevelopmentConfig
}
