"""
Configuration Management Module

Centralized configuration management following the 12-factor app methodology.
All configuration is loaded from environment variables with sensible defaults.
"""

import os
from dotenv import load_dotenv

# Load environment variables from a local .env file, if present
load_dotenv(os.getenv('CLIORDLE_ENV_FILE', '.env'))


def user_data_path(*parts):
    """Path under the per-user data directory (``~/.cliordle``)."""
    return os.path.join(os.path.expanduser('~'), '.cliordle', *parts)


class Config:
    """Base configuration class with all settings."""

    DEBUG = os.getenv('DEBUG', 'False').lower() == 'true'

    # Storage Settings
    STORAGE_BACKEND = os.getenv('STORAGE_BACKEND', 'sqlite')
    DB_PATH = os.getenv('DB_PATH', 'cliordle.db')
    MONGO_URI = os.getenv('MONGO_URI')
    MONGO_DB = os.getenv('MONGO_DB', 'cliordle')

    # Game Settings
    WORD_LIST_PATH = os.getenv('WORD_LIST_PATH')
    ALLOWED_GUESSES_PATH = os.getenv('ALLOWED_GUESSES_PATH')
    FEEDBACK_RULE = os.getenv('FEEDBACK_RULE', 'standard')

    # Logging Settings
    LOG_LEVEL = os.getenv('LOG_LEVEL', 'INFO')
    LOG_DIR = os.path.expanduser(os.getenv('LOG_DIR') or user_data_path('logs'))
    LOG_TO_CONSOLE = os.getenv('LOG_TO_CONSOLE', 'False').lower() == 'true'


class DevelopmentConfig(Config):
    """Development configuration."""
    DEBUG = True


class ProductionConfig(Config):
    """Production configuration."""
    DEBUG = False


class TestingConfig(Config):
    """Testing configuration."""
    TESTING = True
    DEBUG = True
    STORAGE_BACKEND = 'memory'


# Configuration mapping
config = {
    'development': DevelopmentConfig,
    'production': ProductionConfig,
    'testing': TestingConfig,
    'default': ProductionConfig
}


def get_config(name=None):
    """
    Resolve a configuration class by name.

    Args:
        name: Key into ``config``; defaults to the CLIORDLE_ENV variable

    Returns:
        The matching configuration class, or the default one for unknown names
    """
    name = name or os.getenv('CLIORDLE_ENV', 'default')
    return config.get(name, config['default'])
