"""
Configuration Package

Contains all configuration-related files and settings.

This package separates three kinds of configuration:
- app_config.py: application configuration (environment-based)
- game_settings.py: game rules, constants and the word list loader
- theme.py: colour themes for the terminal board
"""

from .app_config import Config, DevelopmentConfig, ProductionConfig, TestingConfig, config, get_config
from .game_settings import (
    MAX_ROUNDS, WORD_LENGTH, load_allowed_guesses, load_word_list, validate_word_list_integrity
)
from .theme import Theme, STANDARD_THEME, HIGH_CONTRAST_THEME, get_theme

__all__ = [
    # App configuration
    'Config', 'DevelopmentConfig', 'ProductionConfig', 'TestingConfig', 'config', 'get_config',
    # Game rules
    'MAX_ROUNDS', 'WORD_LENGTH', 'load_allowed_guesses', 'load_word_list', 'validate_word_list_integrity',
    # Display
    'Theme', 'STANDARD_THEME', 'HIGH_CONTRAST_THEME', 'get_theme'
]
