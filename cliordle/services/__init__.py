"""
Services Package

Contains business logic and service classes.
"""

from .game_service import GameSession, classify, evaluate_guess
from .player_repository import PlayerRepository
from .stats_service import apply_outcome, update_settings
from .word_service import WordSource

__all__ = [
    'GameSession', 'classify', 'evaluate_guess',
    'PlayerRepository',
    'apply_outcome', 'update_settings',
    'WordSource'
]
