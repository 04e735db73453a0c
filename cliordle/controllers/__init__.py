"""
Controllers Package

One function per command: ``play``, ``settings`` and ``stats``.
"""

from .game_controller import play_game
from .player_controller import change_settings, show_stats

__all__ = ['play_game', 'change_settings', 'show_stats']
