"""
Utilities Package

Contains logging and terminal display helpers.
"""

from .display import render_board, render_keyboard, render_settings, render_stats
from .game_logger import game_logger

__all__ = ['render_board', 'render_keyboard', 'render_settings', 'render_stats', 'game_logger']
