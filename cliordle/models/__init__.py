"""
Data Models Package

Contains all data models used throughout the application.
"""

from .game import Cell, GameOutcome, GameState, LetterStatus, SessionStatus
from .player import DISTRIBUTION_SIZE, Player

__all__ = ['Cell', 'GameOutcome', 'GameState', 'LetterStatus', 'SessionStatus', 'DISTRIBUTION_SIZE', 'Player']
