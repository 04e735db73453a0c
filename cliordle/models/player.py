"""
Player Data Models

Contains the durable player profile: statistics and preferences.
"""

from dataclasses import dataclass, field
from typing import List

DISTRIBUTION_SIZE = 6


def _empty_distribution() -> List[int]:
    return [0] * DISTRIBUTION_SIZE


@dataclass
class Player:
    """
    Player statistics and preference flags.

    ``guess_distribution[i]`` counts games won in exactly ``i + 1`` guesses.
    Losses are not stored; they are derived from played and won counts.
    """
    games_played: int = 0
    games_won: int = 0
    current_streak: int = 0
    longest_streak: int = 0
    guess_distribution: List[int] = field(default_factory=_empty_distribution)
    high_contrast: bool = False
    hard_mode: bool = False

    @property
    def games_lost(self) -> int:
        return self.games_played - self.games_won

    @property
    def win_percentage(self) -> float:
        """Share of played games that were won, as a percentage (0 with no games)."""
        if self.games_played == 0:
            return 0.0
        return self.games_won / self.games_played * 100
