"""
Statistics Service

Update rules for player statistics and preferences. Every function returns
a new Player and leaves its input untouched.
"""

from dataclasses import replace

from ..models.game import GameOutcome
from ..models.player import DISTRIBUTION_SIZE, Player


def apply_outcome(player: Player, outcome: GameOutcome) -> Player:
    """
    Fold a finished game into the player's statistics.

    Args:
        player: Statistics before the game
        outcome: Result returned by ``GameSession.finish``

    Returns:
        Player with updated counters, streaks and distribution

    Raises:
        ValueError: If a solved outcome reports attempts outside 1..6
    """
    if not outcome.solved:
        return replace(
            player,
            games_played=player.games_played + 1,
            current_streak=0,
            guess_distribution=list(player.guess_distribution),
        )

    if not 1 <= outcome.attempts <= DISTRIBUTION_SIZE:
        raise ValueError(
            f"Solved game must take 1-{DISTRIBUTION_SIZE} attempts, got {outcome.attempts}"
        )

    distribution = list(player.guess_distribution)
    distribution[outcome.attempts - 1] += 1
    current_streak = player.current_streak + 1

    return replace(
        player,
        games_played=player.games_played + 1,
        games_won=player.games_won + 1,
        current_streak=current_streak,
        longest_streak=max(player.longest_streak, current_streak),
        guess_distribution=distribution,
    )


def update_settings(player: Player, high_contrast: bool, hard_mode: bool) -> Player:
    """Overwrite both preference flags."""
    return replace(
        player,
        high_contrast=high_contrast,
        hard_mode=hard_mode,
        guess_distribution=list(player.guess_distribution),
    )
