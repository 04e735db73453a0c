"""
Player Controller

Handles the ``settings`` and ``stats`` commands.
"""

from typing import Callable, Optional

from ..models.player import Player
from ..services.player_repository import PlayerRepository
from ..services.stats_service import update_settings
from ..utils.display import render_settings, render_stats
from ..utils.game_logger import game_logger


def change_settings(player: Player,
                    repository: PlayerRepository,
                    high_contrast: Optional[bool] = None,
                    hard_mode: Optional[bool] = None,
                    echo: Callable[[str], None] = print) -> Player:
    """
    Overwrite the preference flags, persist them and print the result.

    A flag left as None keeps its current value.
    """
    if high_contrast is None:
        high_contrast = player.high_contrast
    if hard_mode is None:
        hard_mode = player.hard_mode

    game_logger.log_user_action('settings', high_contrast=high_contrast, hard_mode=hard_mode)

    updated = update_settings(player, high_contrast, hard_mode)
    repository.save(updated)
    echo(render_settings(updated))
    return updated


def show_stats(player: Player, echo: Callable[[str], None] = print) -> None:
    """Print the statistics summary and the guess distribution."""
    game_logger.log_user_action('stats', games_played=player.games_played)
    echo(render_stats(player))
