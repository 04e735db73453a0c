"""
Terminal Display Helpers

Turns board snapshots and player profiles into printable text. Colours
come from the theme selected by the player's high-contrast preference.
"""

from typing import List

from ..config.theme import Theme
from ..models.game import GameState, LetterStatus
from ..models.player import Player

BOARD_TOP = " ___  ___  ___  ___  ___"
ROW_SEPARATOR = " ---  ---  ---  ---  ---"
KEYBOARD_ROWS = ("qwertyuiop", "asdfghjkl", "zxcvbnm")


def render_board(state: GameState, theme: Theme) -> str:
    """Render all rows of the board, filled or blank, as bracketed cells."""
    lines = [BOARD_TOP]
    for row in state.rows:
        lines.append("".join(f"|{theme.token(status, letter)}|" for letter, status in row))
        lines.append(ROW_SEPARATOR)
    return "\n".join(lines)


def render_keyboard(state: GameState, theme: Theme) -> str:
    """Render the letters seen so far; letters known to be absent are blanked."""
    lines = []
    for indent, keys in enumerate(KEYBOARD_ROWS):
        cells = []
        for letter in keys:
            status = state.letter_status.get(letter, LetterStatus.UNUSED)
            shown = " " if status is LetterStatus.MISS else letter
            cells.append(theme.token(status, shown))
        lines.append(" " * indent + "".join(cells))
    return "\n".join(lines)


def render_stats(player: Player) -> str:
    lines: List[str] = [
        "---     STATISTICS     ---",
        (f"Played: {player.games_played} | Win%: {player.win_percentage:.0f}% | "
         f"Current streak: {player.current_streak} | Longest streak: {player.longest_streak}"),
        "",
        "--- GUESS DISTRIBUTION ---",
    ]
    for index, count in enumerate(player.guess_distribution):
        lines.append(f"{index + 1}\t|\t{count}")
    return "\n".join(lines)


def _flag(value: bool) -> str:
    return "true" if value else "false"


def render_settings(player: Player) -> str:
    return "\n".join([
        "---   CURRENT SETTINGS   ---",
        f"High-contrast\t|\t{_flag(player.high_contrast)}",
        f"Hard mode\t|\t{_flag(player.hard_mode)}",
    ])
