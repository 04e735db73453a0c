"""
Board Colour Themes

Maps a feedback category to the ANSI format string used to draw a cell.
Two themes exist: the standard green/yellow pair and a high-contrast
orange/blue pair.
"""

from dataclasses import dataclass

from ..models.game import LetterStatus

COLOUR_GREEN = "\033[42m %s \033[0m"
COLOUR_YELLOW = "\033[43m %s \033[0m"
COLOUR_ORANGE = "\033[48;5;202m %s \033[0m"
COLOUR_BLUE = "\033[46m %s \033[0m"
PLAIN = " %s "


@dataclass(frozen=True)
class Theme:
    """Format strings for each letter category; each takes one letter."""
    hit: str
    present: str
    miss: str = PLAIN
    unused: str = PLAIN

    def token(self, status: LetterStatus, letter: str) -> str:
        """Return the display token for a letter shown with the given status."""
        fmt = {
            LetterStatus.HIT: self.hit,
            LetterStatus.PRESENT: self.present,
            LetterStatus.MISS: self.miss,
            LetterStatus.UNUSED: self.unused,
        }[status]
        return fmt % letter


STANDARD_THEME = Theme(hit=COLOUR_GREEN, present=COLOUR_YELLOW)
HIGH_CONTRAST_THEME = Theme(hit=COLOUR_ORANGE, present=COLOUR_BLUE)


def get_theme(high_contrast: bool) -> Theme:
    return HIGH_CONTRAST_THEME if high_contrast else STANDARD_THEME
