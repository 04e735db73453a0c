"""
Game Data Models

Contains all game-related data structures and enums.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Dict, List, Optional, Tuple


class LetterStatus(Enum):
    """Per-letter feedback category; UNUSED marks blank cells and untried letters."""
    HIT = "HIT"
    PRESENT = "PRESENT"
    MISS = "MISS"
    UNUSED = "UNUSED"


class SessionStatus(Enum):
    """Session state machine states."""
    AWAITING_GUESS = "AWAITING_GUESS"
    SOLVED = "SOLVED"
    EXHAUSTED = "EXHAUSTED"


# A board cell: the letter shown (blank for unfilled rows) and its category
Cell = Tuple[str, LetterStatus]


@dataclass
class GameState:
    """Board snapshot of a session; the answer is only set once the game is over."""
    current_round: int
    max_rounds: int
    status: SessionStatus
    guesses: List[str]
    rows: List[List[Cell]]
    letter_status: Dict[str, LetterStatus]
    answer: Optional[str] = None

    @property
    def game_over(self) -> bool:
        return self.status is not SessionStatus.AWAITING_GUESS

    @property
    def won(self) -> bool:
        return self.status is SessionStatus.SOLVED


@dataclass(frozen=True)
class GameOutcome:
    """Terminal result of a session, consumed by the statistics model."""
    solved: bool
    attempts: int
    answer: str
