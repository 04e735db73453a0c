"""
Game Service

Contains the core game logic: per-letter feedback evaluation and the
six-guess session state machine.
"""

import string
from typing import Dict, List, Optional, Tuple

from ..config.game_settings import MAX_ROUNDS, WORD_LENGTH
from ..exceptions import InvalidGuess, SessionNotTerminal
from ..models.game import GameOutcome, GameState, LetterStatus, SessionStatus
from ..models.player import Player
from .word_service import WordSource

FEEDBACK_STANDARD = "standard"
FEEDBACK_LEGACY = "legacy"
FEEDBACK_RULES = (FEEDBACK_STANDARD, FEEDBACK_LEGACY)

# Priority used when folding guess results into the keyboard status
_STATUS_RANK = {
    LetterStatus.UNUSED: 0,
    LetterStatus.MISS: 1,
    LetterStatus.PRESENT: 2,
    LetterStatus.HIT: 3,
}


def evaluate_guess(guess: str, target: str, rule: str = FEEDBACK_STANDARD) -> List[Tuple[str, LetterStatus]]:
    """
    Evaluate a guess against the target, letter by letter.

    Args:
        guess: The guessed word
        target: The answer, same length as the guess
        rule: "standard" caps PRESENT credits at the number of unmatched copies
            of a letter in the target; "legacy" marks any letter found anywhere
            in the target as PRESENT, so repeated letters can be over-credited

    Returns:
        List of (letter, status) pairs, one per position

    Raises:
        ValueError: If the lengths differ or the rule is unknown
    """
    if len(guess) != len(target):
        raise ValueError(f"Guess '{guess}' and target must have the same length")

    if rule == FEEDBACK_STANDARD:
        return _evaluate_standard(guess, target)
    if rule == FEEDBACK_LEGACY:
        return _evaluate_legacy(guess, target)
    raise ValueError(f"Unknown feedback rule '{rule}'. Must be one of {FEEDBACK_RULES}")


def classify(guess: str, target: str, rule: str = FEEDBACK_STANDARD) -> List[LetterStatus]:
    """Return only the category sequence of ``evaluate_guess``."""
    return [status for _, status in evaluate_guess(guess, target, rule)]


def _evaluate_standard(guess: str, target: str) -> List[Tuple[str, LetterStatus]]:
    result: List[Tuple[str, Optional[LetterStatus]]] = []

    # Working copy of the target to track letter consumption
    target_chars: List[Optional[str]] = list(target)

    # First pass: Mark all exact position matches (HIT)
    for i, letter in enumerate(guess):
        if letter == target[i]:
            result.append((letter, LetterStatus.HIT))
            target_chars[i] = None
        else:
            result.append((letter, None))  # Placeholder for second pass

    # Second pass: Mark present letters (PRESENT) and misses (MISS)
    for i, (letter, status) in enumerate(result):
        if status is not None:
            continue
        if letter in target_chars:
            result[i] = (letter, LetterStatus.PRESENT)
            # Remove first occurrence to prevent double-counting
            target_chars[target_chars.index(letter)] = None
        else:
            result[i] = (letter, LetterStatus.MISS)

    return [(letter, status) for letter, status in result if status is not None]


def _evaluate_legacy(guess: str, target: str) -> List[Tuple[str, LetterStatus]]:
    result = []
    for i, letter in enumerate(guess):
        if letter == target[i]:
            result.append((letter, LetterStatus.HIT))
        elif letter in target:
            result.append((letter, LetterStatus.PRESENT))
        else:
            result.append((letter, LetterStatus.MISS))
    return result


def normalize_guess(raw: Optional[str]) -> str:
    """Trim surrounding whitespace (including the line terminator) and lowercase."""
    return (raw or "").strip().lower()


def _ordinal(n: int) -> str:
    suffix = {1: "st", 2: "nd", 3: "rd"}.get(n if n < 20 else n % 10, "th")
    return f"{n}{suffix}"


class GameSession:
    """
    A single game: up to MAX_ROUNDS accepted guesses against a fixed answer.

    This class handles:
    - Guess normalization and validation (dictionary, format, hard mode)
    - Feedback evaluation and board/keyboard state accrual
    - The AWAITING_GUESS -> SOLVED | EXHAUSTED state machine

    The owning Player is only read (for the hard-mode preference); statistics
    are updated by the caller from the outcome returned by ``finish``.
    """

    def __init__(self, owner: Player, answer: str, word_source: WordSource,
                 feedback_rule: str = FEEDBACK_STANDARD):
        if feedback_rule not in FEEDBACK_RULES:
            raise ValueError(f"Unknown feedback rule '{feedback_rule}'. Must be one of {FEEDBACK_RULES}")

        answer = normalize_guess(answer)
        if len(answer) != WORD_LENGTH or not answer.isalpha():
            raise ValueError(f"Answer must be {WORD_LENGTH} letters, got '{answer}'")

        self.owner = owner
        self.answer = answer
        self.word_source = word_source
        self.feedback_rule = feedback_rule
        self.guesses: List[str] = []
        self.guess_results: List[List[Tuple[str, LetterStatus]]] = []
        self.letter_status: Dict[str, LetterStatus] = {
            letter: LetterStatus.UNUSED for letter in string.ascii_lowercase
        }
        self.solved = False

    @property
    def status(self) -> SessionStatus:
        if self.solved:
            return SessionStatus.SOLVED
        if len(self.guesses) >= MAX_ROUNDS:
            return SessionStatus.EXHAUSTED
        return SessionStatus.AWAITING_GUESS

    @property
    def is_terminal(self) -> bool:
        return self.status is not SessionStatus.AWAITING_GUESS

    @property
    def attempt(self) -> int:
        """Number of the attempt currently awaited (1-based)."""
        return min(len(self.guesses) + 1, MAX_ROUNDS)

    def is_valid_guess(self, guess: str) -> Tuple[bool, str]:
        """
        Validates a guess for this session without changing any state.

        Args:
            guess: The word to validate (normalized first)

        Returns:
            Tuple of (is_valid, error_message)
        """
        if self.is_terminal:
            return False, "Game is already over"

        if not guess or not isinstance(guess, str):
            return False, "Guess must be a valid string"

        normalized_guess = normalize_guess(guess)

        if len(normalized_guess) != WORD_LENGTH:
            return False, f"Guess must be exactly {WORD_LENGTH} letters"

        if not normalized_guess.isalpha():
            return False, "Guess must contain only letters"

        if not self.word_source.is_valid_guess(normalized_guess):
            return False, "Word not in word list"

        if self.owner.hard_mode:
            violation = self._hard_mode_violation(normalized_guess)
            if violation:
                return False, violation

        return True, ""

    def submit_guess(self, raw: str) -> GameState:
        """
        Processes a guess and advances the state machine.

        Args:
            raw: The guess as typed by the player

        Returns:
            Board snapshot after the guess

        Raises:
            InvalidGuess: If the guess is rejected; no attempt is consumed
        """
        normalized_guess = normalize_guess(raw)
        is_valid, error = self.is_valid_guess(normalized_guess)
        if not is_valid:
            raise InvalidGuess(normalized_guess, error)

        evaluations = evaluate_guess(normalized_guess, self.answer, self.feedback_rule)
        self.guesses.append(normalized_guess)
        self.guess_results.append(evaluations)
        self._update_letter_status(evaluations)

        if normalized_guess == self.answer:
            self.solved = True

        return self.render_board()

    def render_board(self) -> GameState:
        """
        Returns a snapshot of the board; the answer is only revealed once the game is over.
        """
        rows = [list(result) for result in self.guess_results]
        for _ in range(MAX_ROUNDS - len(rows)):
            rows.append([(" ", LetterStatus.UNUSED)] * WORD_LENGTH)

        return GameState(
            current_round=len(self.guesses),
            max_rounds=MAX_ROUNDS,
            status=self.status,
            guesses=self.guesses.copy(),
            rows=rows,
            letter_status=self.letter_status.copy(),
            answer=self.answer if self.is_terminal else None,
        )

    def finish(self) -> GameOutcome:
        """
        Produce the outcome of a finished session.

        Raises:
            SessionNotTerminal: If the session is still awaiting guesses
        """
        if not self.is_terminal:
            raise SessionNotTerminal(
                f"Session still awaiting guess {self.attempt}/{MAX_ROUNDS}"
            )
        return GameOutcome(solved=self.solved, attempts=len(self.guesses), answer=self.answer)

    def _hard_mode_violation(self, guess: str) -> str:
        """
        Return the reason a guess breaks hard mode, or an empty string.

        Revealed HIT letters must stay in place; revealed PRESENT letters must be reused.
        """
        for result in self.guess_results:
            for position, (letter, status) in enumerate(result):
                if status is LetterStatus.HIT and guess[position] != letter:
                    return f"{_ordinal(position + 1)} letter must be {letter.upper()}"

        for result in self.guess_results:
            for letter, status in result:
                if status is LetterStatus.PRESENT and letter not in guess:
                    return f"Guess must contain {letter.upper()}"

        return ""

    def _update_letter_status(self, evaluations: List[Tuple[str, LetterStatus]]) -> None:
        """
        Updates keyboard letter status tracking; status can only progress in priority order.
        """
        for letter, new_status in evaluations:
            current_status = self.letter_status.get(letter, LetterStatus.UNUSED)
            if _STATUS_RANK[new_status] > _STATUS_RANK[current_status]:
                self.letter_status[letter] = new_status
