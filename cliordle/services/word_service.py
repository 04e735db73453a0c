"""
Word Service

Supplies secret answers and validates guesses. Answers come from the answer
list; guesses may be any word in the answer list or the allowed-guess list.
"""

import random
from typing import Iterable, List, Optional

from ..config.game_settings import (
    WORD_LENGTH, load_allowed_guesses, load_word_list, validate_word_list_integrity
)
from ..exceptions import WordSourceError


def _normalize(words: Iterable[str]) -> List[str]:
    return list(dict.fromkeys(word.strip().lower() for word in words))


class WordSource:
    """
    Dictionary-backed word source.

    This class handles:
    - Random answer selection from the answer list
    - Guess well-formedness and dictionary membership checks
    """

    def __init__(self, answers: Iterable[str], allowed: Iterable[str] = (),
                 rng: Optional[random.Random] = None):
        """
        Initialize the word source.

        Args:
            answers: Candidate answers (always acceptable as guesses too)
            allowed: Extra words accepted as guesses but never picked as answers
            rng: Random generator used to pick answers; a fresh one by default

        Raises:
            WordSourceError: If either list is malformed or there are no answers
        """
        self.word_list = _normalize(answers)
        self.allowed_list = _normalize(allowed)
        try:
            validate_word_list_integrity(self.word_list)
            if self.allowed_list:
                validate_word_list_integrity(self.allowed_list)
        except ValueError as e:
            raise WordSourceError(f"invalid word list: {e}") from e
        self._words = set(self.word_list) | set(self.allowed_list)
        self._rng = rng or random.Random()

    @classmethod
    def from_file(cls, path: Optional[str] = None, allowed_path: Optional[str] = None,
                  rng: Optional[random.Random] = None) -> "WordSource":
        """Build a word source from JSON word lists (the bundled ones by default)."""
        try:
            answers = load_word_list(path)
            allowed = load_allowed_guesses(allowed_path)
        except (OSError, ValueError) as e:
            raise WordSourceError(f"could not load word list: {e}") from e
        return cls(answers, allowed, rng=rng)

    def random_word(self) -> str:
        """Pick the secret answer for a new session."""
        return self._rng.choice(self.word_list)

    def is_valid_guess(self, word: str) -> bool:
        return len(word) == WORD_LENGTH and word.isalpha() and word in self._words
