"""
Game Configuration Constants Module

This module defines the game rule constants and the loader for the bundled
word list. All game parameters are centralized here.
"""

import json
import os
from typing import Final, List, Optional

# Core Game Configuration Constants
MAX_ROUNDS: Final[int] = 6
"""
Maximum number of guess attempts allowed per game.
Type: Final[int] - Immutable to prevent accidental modification
"""

WORD_LENGTH: Final[int] = 5
"""Number of letters in every answer and guess."""

DEFAULT_WORD_LIST_PATH: Final[str] = os.path.join(
    os.path.dirname(os.path.abspath(__file__)), 'wordles.json'
)

DEFAULT_ALLOWED_GUESSES_PATH: Final[str] = os.path.join(
    os.path.dirname(os.path.abspath(__file__)), 'allowed_guesses.json'
)
"""Dictionary words accepted as guesses but never drawn as answers."""



def load_word_list(path: Optional[str] = None) -> List[str]:
    """
    Load word list from a JSON file (the bundled wordles.json by default).

    Args:
        path: Optional path to a JSON array of words

    Returns:
        List[str]: De-duplicated list of lowercase 5-letter words, in file order

    Raises:
        FileNotFoundError: If the word list file is not found
        ValueError: If the JSON is malformed, the list is empty or contains invalid words
    """
    json_file_path = path or DEFAULT_WORD_LIST_PATH

    try:
        with open(json_file_path, 'r', encoding='utf-8') as f:
            word_list = json.load(f)
    except FileNotFoundError:
        raise FileNotFoundError(f"Word list file not found: {json_file_path}")
    except json.JSONDecodeError as e:
        raise ValueError(f"Invalid JSON in {json_file_path}: {e}")

    if not isinstance(word_list, list):
        raise ValueError("JSON file must contain an array of words")

    if not all(isinstance(word, str) for word in word_list):
        raise ValueError("Every entry in the word list must be a string")

    # Lowercase and drop duplicates while keeping order
    lowercase_words = list(dict.fromkeys(word.strip().lower() for word in word_list))

    validate_word_list_integrity(lowercase_words)
    return lowercase_words


def validate_word_list_integrity(words: List[str]) -> bool:
    """
    Validates the integrity and consistency of a word list.

    This function performs validation to ensure:
    1. Length validation: All words must be exactly WORD_LENGTH characters
    2. Character validation: Only alphabetic characters allowed
    3. Format validation: Consistent lowercase formatting

    Returns:
        bool: True if the word list passes all validation checks

    Raises:
        ValueError: If any validation check fails with detailed error message
    """
    if not words:
        raise ValueError("Word list cannot be empty")

    for index, word in enumerate(words):
        if len(word) != WORD_LENGTH:
            raise ValueError(f"Word at index {index} '{word}' is not {WORD_LENGTH} characters long")

        if not word.isalpha():
            raise ValueError(f"Word at index {index} '{word}' contains non-alphabetic characters")

        if not word.islower():
            raise ValueError(f"Word at index {index} '{word}' is not in lowercase format")

    return True


def load_allowed_guesses(path: Optional[str] = None) -> List[str]:
    """Load the extra guess dictionary (the bundled allowed_guesses.json by default)."""
    return load_word_list(path or DEFAULT_ALLOWED_GUESSES_PATH)
