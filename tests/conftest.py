"""
Shared fixtures. Logging is pointed at a temporary directory before the
package is imported, since the module-level logger opens its file on import.
"""

import os
import random
import tempfile

_LOG_DIR = tempfile.mkdtemp(prefix="cliordle-test-logs-")
os.environ["LOG_DIR"] = _LOG_DIR
os.environ["CLIORDLE_ENV"] = "testing"
os.environ["CLIORDLE_ENV_FILE"] = os.path.join(_LOG_DIR, "missing.env")

import pytest  # noqa: E402

from cliordle.models.player import Player  # noqa: E402
from cliordle.services.player_repository import PlayerRepository  # noqa: E402
from cliordle.services.word_service import WordSource  # noqa: E402
from cliordle.storage.memory_store import MemoryStore  # noqa: E402

TEST_WORDS = [
    "crane", "train", "crate", "trace", "react", "about", "other", "house",
    "slate", "speed", "plane", "eerie", "abide", "brand", "stare",
]

# Six valid guesses that never solve "crane"
MISSES_FOR_CRANE = ["about", "other", "house", "slate", "speed", "plane"]


class FixedAnswerSource(WordSource):
    """Word source whose answer is chosen by the test."""

    def __init__(self, answer, words=TEST_WORDS):
        super().__init__(words)
        self.answer = answer

    def random_word(self):
        return self.answer


def scripted_input(lines):
    """Prompt function replaying ``lines``; raises EOFError when they run out, like input()."""
    remaining = iter(lines)
    prompts = []

    def read_line(prompt):
        prompts.append(prompt)
        try:
            return next(remaining)
        except StopIteration:
            raise EOFError

    read_line.prompts = prompts
    return read_line


@pytest.fixture
def store():
    return MemoryStore()


@pytest.fixture
def repository(store):
    return PlayerRepository(store)


@pytest.fixture
def word_source():
    return WordSource(TEST_WORDS, rng=random.Random(7))


@pytest.fixture
def player():
    return Player()


@pytest.fixture
def seasoned_player():
    return Player(
        games_played=10,
        games_won=7,
        current_streak=3,
        longest_streak=5,
        guess_distribution=[0, 1, 2, 3, 1, 0],
    )
