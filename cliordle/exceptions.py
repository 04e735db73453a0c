"""
Exception Hierarchy

Every error raised by cliordle derives from CliordleError so the command
dispatcher can report it with a single diagnostic line.
"""


class CliordleError(Exception):
    """Base class for all cliordle errors."""


class InvalidGuess(CliordleError):
    """A guess was rejected; the session re-prompts without using an attempt."""

    def __init__(self, guess: str, reason: str):
        super().__init__(f"{guess} is an invalid guess: {reason}")
        self.guess = guess
        self.reason = reason


class SessionNotTerminal(CliordleError):
    """finish() was called before the session reached Solved or Exhausted."""


class WordSourceError(CliordleError):
    """The word list could not be loaded or produced no answer."""


class StorageError(CliordleError):
    """Opening, reading or writing the player store failed."""


class SerializationError(StorageError):
    """Stored bytes do not decode to a valid Player."""
