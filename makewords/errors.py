#!/usr/bin/env python3
"""
Errors
======
Exception hierarchy for the pseudoword generator.

    MakewordsError
    ├── ConfigurationError      bad alphabet / context order / settings
    ├── TrainError              one training call failed, nothing mutated
    │   ├── EmptyWordError
    │   └── IllegalCharacterError
    ├── DeadStateError          sampling hit a row with no observations
    ├── AttemptsExhaustedError  caller-imposed attempt budget ran out
    └── VocabularyLoadError     a dictionary line could not be trained
"""

from typing import Optional


class MakewordsError(Exception):
    """Base class for all makewords errors."""


class ConfigurationError(MakewordsError):
    """Invalid generator configuration. Fatal at construction."""


class TrainError(MakewordsError):
    """A word was refused by train()."""

    def __init__(self, word: str, message: str):
        super().__init__(message)
        self.word = word


class EmptyWordError(TrainError):
    def __init__(self, word: str = ""):
        super().__init__(word, "Cannot train on an empty word")


class IllegalCharacterError(TrainError):
    def __init__(self, word: str, character: str, position: int):
        super().__init__(
            word,
            f"Word {word!r} has character {character!r} at position {position} "
            f"which is not in the alphabet"
        )
        self.character = character
        self.position = position


class DeadStateError(MakewordsError):
    """Sampling reached a context that was never observed in training."""

    def __init__(self, row: int):
        super().__init__(f"No transitions observed for context row {row}")
        self.row = row


class AttemptsExhaustedError(MakewordsError):
    """No acceptable candidate within the caller's attempt budget."""

    def __init__(self, attempts: int):
        super().__init__(f"Could not produce a word in {attempts} attempts")
        self.attempts = attempts


class VocabularyLoadError(MakewordsError):
    """A vocabulary line could not be trained."""

    def __init__(self, line_number: int, word: str, reason: Optional[str] = None):
        message = f"Error in dictionary on line {line_number}: word {word!r}"
        if reason:
            message += f" ({reason})"
        super().__init__(message)
        self.line_number = line_number
        self.word = word


__all__ = [
    "MakewordsError",
    "ConfigurationError",
    "TrainError",
    "EmptyWordError",
    "IllegalCharacterError",
    "DeadStateError",
    "AttemptsExhaustedError",
    "VocabularyLoadError",
]
