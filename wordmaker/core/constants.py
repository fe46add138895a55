"""Shared constants and enumerations for the word puzzle engine."""

from __future__ import annotations

from enum import Enum
from typing import Tuple

BLANK = "."
SOURCE_BLANK = " "

MIN_WORD_LENGTH = 2
MIN_SUBMISSION_LENGTH = 3
DEFAULT_LEVEL = 1

# Persisted progress keys.
LEVEL_KEY = "current_level"
FOUND_WORDS_KEY = "found_words"
BONUS_WORDS_KEY = "bonus_words"

Coordinate = Tuple[int, int]


class Orientation(str, Enum):
    """Reading direction of an extracted word."""

    HORIZONTAL = "HORIZONTAL"
    VERTICAL = "VERTICAL"


class SubmissionOutcome(str, Enum):
    """Every way a submitted word can be classified."""

    NEW_SOLUTION = "NEW_SOLUTION"
    DUPLICATE = "DUPLICATE"
    TOO_SHORT = "TOO_SHORT"
    NEW_BONUS = "NEW_BONUS"
    DUPLICATE_BONUS = "DUPLICATE_BONUS"
    INVALID = "INVALID"

    @property
    def accepted(self) -> bool:
        return self in {SubmissionOutcome.NEW_SOLUTION, SubmissionOutcome.NEW_BONUS}
