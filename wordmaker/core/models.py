"""Data models shared by the parser, puzzle and session."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple

from .constants import Coordinate, Orientation, SubmissionOutcome


@dataclass(frozen=True)
class WordEntry:
    """A word run extracted from the grid with its cells in reading order."""

    text: str
    cells: Tuple[Coordinate, ...]

    @property
    def orientation(self) -> Orientation:
        first, last = self.cells[0], self.cells[-1]
        if len(self.cells) > 1 and first[1] == last[1]:
            return Orientation.VERTICAL
        return Orientation.HORIZONTAL


@dataclass(frozen=True)
class SubmissionResult:
    """Outcome of a word submitted through a game session."""

    word: str
    outcome: SubmissionOutcome
    message: str
    won: bool = False

    @property
    def accepted(self) -> bool:
        return self.outcome.accepted
