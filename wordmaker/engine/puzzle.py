"""Immutable puzzle model derived from a level grid."""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass, field
from pathlib import Path
from typing import AbstractSet, Dict, FrozenSet, Iterable, List, Optional, Set, Tuple

from ..core.constants import BLANK, Coordinate, Orientation
from ..core.exceptions import LevelNotFoundError, ParseError
from ..core.models import WordEntry
from ..utils.logger import get_logger
from .grid import Grid, extract_words, parse_grid


LOGGER = get_logger(__name__)


@dataclass(frozen=True)
class Puzzle:
    """Solution words, chooser letters and layout for a single level."""

    solution_words: FrozenSet[str]
    chooser_letters: Tuple[str, ...]
    grid_structure: Grid
    letter_positions: Dict[str, Tuple[Coordinate, ...]] = field(compare=False)
    entries: Tuple[WordEntry, ...] = field(default=(), compare=False, repr=False)

    @property
    def rows(self) -> int:
        return len(self.grid_structure)

    @property
    def cols(self) -> int:
        return len(self.grid_structure[0]) if self.grid_structure else 0

    def letter_at(self, row: int, col: int) -> Optional[str]:
        char = self.grid_structure[row][col]
        return None if char == BLANK else char

    def orientation_of(self, word: str) -> Orientation:
        return WordEntry(word, self.letter_positions[word]).orientation

    def word_at(self, row: int, col: int, found_words: AbstractSet[str]) -> Optional[str]:
        """Return the found word to describe at ``(row, col)``.

        A cell can sit on two crossing words, so a vertical word wins over a
        horizontal one. Returns ``None`` when no found word covers the cell.
        """

        covering = [
            word
            for word, cells in self.letter_positions.items()
            if word in found_words and (row, col) in cells
        ]
        for word in covering:
            if self.orientation_of(word) == Orientation.VERTICAL:
                return word
        return covering[0] if covering else None

    def is_cell_revealed(self, row: int, col: int, found_words: AbstractSet[str]) -> bool:
        return (row, col) in self._cells_of(found_words)

    def wins_with(self, found_words: AbstractSet[str]) -> bool:
        """Return True when the found words cover every solution cell.

        Victory is judged on grid coverage rather than word-set equality, so
        an unfound word whose cells are all covered by found words does not
        block the win.
        """

        found = self._cells_of(found_words)
        unfound = self._cells_of(self.solution_words - set(found_words))
        return unfound <= found if self.solution_words else False

    def _cells_of(self, words: Iterable[str]) -> Set[Coordinate]:
        cells: Set[Coordinate] = set()
        for word in words:
            cells.update(self.letter_positions.get(word, ()))
        return cells


def chooser_letters_for(words: Iterable[str]) -> Tuple[str, ...]:
    """Return the smallest sorted multiset able to spell each word alone."""

    needed: Counter = Counter()
    for word in words:
        for char, count in Counter(word).items():
            needed[char] = max(needed[char], count)
    return tuple(sorted(needed.elements()))


def build_puzzle(lines: Iterable[str]) -> Puzzle:
    """Parse ``lines`` and derive the immutable :class:`Puzzle`."""

    grid = parse_grid(lines)
    entries = extract_words(grid)

    positions: Dict[str, Tuple[Coordinate, ...]] = {}
    for entry in entries:
        # Vertical runs are extracted last and overwrite a same-text horizontal run.
        positions[entry.text] = entry.cells

    solution = frozenset(positions)
    puzzle = Puzzle(
        solution_words=solution,
        chooser_letters=chooser_letters_for(sorted(solution)),
        grid_structure=grid,
        letter_positions=positions,
        entries=tuple(entries),
    )
    LOGGER.debug(
        "Built puzzle with %d words and chooser %s",
        len(solution),
        "".join(puzzle.chooser_letters),
    )
    return puzzle


def level_path(levels_dir: Path | str, level: int) -> Path:
    return Path(levels_dir) / f"{level}.txt"


def load_level(levels_dir: Path | str, level: int) -> Puzzle:
    """Load and build the puzzle stored at ``levels/<level>.txt``."""

    path = level_path(levels_dir, level)
    if not path.exists():
        raise LevelNotFoundError(f"Missing level asset: {path}")
    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise ParseError(f"Unreadable level asset {path}: {exc}") from exc

    lines: List[str] = text.splitlines()
    puzzle = build_puzzle(lines)
    LOGGER.info("Loaded level %s (%d words)", level, len(puzzle.solution_words))
    return puzzle
