"""Level grid parsing and word-run extraction."""

from __future__ import annotations

from typing import Iterable, List, Sequence, Tuple

from ..core.constants import BLANK, MIN_WORD_LENGTH, SOURCE_BLANK, Coordinate
from ..core.exceptions import EmptyGridError, RaggedGridError
from ..core.models import WordEntry
from ..utils.logger import get_logger


LOGGER = get_logger(__name__)

Grid = Tuple[str, ...]


def normalize_line(line: str) -> str:
    """Map source blanks to the blank marker, dropping any line terminator."""

    return line.rstrip("\r\n").replace(SOURCE_BLANK, BLANK)


def parse_grid(lines: Iterable[str]) -> Grid:
    """Return the normalized character matrix for ``lines``.

    Rows are neither padded nor trimmed. Every row must match the width of
    the first one.
    """

    grid = tuple(normalize_line(line) for line in lines)
    if not grid:
        raise EmptyGridError("Grid definition has no rows")

    width = len(grid[0])
    for index, row in enumerate(grid):
        if len(row) != width:
            raise RaggedGridError(
                f"Row {index} has width {len(row)}, expected {width}: {row!r}"
            )
    return grid


def extract_runs(cells: Sequence[Tuple[Coordinate, str]]) -> List[WordEntry]:
    """Split one line of ``(coordinate, char)`` pairs into maximal word runs."""

    entries: List[WordEntry] = []
    letters: List[str] = []
    coords: List[Coordinate] = []

    def flush() -> None:
        if len(letters) >= MIN_WORD_LENGTH:
            entries.append(WordEntry(text="".join(letters), cells=tuple(coords)))
        letters.clear()
        coords.clear()

    for coord, char in cells:
        if char == BLANK:
            flush()
            continue
        letters.append(char)
        coords.append(coord)
    flush()
    return entries


def extract_words(grid: Grid) -> List[WordEntry]:
    """Return every horizontal run, then every vertical run, of ``grid``."""

    if not grid:
        return []
    rows, cols = len(grid), len(grid[0])

    entries: List[WordEntry] = []
    for r in range(rows):
        entries.extend(extract_runs([((r, c), grid[r][c]) for c in range(cols)]))
    horizontal = len(entries)
    for c in range(cols):
        entries.extend(extract_runs([((r, c), grid[r][c]) for r in range(rows)]))

    LOGGER.debug(
        "Extracted %d horizontal and %d vertical runs from %dx%d grid",
        horizontal,
        len(entries) - horizontal,
        rows,
        cols,
    )
    return entries
