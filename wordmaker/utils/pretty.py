"""Pretty-print helpers for puzzle boards."""

from __future__ import annotations

import sys
from typing import TYPE_CHECKING, AbstractSet

if TYPE_CHECKING:
    from ..engine.puzzle import Puzzle


HIDDEN = "_"
EMPTY = " "


def cell_symbol(puzzle: Puzzle, row: int, col: int, found_words: AbstractSet[str]) -> str:
    letter = puzzle.letter_at(row, col)
    if letter is None:
        return EMPTY
    if puzzle.is_cell_revealed(row, col, found_words):
        return letter
    return HIDDEN


def format_board(puzzle: Puzzle, found_words: AbstractSet[str] = frozenset()) -> str:
    """Render the board with unfound letters masked."""

    width = puzzle.cols
    header_cells = [f"{c:>2}" for c in range(width)]
    lines = ["    " + " ".join(header_cells)]
    lines.append("    " + "-" * (3 * width - 1))
    for r in range(puzzle.rows):
        row_cells = [cell_symbol(puzzle, r, c, found_words) for c in range(width)]
        row_render = " ".join(f"{symbol:>2}" for symbol in row_cells)
        lines.append(f"{r:>2} | {row_render}")
    return "\n".join(lines)


def format_chooser(puzzle: Puzzle) -> str:
    return " ".join(puzzle.chooser_letters)


def pretty_print_board(
    puzzle: Puzzle,
    found_words: AbstractSet[str] = frozenset(),
    *,
    label: str | None = None,
    stream=None,
) -> None:
    """Print the board followed by the chooser letters."""

    stream = stream or sys.stdout
    if label:
        print(label, file=stream)
    print(format_board(puzzle, found_words), file=stream)
    print(f"Letters: {format_chooser(puzzle)}", file=stream)
