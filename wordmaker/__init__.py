"""Word puzzle engine: crossword grids filled from a fixed letter chooser.

This package exposes the public API surface via:

- ``wordmaker.engine.puzzle.build_puzzle`` / ``load_level``: derive a puzzle from a grid.
- ``wordmaker.engine.session.GameSession``: classify submissions and track progress.
- ``wordmaker.data.progress_store.ProgressStore``: durable per-install progress.
- ``wordmaker.data.dictionary.WordDictionary``: bonus-word and definition lookup.
"""

from .engine.puzzle import Puzzle, build_puzzle, load_level
from .engine.session import GameConfig, GameSession, classify_submission
from .data.dictionary import DictionaryConfig, WordDictionary
from .data.progress_store import Progress, ProgressStore

__all__ = [
    "Puzzle",
    "build_puzzle",
    "load_level",
    "GameConfig",
    "GameSession",
    "classify_submission",
    "DictionaryConfig",
    "WordDictionary",
    "Progress",
    "ProgressStore",
]

__version__ = "0.1.0"
