"""Word submission rules and the game session orchestrator."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import AbstractSet, List, Optional, Protocol, Tuple

from ..core.constants import MIN_SUBMISSION_LENGTH, SubmissionOutcome
from ..core.models import SubmissionResult
from ..data.dictionary import DictionaryConfig
from ..data.normalization import dictionary_key
from ..data.progress_store import DEFAULT_PROGRESS_PATH, ProgressStore
from ..utils.logger import get_logger
from .puzzle import Puzzle, load_level


LOGGER = get_logger(__name__)


class WordLookup(Protocol):
    def contains(self, word: str) -> bool: ...

    def definition_of(self, word: str) -> Optional[str]: ...


@dataclass
class GameConfig:
    """Locations of level assets, dictionary and progress document."""

    levels_dir: Path | str = Path("levels")
    dictionary_path: Path | str = Path("dictionary.csv")
    progress_path: Path | str = DEFAULT_PROGRESS_PATH
    min_submission_length: int = MIN_SUBMISSION_LENGTH

    def to_dictionary_config(self) -> DictionaryConfig:
        return DictionaryConfig(path=self.dictionary_path)


MESSAGES = {
    SubmissionOutcome.NEW_SOLUTION: "Found '{word}'",
    SubmissionOutcome.DUPLICATE: "'{word}' is already found",
    SubmissionOutcome.TOO_SHORT: "Words must be at least {min_length} letters long",
    SubmissionOutcome.NEW_BONUS: "Bonus: '{word}'",
    SubmissionOutcome.DUPLICATE_BONUS: "'{word}' is already a bonus word",
    SubmissionOutcome.INVALID: "'{word}' is not a word",
}


def classify_submission(
    word: str,
    puzzle: Puzzle,
    found_words: AbstractSet[str],
    bonus_words: AbstractSet[str],
    dictionary: WordLookup,
    min_length: int = MIN_SUBMISSION_LENGTH,
) -> SubmissionOutcome:
    """Classify a candidate word against the level state.

    Solution membership is checked before the length rule, so a two-letter
    solution word is still accepted.
    """

    if word in puzzle.solution_words:
        if word in found_words:
            return SubmissionOutcome.DUPLICATE
        return SubmissionOutcome.NEW_SOLUTION
    if len(word) < min_length:
        return SubmissionOutcome.TOO_SHORT
    if dictionary.contains(dictionary_key(word)):
        if word in bonus_words:
            return SubmissionOutcome.DUPLICATE_BONUS
        return SubmissionOutcome.NEW_BONUS
    return SubmissionOutcome.INVALID


class GameSession:
    """Combines the active puzzle, the progress store and the dictionary."""

    def __init__(
        self,
        config: GameConfig,
        store: ProgressStore,
        dictionary: WordLookup,
    ) -> None:
        self.config = config
        self.store = store
        self.dictionary = dictionary
        self.puzzle: Optional[Puzzle] = None

    @property
    def level(self) -> int:
        return self.store.current_level.get()

    def load(self) -> Puzzle:
        """Load the puzzle for the stored level; failures propagate."""

        self.puzzle = None
        self.puzzle = load_level(self.config.levels_dir, self.level)
        return self.puzzle

    def _active(self) -> Puzzle:
        if self.puzzle is None:
            return self.load()
        return self.puzzle

    @property
    def is_won(self) -> bool:
        return self._active().wins_with(self.store.found_words.get())

    def submit(self, word: str) -> SubmissionResult:
        puzzle = self._active()
        outcome = classify_submission(
            word,
            puzzle,
            self.store.found_words.get(),
            self.store.bonus_words.get(),
            self.dictionary,
            self.config.min_submission_length,
        )
        if outcome == SubmissionOutcome.NEW_SOLUTION:
            self.store.add_found_word(word)
        elif outcome == SubmissionOutcome.NEW_BONUS:
            self.store.add_bonus_word(word)
        LOGGER.debug("Submission %r classified as %s", word, outcome.value)

        message = MESSAGES[outcome].format(word=word, min_length=self.config.min_submission_length)
        return SubmissionResult(word=word, outcome=outcome, message=message, won=self.is_won)

    def definition_at(self, row: int, col: int) -> Optional[Tuple[str, str]]:
        """Return ``(word, definition)`` for the found word covering a cell."""

        word = self._active().word_at(row, col, self.store.found_words.get())
        if word is None:
            return None
        definition = self.dictionary.definition_of(word)
        if definition is None:
            return None
        return word, definition

    def sorted_bonus_words(self) -> List[str]:
        return sorted(self.store.bonus_words.get())

    def next_level(self) -> Puzzle:
        """Advance past a won level and load the next puzzle."""

        if not self.is_won:
            raise ValueError(f"Level {self.level} is not complete")
        self.store.advance_level(self.level + 1)
        return self.load()
