"""Persistent per-install player progress.

Progress is a single JSON document holding the current level, the words
found for that level and the bonus words discovered for it. Every mutation
is a read-modify-write under one lock followed by an atomic file replace, so
the last completed write wins and a level advance never lands half-applied.
"""

from __future__ import annotations

import json
import os
import tempfile
import threading
from concurrent.futures import Future, ThreadPoolExecutor
from dataclasses import dataclass, field, replace
from pathlib import Path
from typing import Any, Callable, Dict, FrozenSet, List, Optional, Tuple

from ..core.constants import BONUS_WORDS_KEY, DEFAULT_LEVEL, FOUND_WORDS_KEY, LEVEL_KEY
from ..core.exceptions import PersistenceError
from ..utils.logger import get_logger
from .observable import ObservableValue


LOGGER = get_logger(__name__)

DEFAULT_PROGRESS_PATH = Path("local_db/progress.json")


@dataclass(frozen=True)
class Progress:
    """Snapshot of the persisted progress document."""

    current_level: int = DEFAULT_LEVEL
    found_words: FrozenSet[str] = field(default_factory=frozenset)
    bonus_words: FrozenSet[str] = field(default_factory=frozenset)

    def to_jsonable(self) -> Dict[str, Any]:
        return {
            LEVEL_KEY: self.current_level,
            FOUND_WORDS_KEY: sorted(self.found_words),
            BONUS_WORDS_KEY: sorted(self.bonus_words),
        }

    @classmethod
    def from_jsonable(cls, payload: Dict[str, Any]) -> "Progress":
        if not isinstance(payload, dict):
            raise ValueError(f"Progress document must be an object, got {type(payload).__name__}")
        level = payload.get(LEVEL_KEY, DEFAULT_LEVEL)
        if not isinstance(level, int) or isinstance(level, bool) or level < 1:
            raise ValueError(f"Invalid {LEVEL_KEY}: {level!r}")
        return cls(
            current_level=level,
            found_words=_word_set(payload, FOUND_WORDS_KEY),
            bonus_words=_word_set(payload, BONUS_WORDS_KEY),
        )


def _word_set(payload: Dict[str, Any], key: str) -> FrozenSet[str]:
    words = payload.get(key, [])
    if not isinstance(words, list) or not all(isinstance(w, str) for w in words):
        raise ValueError(f"Invalid {key}: expected a list of strings, got {words!r}")
    return frozenset(words)


Change = Tuple[ObservableValue, Any]


class ProgressStore:
    """Durable progress exposed as three observable values.

    Listeners are notified after the store lock is released, so they may call
    back into the store. A listener fired by a :meth:`submit`-ted write runs
    on the writer thread and must not wait on another submitted write.
    """

    def __init__(self, path: Path | str = DEFAULT_PROGRESS_PATH) -> None:
        self.path = Path(path)
        self._lock = threading.RLock()
        self._executor: Optional[ThreadPoolExecutor] = None
        self._progress = Progress()
        self.current_level: ObservableValue[int] = ObservableValue(LEVEL_KEY, DEFAULT_LEVEL)
        self.found_words: ObservableValue[FrozenSet[str]] = ObservableValue(
            FOUND_WORDS_KEY, frozenset()
        )
        self.bonus_words: ObservableValue[FrozenSet[str]] = ObservableValue(
            BONUS_WORDS_KEY, frozenset()
        )

    # ------------------------------------------------------------------
    # Reads
    # ------------------------------------------------------------------
    def load(self, *, default_on_error: bool = False) -> Progress:
        """Read the durable document and publish it to observers.

        A missing file yields the defaults. Unreadable or malformed content
        raises :class:`PersistenceError` unless ``default_on_error`` is set.
        """

        with self._lock:
            try:
                progress = self._read()
            except PersistenceError as exc:
                if not default_on_error:
                    raise
                LOGGER.warning("Using default progress after failed read: %s", exc)
                progress = Progress()
            changes = self._commit_in_memory(progress)
        self._notify(changes)
        return progress

    def snapshot(self) -> Progress:
        with self._lock:
            return self._progress

    # ------------------------------------------------------------------
    # Mutators
    # ------------------------------------------------------------------
    def add_found_word(self, word: str) -> bool:
        """Insert ``word`` into the found set; return False if already present."""

        with self._lock:
            current = self._progress
            if word in current.found_words:
                return False
            changes = self._write(replace(current, found_words=current.found_words | {word}))
        self._notify(changes)
        return True

    def add_bonus_word(self, word: str) -> bool:
        """Insert ``word`` into the bonus set; return False if already present."""

        with self._lock:
            current = self._progress
            if word in current.bonus_words:
                return False
            changes = self._write(replace(current, bonus_words=current.bonus_words | {word}))
        self._notify(changes)
        return True

    def advance_level(self, new_level: int) -> None:
        """Move to ``new_level`` and clear found and bonus words in one write."""

        if new_level < 1:
            raise ValueError(f"Level must be positive, got {new_level}")
        with self._lock:
            changes = self._write(Progress(current_level=new_level))
        LOGGER.info("Advanced to level %s", new_level)
        self._notify(changes)

    def reset(self) -> None:
        with self._lock:
            changes = self._write(Progress())
        self._notify(changes)

    def submit(self, operation: Callable[..., Any], *args: Any) -> Future:
        """Run a mutator on the store's single writer thread.

        The returned future resolves once the write is durable; reads made
        after that observe it.
        """

        with self._lock:
            if self._executor is None:
                self._executor = ThreadPoolExecutor(
                    max_workers=1, thread_name_prefix="progress-writer"
                )
            return self._executor.submit(operation, *args)

    def close(self) -> None:
        with self._lock:
            executor, self._executor = self._executor, None
        if executor is not None:
            executor.shutdown(wait=True)

    def __enter__(self) -> "ProgressStore":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    # ------------------------------------------------------------------
    # Private helpers
    # ------------------------------------------------------------------
    def _read(self) -> Progress:
        if not self.path.exists():
            return Progress()
        try:
            payload = json.loads(self.path.read_text(encoding="utf-8"))
            return Progress.from_jsonable(payload)
        except (OSError, ValueError) as exc:
            raise PersistenceError(f"Cannot read progress from {self.path}: {exc}") from exc

    def _write(self, progress: Progress) -> List[Change]:
        text = json.dumps(progress.to_jsonable(), ensure_ascii=False, indent=2)
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            fd, tmp_name = tempfile.mkstemp(
                dir=self.path.parent, prefix=f".{self.path.name}.", suffix=".tmp"
            )
            try:
                with os.fdopen(fd, "w", encoding="utf-8") as handle:
                    handle.write(text)
                os.replace(tmp_name, self.path)
            except BaseException:
                if os.path.exists(tmp_name):
                    os.unlink(tmp_name)
                raise
        except OSError as exc:
            raise PersistenceError(f"Cannot write progress to {self.path}: {exc}") from exc
        return self._commit_in_memory(progress)

    def _commit_in_memory(self, progress: Progress) -> List[Change]:
        """Store ``progress`` as the committed value; caller holds the lock."""

        previous, self._progress = self._progress, progress
        changes: List[Change] = []
        if progress.current_level != previous.current_level:
            changes.append((self.current_level, progress.current_level))
        if progress.found_words != previous.found_words:
            changes.append((self.found_words, progress.found_words))
        if progress.bonus_words != previous.bonus_words:
            changes.append((self.bonus_words, progress.bonus_words))
        for observable, value in changes:
            observable._set(value)
        return changes

    @staticmethod
    def _notify(changes: List[Change]) -> None:
        for observable, value in changes:
            observable._notify(value)
