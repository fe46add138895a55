"""Read-only word dictionary used for bonus words and definitions."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Dict, Iterable, Iterator, Optional

from ..core.exceptions import DictionaryLoadError
from ..utils.logger import get_logger
from .normalization import dictionary_key


LOGGER = get_logger(__name__)

FIELD_COUNT = 3


@dataclass
class DictionaryConfig:
    """Configuration for dictionary loading."""

    path: Path | str
    delimiter: str = ","
    encoding: str = "utf-8"


@dataclass(frozen=True)
class DictionaryEntry:
    """A dictionary line: word, part of speech and definition."""

    word: str
    part_of_speech: str
    definition: str


class WordDictionary:
    """Case-insensitive ``word,partOfSpeech,definition`` lookup table."""

    def __init__(self, config: Optional[DictionaryConfig] = None) -> None:
        self.config = config
        self._entries: Dict[str, DictionaryEntry] = {}
        if config is not None:
            self._load(config)

    @classmethod
    def from_lines(cls, lines: Iterable[str], delimiter: str = ",") -> "WordDictionary":
        dictionary = cls()
        dictionary._hydrate(lines, delimiter)
        return dictionary

    # ------------------------------------------------------------------
    # Loading
    # ------------------------------------------------------------------
    def _load(self, config: DictionaryConfig) -> None:
        source = Path(config.path)
        if not source.exists():
            raise DictionaryLoadError(f"Missing dictionary file: {source}")
        try:
            with source.open(encoding=config.encoding) as handle:
                self._hydrate(handle, config.delimiter)
        except (OSError, UnicodeDecodeError) as exc:
            raise DictionaryLoadError(f"Unreadable dictionary {source}: {exc}") from exc
        LOGGER.info("Loaded %d dictionary entries from %s", len(self._entries), source)

    def _hydrate(self, lines: Iterable[str], delimiter: str) -> None:
        skipped = 0
        for line in lines:
            # The definition may itself contain the delimiter.
            parts = line.rstrip("\r\n").split(delimiter, FIELD_COUNT - 1)
            if len(parts) < FIELD_COUNT:
                skipped += 1
                continue
            word, part_of_speech, definition = parts
            key = dictionary_key(word)
            if not key:
                skipped += 1
                continue
            self._entries[key] = DictionaryEntry(key, part_of_speech, definition)
        if skipped:
            LOGGER.debug("Skipped %d malformed dictionary lines", skipped)

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------
    def contains(self, word: str) -> bool:
        return dictionary_key(word) in self._entries

    def __contains__(self, word: object) -> bool:
        return isinstance(word, str) and self.contains(word)

    def get(self, word: str) -> Optional[DictionaryEntry]:
        return self._entries.get(dictionary_key(word))

    def definition_of(self, word: str) -> Optional[str]:
        entry = self.get(word)
        return entry.definition if entry else None

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[str]:
        return iter(self._entries)
