"""Custom exception hierarchy for the word puzzle engine."""


class WordMakerError(Exception):
    """Base exception for engine failures."""


class ParseError(WordMakerError):
    """Raised when a level grid cannot be read or parsed."""


class EmptyGridError(ParseError):
    """Raised when a level grid has no rows."""


class RaggedGridError(ParseError):
    """Raised when grid rows do not share the width of the first row."""


class LevelNotFoundError(ParseError):
    """Raised when the asset for a level number does not exist."""


class PersistenceError(WordMakerError):
    """Raised when the progress store cannot be read or written."""


class DictionaryLoadError(WordMakerError):
    """Raised when the dictionary file cannot be loaded."""
