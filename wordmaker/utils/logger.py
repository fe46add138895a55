"""Logging setup shared by the puzzle engine and the terminal host.

Engine modules log puzzle builds, level loads and progress writes through
namespaced loggers under ``wordmaker``; only the host decides where those
records go and at which level.
"""

from __future__ import annotations

import logging
from typing import Optional, TextIO

LOG_FORMAT = "%(asctime)s | %(levelname)-7s | %(name)s | %(message)s"


def configure_logging(level: int = logging.INFO, stream: Optional[TextIO] = None) -> None:
    """Route all records to ``stream`` (stderr by default) at ``level``.

    Existing root handlers are replaced, so calling this again from the host
    after an engine import has auto-configured logging does not duplicate
    output.
    """

    handler = logging.StreamHandler(stream)
    handler.setFormatter(logging.Formatter(fmt=LOG_FORMAT, datefmt="%H:%M:%S"))

    root = logging.getLogger()
    root.handlers.clear()
    root.addHandler(handler)
    root.setLevel(level)


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Return the logger for an engine module, ensuring records are visible.

    The first engine import in a process without logging configured installs
    the default handler.
    """

    if not logging.getLogger().handlers:
        configure_logging()
    return logging.getLogger(name or "wordmaker")
