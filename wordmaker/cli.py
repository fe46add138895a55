"""Terminal host for the word puzzle engine."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Optional, TextIO

from .core.exceptions import WordMakerError
from .data.dictionary import WordDictionary
from .data.normalization import submission_text
from .data.progress_store import DEFAULT_PROGRESS_PATH, ProgressStore
from .engine.session import GameConfig, GameSession
from .utils.logger import configure_logging
from .utils.pretty import pretty_print_board


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Play word puzzle levels in the terminal")
    parser.add_argument(
        "--levels-dir",
        type=Path,
        default=Path("levels"),
        help="Directory holding <n>.txt level grids",
    )
    parser.add_argument(
        "--dictionary",
        type=Path,
        default=Path("dictionary.csv"),
        help="Path to word,partOfSpeech,definition file",
    )
    parser.add_argument(
        "--progress",
        type=Path,
        default=DEFAULT_PROGRESS_PATH,
        help="Path to the JSON progress document",
    )
    parser.add_argument(
        "--log-level",
        type=str,
        default="WARNING",
        help="Logging level (DEBUG, INFO, WARNING, ERROR)",
    )
    return parser


def show(session: GameSession, out: TextIO) -> None:
    if session.puzzle is None:
        return
    pretty_print_board(
        session.puzzle,
        session.store.found_words.get(),
        label=f"Level {session.level}",
        stream=out,
    )


def handle_command(session: GameSession, line: str, out: TextIO) -> bool:
    """Run a ``:command``; return False when the player quits."""

    parts = line[1:].split()
    command, args = (parts[0], parts[1:]) if parts else ("", [])
    if command == "quit":
        return False
    if command == "bonus":
        words = session.sorted_bonus_words()
        print("Bonus words: " + (", ".join(words) if words else "(none)"), file=out)
    elif command == "define" and len(args) == 2 and all(a.isdigit() for a in args):
        found = session.definition_at(int(args[0]), int(args[1]))
        if found is None:
            print("No found word with a definition there", file=out)
        else:
            print(f"{found[0]}: {found[1]}", file=out)
    elif command == "next":
        if session.is_won:
            session.next_level()
            show(session, out)
        else:
            print("Finish this level first", file=out)
    else:
        print("Commands: :bonus, :define ROW COL, :next, :quit", file=out)
    return True


def play(session: GameSession, stdin: TextIO, out: TextIO) -> None:
    session.load()
    show(session, out)
    for raw in stdin:
        line = raw.strip()
        if not line:
            continue
        if line.startswith(":"):
            if not handle_command(session, line, out):
                break
            continue
        result = session.submit(submission_text(line))
        print(result.message, file=out)
        if result.accepted:
            show(session, out)
        if result.won:
            print("Level complete! Type :next to continue", file=out)


def main(
    argv: list[str] | None = None,
    stdin: Optional[TextIO] = None,
    stdout: Optional[TextIO] = None,
) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    level = getattr(logging, args.log_level.upper(), logging.WARNING)
    configure_logging(level, stream=sys.stderr)

    stdin = stdin or sys.stdin
    stdout = stdout or sys.stdout
    config = GameConfig(
        levels_dir=args.levels_dir,
        dictionary_path=args.dictionary,
        progress_path=args.progress,
    )

    try:
        dictionary = WordDictionary(config.to_dictionary_config())
        with ProgressStore(config.progress_path) as store:
            store.load()
            play(GameSession(config, store, dictionary), stdin, stdout)
    except WordMakerError as exc:
        print(f"Error: {exc}", file=stdout)
        return 1
    return 0
