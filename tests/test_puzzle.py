import tempfile
import unittest
from collections import Counter
from pathlib import Path

from wordmaker.core.exceptions import EmptyGridError, LevelNotFoundError
from wordmaker.engine.puzzle import build_puzzle, chooser_letters_for, level_path, load_level


CAT_GRID = ["CAT", "O O", "WOW"]


class PuzzleBuildTests(unittest.TestCase):
    def test_solution_words_and_positions(self) -> None:
        puzzle = build_puzzle(CAT_GRID)
        self.assertEqual(puzzle.solution_words, {"CAT", "WOW", "COW", "TOW"})
        self.assertEqual(puzzle.letter_positions["COW"], ((0, 0), (1, 0), (2, 0)))
        self.assertEqual(puzzle.grid_structure, ("CAT", "O.O", "WOW"))
        self.assertEqual((puzzle.rows, puzzle.cols), (3, 3))
        self.assertIsNone(puzzle.letter_at(1, 1))
        self.assertEqual(puzzle.letter_at(2, 1), "O")

    def test_chooser_uses_max_count_within_single_word(self) -> None:
        puzzle = build_puzzle(["BOOK", "O...", "B..."])
        self.assertEqual(puzzle.solution_words, {"BOOK", "BOB"})
        self.assertEqual(puzzle.chooser_letters, ("B", "B", "K", "O", "O"))

    def test_chooser_can_spell_every_word_alone(self) -> None:
        for lines in (CAT_GRID, ["STAR", "E  A", "AT T"], ["BOOK", "O...", "B..."]):
            puzzle = build_puzzle(lines)
            available = Counter(puzzle.chooser_letters)
            for word in puzzle.solution_words:
                with self.subTest(word=word):
                    for char, count in Counter(word).items():
                        self.assertLessEqual(count, available[char])
            self.assertEqual(list(puzzle.chooser_letters), sorted(puzzle.chooser_letters))

    def test_chooser_letters_helper_is_sorted(self) -> None:
        self.assertEqual(chooser_letters_for(["TEE", "EAT"]), ("A", "E", "E", "T"))

    def test_build_is_deterministic(self) -> None:
        first = build_puzzle(CAT_GRID)
        second = build_puzzle(list(CAT_GRID))
        self.assertEqual(first, second)
        self.assertEqual(first.letter_positions, second.letter_positions)

    def test_same_text_in_both_orientations_keeps_vertical_cells(self) -> None:
        puzzle = build_puzzle(["ON", "N."])
        self.assertEqual(puzzle.solution_words, {"ON"})
        self.assertEqual(len(puzzle.entries), 2)
        self.assertEqual(puzzle.letter_positions["ON"], ((0, 0), (1, 0)))


class WordAtTests(unittest.TestCase):
    def setUp(self) -> None:
        self.puzzle = build_puzzle(CAT_GRID)

    def test_vertical_word_preferred_on_crossing(self) -> None:
        self.assertEqual(self.puzzle.word_at(0, 0, {"CAT", "COW"}), "COW")

    def test_horizontal_word_when_vertical_not_found(self) -> None:
        self.assertEqual(self.puzzle.word_at(0, 0, {"CAT"}), "CAT")

    def test_none_without_found_cover(self) -> None:
        self.assertIsNone(self.puzzle.word_at(0, 0, set()))
        self.assertIsNone(self.puzzle.word_at(1, 1, {"CAT", "COW", "TOW", "WOW"}))

    def test_cell_reveal_follows_found_words(self) -> None:
        self.assertTrue(self.puzzle.is_cell_revealed(0, 1, {"CAT"}))
        self.assertFalse(self.puzzle.is_cell_revealed(2, 1, {"CAT"}))


class WinDetectionTests(unittest.TestCase):
    def test_all_solution_words_win(self) -> None:
        puzzle = build_puzzle(CAT_GRID)
        self.assertTrue(puzzle.wins_with(puzzle.solution_words))

    def test_nothing_found_does_not_win(self) -> None:
        self.assertFalse(build_puzzle(CAT_GRID).wins_with(set()))

    def test_partial_cover_does_not_win(self) -> None:
        self.assertFalse(build_puzzle(CAT_GRID).wins_with({"COW", "TOW"}))

    def test_subsumed_words_need_not_be_found(self) -> None:
        puzzle = build_puzzle(["AB", "CD"])
        self.assertEqual(puzzle.solution_words, {"AB", "CD", "AC", "BD"})
        self.assertTrue(puzzle.wins_with({"AB", "CD"}))

    def test_grid_without_words_never_wins(self) -> None:
        puzzle = build_puzzle(["A.B"])
        self.assertEqual(puzzle.solution_words, frozenset())
        self.assertFalse(puzzle.wins_with(set()))


class LoadLevelTests(unittest.TestCase):
    def test_loads_numbered_asset(self) -> None:
        with tempfile.TemporaryDirectory() as tmpdir:
            level_path(tmpdir, 3).write_text("CAT\nO O\nWOW\n", encoding="utf-8")
            puzzle = load_level(tmpdir, 3)
            self.assertEqual(puzzle, build_puzzle(CAT_GRID))

    def test_missing_asset_raises(self) -> None:
        with tempfile.TemporaryDirectory() as tmpdir:
            with self.assertRaises(LevelNotFoundError):
                load_level(Path(tmpdir), 1)

    def test_empty_asset_raises(self) -> None:
        with tempfile.TemporaryDirectory() as tmpdir:
            level_path(tmpdir, 1).write_text("", encoding="utf-8")
            with self.assertRaises(EmptyGridError):
                load_level(tmpdir, 1)


if __name__ == "__main__":  # pragma: no cover
    unittest.main()
