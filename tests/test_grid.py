import unittest

from wordmaker.core.constants import BLANK, Orientation
from wordmaker.core.exceptions import EmptyGridError, ParseError, RaggedGridError
from wordmaker.engine.grid import extract_runs, extract_words, normalize_line, parse_grid


class GridParseTests(unittest.TestCase):
    def test_spaces_become_blank_marker(self) -> None:
        self.assertEqual(parse_grid(["CAT", "O O", "WOW"]), ("CAT", "O.O", "WOW"))

    def test_line_terminators_are_dropped_but_not_padding(self) -> None:
        self.assertEqual(normalize_line("AB \n"), "AB" + BLANK)

    def test_empty_input_raises(self) -> None:
        with self.assertRaises(EmptyGridError):
            parse_grid([])

    def test_ragged_rows_raise_parse_error(self) -> None:
        with self.assertRaises(RaggedGridError) as ctx:
            parse_grid(["CAT", "O"])
        self.assertIsInstance(ctx.exception, ParseError)
        self.assertIn("Row 1", str(ctx.exception))


class WordExtractionTests(unittest.TestCase):
    def test_cat_cow_wow_scenario(self) -> None:
        entries = extract_words(parse_grid(["CAT", "O.O", "WOW"]))
        by_text = {entry.text: entry for entry in entries}

        self.assertEqual([e.text for e in entries], ["CAT", "WOW", "COW", "TOW"])
        self.assertEqual(by_text["CAT"].cells, ((0, 0), (0, 1), (0, 2)))
        self.assertEqual(by_text["WOW"].cells, ((2, 0), (2, 1), (2, 2)))
        self.assertEqual(by_text["COW"].cells, ((0, 0), (1, 0), (2, 0)))
        self.assertEqual(by_text["TOW"].cells, ((0, 2), (1, 2), (2, 2)))
        self.assertEqual(by_text["COW"].orientation, Orientation.VERTICAL)
        self.assertEqual(by_text["CAT"].orientation, Orientation.HORIZONTAL)

    def test_single_letter_runs_are_not_words(self) -> None:
        entries = extract_words(parse_grid(["A.B", "...", "C.D"]))
        self.assertEqual(entries, [])

    def test_every_extracted_word_has_at_least_two_letters(self) -> None:
        grids = [
            ["AB.C", "D..E", "FGHI"],
            ["A", "B", "C"],
            ["X.Y.Z"],
            ["SEAT", "T..E", "ATE."],
        ]
        for lines in grids:
            with self.subTest(grid=lines):
                for entry in extract_words(parse_grid(lines)):
                    self.assertGreaterEqual(len(entry.text), 2)
                    self.assertEqual(len(entry.cells), len(entry.text))

    def test_run_closed_by_blank_in_middle_of_line(self) -> None:
        cells = [((0, c), char) for c, char in enumerate("AB.CDE.F")]
        runs = extract_runs(cells)
        self.assertEqual([r.text for r in runs], ["AB", "CDE"])
        self.assertEqual(runs[1].cells, ((0, 3), (0, 4), (0, 5)))


if __name__ == "__main__":  # pragma: no cover
    unittest.main()
