import io
import unittest

from puzzlegrid.core.models import WordCandidate
from puzzlegrid.engine.crossword import CrosswordPlacer
from puzzlegrid.engine.wordsearch import WordSearchPlacer
from puzzlegrid.utils.pretty import format_crossword, print_crossword, print_word_search


class PrettyPrintTests(unittest.TestCase):
    def test_crossword_marks_blocked_squares(self) -> None:
        result = CrosswordPlacer(seed=0).generate([WordCandidate("CAT", "Pet")], 3, 1)
        lines = format_crossword(result).splitlines()
        self.assertEqual(len(lines), 2 + 3)
        self.assertEqual(lines[3].split("|")[1].split(), ["C", "A", "T"])
        self.assertEqual(lines[2].split("|")[1].split(), ["#", "#", "#"])

    def test_crossword_lists_clues(self) -> None:
        result = CrosswordPlacer(seed=0).generate([WordCandidate("CAT", "Pet")], 3, 1)
        stream = io.StringIO()
        print_crossword(result, stream=stream)
        output = stream.getvalue()
        self.assertIn("--- Across ---", output)
        self.assertIn("1. Pet (3)  [CAT]", output)

    def test_word_search_lists_placements(self) -> None:
        result = WordSearchPlacer(seed=0).generate(["CAT"], 5, ["right"])
        stream = io.StringIO()
        print_word_search(result, stream=stream)
        output = stream.getvalue()
        self.assertIn("Placed:        1", output)
        self.assertIn("right:1", output)


if __name__ == "__main__":  # pragma: no cover
    unittest.main()
