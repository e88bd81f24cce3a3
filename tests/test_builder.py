import json
import unittest
from unittest.mock import MagicMock, patch

from puzzlegrid.core.constants import Difficulty
from puzzlegrid.core.exceptions import ContentExhaustedError, PlacementFailure
from puzzlegrid.engine.builder import PuzzleBuilder


MUSIC_WORDS = [
    "GUITAR", "DRUMS", "BASS", "RIFF", "AMP", "SOLO",
    "TUNE", "STAGE", "BAND", "TOUR", "SONG", "ROCK",
]


def content(words, category: str = "Music", title: str = "Rock On") -> str:
    return json.dumps(
        {
            "title": title,
            "words": [
                {"word": word, "clue": f"Clue for {word}", "category": category, "difficulty": 1}
                for word in words
            ],
            "funFact": "Amps go to eleven.",
        }
    )


class WordSearchBuilderTests(unittest.TestCase):
    def test_retries_after_unparseable_content(self) -> None:
        provider = MagicMock()
        provider.fetch.side_effect = ["not json at all", content(MUSIC_WORDS)]

        puzzle = PuzzleBuilder(provider, seed=1).build_word_search("rock", "easy", ["Music"])

        self.assertEqual(provider.fetch.call_count, 2)
        self.assertEqual(provider.fetch.call_args.args[3], 2)
        self.assertEqual(puzzle.title, "Rock On")
        self.assertEqual(puzzle.grid_size, 12)
        self.assertEqual(len(puzzle.grid), 12)
        self.assertIs(puzzle.difficulty, Difficulty.EASY)
        self.assertTrue(puzzle.words)
        for entry in puzzle.words:
            self.assertEqual(entry.candidate.word, entry.placement.word)
            self.assertEqual(entry.candidate.clue, f"Clue for {entry.candidate.word}")

    def test_merged_entries_serialize_with_metadata(self) -> None:
        provider = MagicMock()
        provider.fetch.return_value = content(MUSIC_WORDS)
        puzzle = PuzzleBuilder(provider, seed=2).build_word_search("rock", Difficulty.EASY, ["Music"])
        payload = puzzle.to_dict()
        self.assertEqual(payload["difficulty"], "easy")
        self.assertEqual(payload["funFact"], "Amps go to eleven.")
        first = payload["words"][0]
        self.assertTrue({"word", "clue", "category", "difficulty", "startRow", "startCol", "direction"} <= set(first))

    def test_raises_after_too_few_words_every_attempt(self) -> None:
        provider = MagicMock()
        provider.fetch.return_value = content(["CAT", "DOG"])
        with self.assertRaises(ContentExhaustedError):
            PuzzleBuilder(provider).build_word_search("pets", "easy", ["Music"])
        self.assertEqual(provider.fetch.call_count, 3)

    def test_last_attempt_ignores_categories(self) -> None:
        provider = MagicMock()
        provider.fetch.return_value = content(MUSIC_WORDS, category="Elsewhere")

        puzzle = PuzzleBuilder(provider, seed=5).build_word_search("rock", "easy", ["Music"])

        self.assertEqual(provider.fetch.call_count, 3)
        self.assertTrue(puzzle.words)
        for entry in puzzle.words:
            self.assertEqual(entry.candidate.category, "Elsewhere")


class CrosswordBuilderTests(unittest.TestCase):
    def test_last_attempt_ignores_categories(self) -> None:
        provider = MagicMock()
        provider.fetch.return_value = content(MUSIC_WORDS, category="Elsewhere")

        puzzle = PuzzleBuilder(provider, seed=3).build_crossword("rock", "easy", ["Music"])

        self.assertEqual(provider.fetch.call_count, 3)
        self.assertEqual(puzzle.grid_size, 5)
        self.assertGreaterEqual(puzzle.placed_count, 1)
        for clue in puzzle.clues:
            self.assertLessEqual(len(clue.answer), 5)

    def test_matching_categories_succeed_first_time(self) -> None:
        provider = MagicMock()
        provider.fetch.return_value = content(MUSIC_WORDS)
        puzzle = PuzzleBuilder(provider, seed=4).build_crossword("rock", "medium", ["music"])
        self.assertEqual(provider.fetch.call_count, 1)
        self.assertEqual(puzzle.to_dict()["gridSize"], 7)

    def test_placement_failure_requests_fresh_content(self) -> None:
        provider = MagicMock()
        provider.fetch.return_value = content(MUSIC_WORDS)
        with patch(
            "puzzlegrid.engine.builder.CrosswordPlacer.generate",
            side_effect=PlacementFailure("nothing placed"),
        ):
            with self.assertRaises(ContentExhaustedError):
                PuzzleBuilder(provider).build_crossword("rock", "hard", ["Music"])
        self.assertEqual(provider.fetch.call_count, 3)


if __name__ == "__main__":  # pragma: no cover
    unittest.main()
