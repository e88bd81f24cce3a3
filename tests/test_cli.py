import json
import tempfile
import unittest
from pathlib import Path

from main import build_parser, main, parse_word_entry, parse_words_file


class CliTests(unittest.TestCase):
    def test_parse_word_entry_splits_clue(self) -> None:
        candidate = parse_word_entry("GUITAR: Six strings")
        self.assertEqual((candidate.word, candidate.clue), ("GUITAR", "Six strings"))
        self.assertEqual(parse_word_entry("DRUMS").clue, "")

    def test_parse_words_file_skips_comments(self) -> None:
        with tempfile.TemporaryDirectory() as tmpdir:
            path = Path(tmpdir) / "words.txt"
            path.write_text("# music\nGUITAR:Strings\n\nDRUMS\n", encoding="utf-8")
            self.assertEqual(parse_words_file(path), ["GUITAR:Strings", "DRUMS"])

    def test_wordsearch_writes_json(self) -> None:
        with tempfile.TemporaryDirectory() as tmpdir:
            output = Path(tmpdir) / "out.json"
            main([
                "wordsearch", "--words", "CAT", "DOG", "BIRD",
                "--grid-size", "8", "--directions", "right", "down",
                "--seed", "5", "--output", str(output), "--log-level", "WARNING",
            ])
            payload = json.loads(output.read_text(encoding="utf-8"))
        self.assertEqual(len(payload["grid"]), 8)
        self.assertEqual(sorted(w["word"] for w in payload["placedWords"]), ["BIRD", "CAT", "DOG"])
        self.assertEqual(payload["validation"], [])

    def test_crossword_reads_content_file(self) -> None:
        content = {
            "title": "Band Night",
            "words": [
                {"word": "guitar", "clue": "Strings", "category": "Music", "difficulty": 1},
                {"word": "drums", "clue": "Beat", "category": "Music", "difficulty": 1},
                {"word": "tune", "clue": "Melody", "category": "Music", "difficulty": 1},
            ],
            "funFact": "Loud.",
        }
        with tempfile.TemporaryDirectory() as tmpdir:
            source = Path(tmpdir) / "content.json"
            source.write_text(json.dumps(content), encoding="utf-8")
            output = Path(tmpdir) / "out.json"
            main([
                "crossword", "--content-file", str(source), "--difficulty", "medium",
                "--seed", "1", "--output", str(output), "--log-level", "WARNING",
            ])
            payload = json.loads(output.read_text(encoding="utf-8"))
        self.assertEqual(payload["title"], "Band Night")
        self.assertEqual(len(payload["grid"]), 7)
        self.assertGreaterEqual(payload["placedCount"], 1)
        self.assertEqual(payload["validation"], [])

    def test_requires_some_words(self) -> None:
        with self.assertRaises(SystemExit):
            main(["wordsearch", "--log-level", "WARNING"])

    def test_unplaceable_crossword_exits_nonzero(self) -> None:
        with self.assertRaises(SystemExit) as ctx:
            main(["crossword", "--words", "ABCDEFGHIJ", "--grid-size", "5", "--log-level", "ERROR"])
        self.assertEqual(ctx.exception.code, 1)

    def test_malformed_content_file_is_a_usage_error(self) -> None:
        with tempfile.TemporaryDirectory() as tmpdir:
            source = Path(tmpdir) / "content.json"
            source.write_text("Sorry, I can't help with that.", encoding="utf-8")
            with self.assertRaises(SystemExit) as ctx:
                main(["wordsearch", "--content-file", str(source), "--log-level", "ERROR"])
        self.assertEqual(ctx.exception.code, 2)

    def test_zero_min_words_is_respected(self) -> None:
        with tempfile.TemporaryDirectory() as tmpdir:
            output = Path(tmpdir) / "out.json"
            with self.assertNoLogs("puzzlegrid.cli", level="WARNING"):
                main([
                    "wordsearch", "--words", "CAT", "--min-words", "0",
                    "--difficulty", "easy", "--seed", "2", "--output", str(output),
                ])
            payload = json.loads(output.read_text(encoding="utf-8"))
        self.assertEqual([w["word"] for w in payload["placedWords"]], ["CAT"])

    def test_parser_rejects_unknown_direction(self) -> None:
        with self.assertRaises(SystemExit):
            build_parser().parse_args(["wordsearch", "--directions", "sideways"])


if __name__ == "__main__":  # pragma: no cover
    unittest.main()
