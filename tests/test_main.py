import io
import json
import logging
import tempfile
import unittest
from contextlib import redirect_stderr, redirect_stdout
from pathlib import Path

from main import NO_SOLUTION_MESSAGE, main


class MainCliTests(unittest.TestCase):
    def run_cli(self, *argv: str):
        stdout = io.StringIO()
        stderr = io.StringIO()
        with redirect_stdout(stdout), redirect_stderr(stderr):
            code = main(["--log-level", "ERROR", *argv])
        return code, stdout.getvalue()

    def tearDown(self) -> None:
        logging.getLogger().setLevel(logging.WARNING)

    def test_writes_json_solution(self) -> None:
        with tempfile.TemporaryDirectory() as tmpdir:
            output = Path(tmpdir) / "puzzle.json"
            code, _ = self.run_cli("cat", "car", "--size-x", "5", "--size-y", "5", "--output", str(output))
            self.assertEqual(code, 0)
            payload = json.loads(output.read_text(encoding="utf-8"))
        self.assertGreaterEqual(payload["score"], 1)
        self.assertEqual(payload["words"], ["CAT", "CAR"])
        self.assertEqual(payload["validation"], [])
        self.assertFalse(payload["truncated"])
        self.assertEqual(len(payload["placements"]), 2)

    def test_prints_grid_and_stats(self) -> None:
        code, stdout = self.run_cli("cat", "car", "--size-x", "5", "--size-y", "5")
        self.assertEqual(code, 0)
        self.assertIn("--- Words ---", stdout)
        self.assertIn("[C]", stdout)

    def test_reads_words_file(self) -> None:
        with tempfile.TemporaryDirectory() as tmpdir:
            words = Path(tmpdir) / "words.txt"
            words.write_text("# pets\ncat\ncar\n", encoding="utf-8")
            code, stdout = self.run_cli("--words-file", str(words), "--size-x", "5", "--size-y", "5")
        self.assertEqual(code, 0)
        self.assertIn("Crosses:", stdout)

    def test_unplaceable_words_report_failure(self) -> None:
        code, stdout = self.run_cli("abc", "def", "ghi", "--size-x", "3", "--size-y", "3")
        self.assertEqual(code, 1)
        self.assertIn(NO_SOLUTION_MESSAGE, stdout)

    def test_word_longer_than_grid_is_refused(self) -> None:
        with self.assertRaises(SystemExit):
            self.run_cli("elephant", "--size-x", "5", "--size-y", "5")

    def test_short_word_is_refused(self) -> None:
        with self.assertRaises(SystemExit):
            self.run_cli("cat", "ox")

    def test_missing_words_is_refused(self) -> None:
        with self.assertRaises(SystemExit):
            self.run_cli()

    def test_non_positive_size_is_refused(self) -> None:
        with self.assertRaises(SystemExit):
            self.run_cli("cat", "--size-x", "0")


if __name__ == "__main__":  # pragma: no cover
    unittest.main()
