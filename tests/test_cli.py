import io
import json
import tempfile
import unittest
from contextlib import redirect_stderr, redirect_stdout
from pathlib import Path

from letterpuzzle.cli import main

WORDS = ["cat", "car", "at", "art", "tar", "rat", "tea", "eat", "ate", "ear", "era", "are"]


class CliTests(unittest.TestCase):
    def setUp(self) -> None:
        self._tmpdir = tempfile.TemporaryDirectory()
        self.addCleanup(self._tmpdir.cleanup)
        self.words_path = Path(self._tmpdir.name) / "words.json"
        self.words_path.write_text(json.dumps(WORDS), encoding="utf-8")

    def run_cli(self, *argv: str):
        stdout = io.StringIO()
        with redirect_stdout(stdout):
            code = main(list(argv))
        return code, stdout.getvalue()

    def test_json_output(self) -> None:
        code, out = self.run_cli(
            "--words", str(self.words_path), "--size", "5", "--cycles", "80", "--seed", "3", "--json"
        )
        self.assertEqual(code, 0)
        payload = json.loads(out)
        self.assertEqual(payload["size"], 5)
        self.assertEqual(len(payload["grid"]), 5)
        self.assertEqual(payload["boards_generated"], 1)
        self.assertEqual(payload["placements"], len(payload["words"]))
        self.assertGreater(payload["placements"], 0)

    def test_board_output_and_file(self) -> None:
        output = Path(self._tmpdir.name) / "out.json"
        code, out = self.run_cli(
            "--words", str(self.words_path), "--size", "5", "--cycles", "50", "--seed", "1",
            "--output", str(output),
        )
        self.assertEqual(code, 0)
        self.assertTrue(out.startswith("+-----+"))
        self.assertIn("--- Grid ---", out)
        self.assertEqual(json.loads(output.read_text(encoding="utf-8"))["size"], 5)

    def test_size_below_minimum_is_rejected(self) -> None:
        with redirect_stderr(io.StringIO()):
            with self.assertRaises(SystemExit) as ctx:
                main(["--words", str(self.words_path), "--size", "3"])
        self.assertEqual(ctx.exception.code, 2)

    def test_unusable_lexicon_is_rejected(self) -> None:
        self.words_path.write_text('{"not": "a list"}', encoding="utf-8")
        with redirect_stderr(io.StringIO()):
            with self.assertRaises(SystemExit):
                main(["--words", str(self.words_path)])

    def test_missing_source_is_rejected(self) -> None:
        with redirect_stderr(io.StringIO()):
            with self.assertRaises(SystemExit):
                main(["--words", str(Path(self._tmpdir.name) / "absent.json")])

    def test_zero_search_budget_reports_no_board(self) -> None:
        with redirect_stderr(io.StringIO()):
            code, out = self.run_cli(
                "--words", str(self.words_path), "--size", "5", "--cycles", "10", "--search-seconds", "0"
            )
        self.assertEqual(code, 1)
        self.assertEqual(out, "")

    def test_search_output(self) -> None:
        code, out = self.run_cli(
            "--words", str(self.words_path), "--size", "5", "--cycles", "20",
            "--search-seconds", "0.1", "--seed", "2", "--json",
        )
        self.assertEqual(code, 0)
        self.assertGreaterEqual(json.loads(out)["boards_generated"], 1)


if __name__ == "__main__":  # pragma: no cover
    unittest.main()
