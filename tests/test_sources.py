import tempfile
import unittest
from pathlib import Path
from unittest.mock import MagicMock, patch

import requests

from letterpuzzle.core.exceptions import WordSourceError
from letterpuzzle.data.sources import is_url, load_words, parse_json_words, parse_text_words


class ParseTests(unittest.TestCase):
    def test_json_array_keeps_order_and_duplicates(self) -> None:
        self.assertEqual(parse_json_words('["b", "a", "b"]'), ["b", "a", "b"])

    def test_json_non_array_degrades_to_empty(self) -> None:
        self.assertEqual(parse_json_words('{"words": ["a"]}'), [])
        self.assertEqual(parse_json_words('["a", 3]'), [])
        self.assertEqual(parse_json_words("not json"), [])

    def test_text_skips_blank_lines_and_comments(self) -> None:
        text = "# header\ncat\n\n  dog  \n#skip\n"
        self.assertEqual(parse_text_words(text), ["cat", "dog"])


class LoadWordsTests(unittest.TestCase):
    def test_missing_file_raises(self) -> None:
        with self.assertRaises(WordSourceError):
            load_words(Path("/nonexistent/words.json"))

    def test_suffix_selects_format(self) -> None:
        with tempfile.TemporaryDirectory() as tmpdir:
            json_path = Path(tmpdir) / "words.json"
            json_path.write_text('["cat", "dog"]', encoding="utf-8")
            text_path = Path(tmpdir) / "words.txt"
            text_path.write_text("cat\ndog\n", encoding="utf-8")
            self.assertEqual(load_words(json_path), ["cat", "dog"])
            self.assertEqual(load_words(text_path), ["cat", "dog"])

    def test_url_source_is_fetched(self) -> None:
        response = MagicMock()
        response.text = '["tea", "eat"]'
        with patch("letterpuzzle.data.sources.requests.get", return_value=response) as get:
            words = load_words("https://example.com/data/words.json", timeout_seconds=5.0)
        get.assert_called_once_with("https://example.com/data/words.json", timeout=5.0)
        response.raise_for_status.assert_called_once()
        self.assertEqual(words, ["tea", "eat"])

    def test_url_failure_raises_word_source_error(self) -> None:
        with patch(
            "letterpuzzle.data.sources.requests.get",
            side_effect=requests.ConnectionError("boom"),
        ):
            with self.assertRaises(WordSourceError):
                load_words("http://example.com/words.txt")

    def test_is_url(self) -> None:
        self.assertTrue(is_url("https://example.com/words.json"))
        self.assertFalse(is_url("data/words.json"))
        self.assertFalse(is_url(Path("data/words.json")))


if __name__ == "__main__":  # pragma: no cover
    unittest.main()
