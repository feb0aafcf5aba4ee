import tempfile
import unittest
from pathlib import Path
from unittest.mock import MagicMock, patch

import requests

from minicross.core.exceptions import WordPoolError
from minicross.core.models import Word
from minicross.data.normalization import clean_word
from minicross.data.word_pool import FileWordPool, HttpWordPool, StaticWordPool
from minicross.io.pool_client import WordPoolAPIError, WordPoolClient


class NormalizationTests(unittest.TestCase):
    def test_clean_word_strips_accents_and_symbols(self) -> None:
        self.assertEqual(clean_word("café"), "CAFE")
        self.assertEqual(clean_word("ice-cream 2"), "ICECREAM")
        self.assertEqual(clean_word(""), "")


class StaticWordPoolTests(unittest.TestCase):
    def test_accepts_mixed_entry_shapes(self) -> None:
        pool = StaticWordPool(["cat:Feline", ("dog", " Canine "), Word("emu", "Big bird"), "yak"])
        self.assertEqual(
            pool.entries(),
            [
                Word("CAT", "Feline"),
                Word("DOG", "Canine"),
                Word("EMU", "Big bird"),
                Word("YAK", ""),
            ],
        )

    def test_drops_entries_too_short_after_cleaning(self) -> None:
        pool = StaticWordPool(["a:Article", "7:Number", "ox:Bovine"])
        self.assertEqual([w.text for w in pool.entries()], ["OX"])


class FileWordPoolTests(unittest.TestCase):
    def test_reads_entries_and_skips_comments(self) -> None:
        with tempfile.TemporaryDirectory() as tmpdir:
            path = Path(tmpdir) / "pool.txt"
            path.write_text(
                "# animals\n"
                "CAT:Feline\n"
                "\n"
                "  dog : Canine  \n"
                "OWL\n",
                encoding="utf-8",
            )
            entries = FileWordPool(path).entries()
        self.assertEqual(
            entries,
            [Word("CAT", "Feline"), Word("DOG", "Canine"), Word("OWL", "")],
        )

    def test_missing_file_raises(self) -> None:
        with self.assertRaises(WordPoolError):
            FileWordPool("/nonexistent/pool.txt").entries()


class HttpWordPoolTests(unittest.TestCase):
    def _response(self, payload):
        response = MagicMock()
        response.json.return_value = payload
        response.raise_for_status.return_value = None
        return response

    def test_fetches_list_payload(self) -> None:
        client = WordPoolClient(base_url="https://words.example/api/")
        payload = [{"word": "cat", "clue": "Feline"}, {"word": "dog"}, {"clue": "orphan"}]
        with patch("minicross.io.pool_client.requests.get", return_value=self._response(payload)) as get:
            entries = HttpWordPool(client).entries()
        self.assertEqual(entries, [Word("CAT", "Feline"), Word("DOG", "")])
        self.assertEqual(get.call_args.args[0], "https://words.example/api/words")

    def test_fetches_wrapped_payload_with_api_key(self) -> None:
        with patch.dict("os.environ", {"MINICROSS_POOL_API_KEY": "secret"}):
            client = WordPoolClient(base_url="https://words.example")
        payload = {"words": [{"word": "owl", "clue": "Night bird"}]}
        with patch("minicross.io.pool_client.requests.get", return_value=self._response(payload)) as get:
            pairs = client.fetch_pairs(limit=10)
        self.assertEqual(pairs, [("owl", "Night bird")])
        self.assertEqual(get.call_args.kwargs["headers"], {"Authorization": "Bearer secret"})
        self.assertEqual(get.call_args.kwargs["params"], {"limit": 10})

    def test_empty_payload_raises(self) -> None:
        client = WordPoolClient(base_url="https://words.example")
        with patch("minicross.io.pool_client.requests.get", return_value=self._response({"words": []})):
            with self.assertRaises(WordPoolAPIError):
                client.fetch_pairs()

    def test_http_error_is_wrapped(self) -> None:
        client = WordPoolClient(base_url="https://words.example")
        response = MagicMock()
        response.raise_for_status.side_effect = requests.HTTPError("503 Server Error")
        with patch("minicross.io.pool_client.requests.get", return_value=response):
            with self.assertRaises(WordPoolError):
                client.fetch_pairs()

    def test_missing_url_raises(self) -> None:
        with patch.dict("os.environ", {}, clear=True):
            with self.assertRaises(WordPoolAPIError):
                WordPoolClient()


if __name__ == "__main__":  # pragma: no cover
    unittest.main()
