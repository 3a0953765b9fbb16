from __future__ import annotations

import io
import unittest
import urllib.error
from email.message import Message
from unittest.mock import patch

from shaderprep.errors import ReadError
from shaderprep.loading import IncludeResolver, MemoryLoader, UrlLoader


class _FakeResponse(io.BytesIO):
    def __init__(self, body: bytes, charset: str | None = None) -> None:
        super().__init__(body)
        self.headers = Message()
        if charset:
            self.headers["Content-Type"] = f"text/plain; charset={charset}"


class MemoryLoaderTests(unittest.TestCase):
    def test_keys_are_normalized(self) -> None:
        loader = MemoryLoader({"lib/./a.glsl": "a"})
        loader.add("lib/x/../b.glsl", "b")
        self.assertEqual(loader("lib/a.glsl"), "a")
        self.assertEqual(loader("lib/b.glsl"), "b")
        self.assertIn("lib/b.glsl", loader)

    def test_missing_key(self) -> None:
        with self.assertRaises(ReadError):
            MemoryLoader()("nope")


class UrlLoaderTests(unittest.TestCase):
    def test_fetch_builds_url_and_decodes(self) -> None:
        with patch("urllib.request.urlopen", return_value=_FakeResponse("é".encode("latin-1"), "latin-1")) as m:
            text = UrlLoader("https", user_agent="shaderprep-test")("example.com/lib/a.glsl")
        self.assertEqual(text, "é")
        req = m.call_args[0][0]
        self.assertEqual(req.full_url, "https://example.com/lib/a.glsl")
        self.assertEqual(req.get_header("User-agent"), "shaderprep-test")

    def test_network_errors_become_read_errors(self) -> None:
        with patch("urllib.request.urlopen", side_effect=urllib.error.URLError("offline")):
            with self.assertRaises(ReadError) as cm:
                UrlLoader("http")("example.com/a")
        self.assertIn("http://example.com/a", str(cm.exception))

    def test_relative_includes_over_http(self) -> None:
        pages = {
            "https://example.com/shaders/main.frag": b'#include_once "lib/noise.glsl"\nmain',
            "https://example.com/shaders/lib/noise.glsl": b"noise",
        }

        def fake_urlopen(req, timeout=None, context=None):
            return _FakeResponse(pages[req.full_url])

        resolver = IncludeResolver()
        resolver.register("https", UrlLoader("https"))
        with patch("urllib.request.urlopen", side_effect=fake_urlopen):
            merged = resolver.resolve("https://example.com/shaders/main.frag")
        self.assertEqual(merged.text(), "noise\nmain")
        self.assertEqual(merged.file_and_line_at(1), ("https://example.com/shaders/main.frag", 1))


if __name__ == "__main__":
    unittest.main()
