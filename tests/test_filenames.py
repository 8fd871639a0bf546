"""Tests for URL → file name sanitization."""

from __future__ import annotations

import httpx
import pytest
import respx

from pagestrip.scraper.filenames import MAX_FILENAME_BYTES, sanitize_filename
from pagestrip.scraper.saver import save_page

_LONG_URL = "https://example.com/search?q=" + "a" * 300


class TestSanitizeFilename:
    def test_query_url(self) -> None:
        assert sanitize_filename("https://example.com/a?b=c") == "https_example.comab_c.unknown"

    def test_bare_host_keeps_tld_as_extension(self) -> None:
        assert sanitize_filename("https://example.com") == "https_example.com"

    def test_page_extension_kept(self) -> None:
        assert sanitize_filename("https://example.com/index.html") == "https_example.comindex.html"

    def test_trailing_slash_gets_unknown_extension(self) -> None:
        assert sanitize_filename("http://example.com/docs/") == "http_example.comdocs.unknown"

    def test_accents_folded(self) -> None:
        assert sanitize_filename("https://example.com/café") == "https_example.comcafe.unknown"

    def test_joining_characters_become_underscores(self) -> None:
        assert sanitize_filename("a b&c+d") == "a_b_c_d.unknown"

    @pytest.mark.parametrize(
        "url",
        [
            "https://example.com/a?b=c",
            "https://user:pw@example.com:8080/p/a/t/h?x=1&y=2#frag",
            "http://example.com/..%2F..%2Fetc%2Fpasswd",
            "https://例え.jp/パス",
            "https://example.com/a\\b*c|d<e>f\"g",
        ],
    )
    def test_result_is_a_single_safe_component(self, url: str) -> None:
        name = sanitize_filename(url)
        assert name
        assert name not in {".", ".."}
        for hazard in "/\\?&=: *|<>\"#%":
            assert hazard not in name

    @pytest.mark.parametrize(
        ("url", "expected"),
        [
            ("https://example.com/straße", "https_example.comstrasse.unknown"),
            ("https://example.com/Ærø", "https_example.comAEro.unknown"),
            ("https://example.com/łódź", "https_example.comlodz.unknown"),
        ],
    )
    def test_letters_without_decomposition_transliterated(self, url: str, expected: str) -> None:
        assert sanitize_filename(url) == expected

    def test_long_url_trimmed_to_filesystem_limit(self) -> None:
        name = sanitize_filename(_LONG_URL)
        assert len(name.encode("utf-8")) <= MAX_FILENAME_BYTES
        assert name.startswith("https_example.comsearchq")
        assert name.endswith(".unknown")

    def test_long_extension_trimmed_to_filesystem_limit(self) -> None:
        name = sanitize_filename("https://example.com/file." + "x" * 400)
        assert len(name.encode("utf-8")) <= MAX_FILENAME_BYTES

    def test_long_url_can_be_saved(self, tmp_path) -> None:
        with respx.mock:
            respx.get(_LONG_URL).mock(return_value=httpx.Response(200, content=b"<p>x</p>"))
            saved = save_page(_LONG_URL, output_dir=tmp_path)

        assert saved.path.exists()
        assert len(saved.path.name.encode("utf-8")) <= MAX_FILENAME_BYTES
