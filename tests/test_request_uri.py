"""Tests for request URI parsing."""

from tldserve.services.request_uri import extract_path


class TestExtractPath:
    def test_drops_query_and_decodes(self) -> None:
        assert extract_path("/foo%20bar?x=1") == "/foo bar"

    def test_splits_on_first_question_mark(self) -> None:
        assert extract_path("/a?b=1?c=2") == "/a"

    def test_plus_is_not_a_space(self) -> None:
        assert extract_path("/a+b") == "/a+b"

    def test_decoded_question_mark_is_kept(self) -> None:
        assert extract_path("/what%3F") == "/what?"

    def test_malformed_escape_passes_through(self) -> None:
        assert extract_path("/100%zz") == "/100%zz"

    def test_utf8_escapes(self) -> None:
        assert extract_path("/caf%C3%A9") == "/café"

    def test_root(self) -> None:
        assert extract_path("/") == "/"
        assert extract_path("/?") == "/"
