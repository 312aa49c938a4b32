"""Tests for parser detection."""

import core.analyze  # noqa: F401  (registers all parsers)
from core.parsers import (
    detect_parser,
    detect_parser_by_content,
    get_all_parsers,
    get_supported_formats,
)
from core.parsers.csv_poll import CsvPollParser
from core.parsers.html_table import HtmlTablePollParser
from core.parsers.json_poll import JsonPollParser


class TestDetectParser:

    def test_detects_by_extension(self):
        assert isinstance(detect_parser("lunch.json"), JsonPollParser)
        assert isinstance(detect_parser("lunch.csv"), CsvPollParser)
        assert isinstance(detect_parser("lunch.html"), HtmlTablePollParser)

    def test_returns_none_for_unknown_extension(self):
        assert detect_parser("lunch.xlsx") is None
        assert detect_parser("lunch") is None

    def test_all_formats_registered_once(self):
        parsers = get_all_parsers()
        assert len(parsers) == len(set(parsers))
        assert {JsonPollParser, CsvPollParser, HtmlTablePollParser} <= set(parsers)

    def test_supported_formats_lists_extensions(self):
        formats = get_supported_formats()
        assert "JSON (.json)" in formats
        assert "CSV (.csv)" in formats
        assert "HTML table (.html, .htm)" in formats


class TestDetectParserByContent:

    def test_detects_json(self, lunch_json):
        assert isinstance(detect_parser_by_content(lunch_json, "upload"), JsonPollParser)

    def test_detects_csv(self, lunch_csv):
        assert isinstance(detect_parser_by_content(lunch_csv, "upload"), CsvPollParser)

    def test_detects_html(self, lunch_html):
        assert isinstance(detect_parser_by_content(lunch_html, "upload"), HtmlTablePollParser)

    def test_returns_none_for_plain_html(self):
        parser = detect_parser_by_content(
            b"<html><body>Hello world</body></html>", "page"
        )
        assert parser is None

    def test_returns_none_for_empty_content(self):
        assert detect_parser_by_content(b"", "empty") is None
