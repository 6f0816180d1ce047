"""
Span parser tests.

Validates parsing of sub-spans with absolute offsets and the debug records
emitted when member spans are resolved.
"""

import logging

import pytest

from jsonstack._config import ParseConfig
from jsonstack._driver import SpanParser
from jsonstack._errors import UnexpectedEOF
from jsonstack._errors import UnexpectedToken


def test_span_parses_only_its_range() -> None:
    """
    Validates a span ignores text outside its bounds.
    """
    doc = 'xx [1, "a"] yy'
    assert SpanParser(doc, 2, 11).parse() == [1.0, "a"]


def test_span_errors_use_document_offsets() -> None:
    """
    Validates errors inside a span report offsets into the whole document.
    """
    doc = "garbage [1 2]"
    with pytest.raises(UnexpectedToken) as exc_info:
        SpanParser(doc, 8, len(doc)).parse()
    assert exc_info.value.pos == 11
    assert exc_info.value.doc is doc


def test_truncated_span_reports_document_length() -> None:
    """
    Validates end of input is reported against the whole document.
    """
    doc = "[1, [2, 3]"
    with pytest.raises(UnexpectedEOF) as exc_info:
        SpanParser(doc, 4, 6).parse()
    assert exc_info.value.pos == len(doc)


def test_config_reaches_nested_spans() -> None:
    """
    Validates hooks apply at every nesting level.
    """
    config = ParseConfig(parse_float=int, object_hook=lambda d: tuple(d))
    assert SpanParser('[{"a": 1}, [2]]', config=config).parse() == [
        ("a",),
        [2],
    ]


def test_member_resolution_logged(caplog: pytest.LogCaptureFixture) -> None:
    """
    Validates debug records at member span boundaries.
    """
    with caplog.at_level(logging.DEBUG, logger="jsonstack._driver"):
        SpanParser("[1, 22]").parse()

    messages = [record.getMessage() for record in caplog.records]
    assert "resolving member span [1, 2)" in messages
    assert "resolving member span [3, 6)" in messages


def test_eof_translation_logged(caplog: pytest.LogCaptureFixture) -> None:
    """
    Validates the record left when a truncated member meets its delimiter.
    """
    with caplog.at_level(logging.DEBUG, logger="jsonstack._driver"):
        with pytest.raises(UnexpectedToken):
            SpanParser("[tru]").parse()

    assert any(
        record.getMessage() == "member span [1, 4) ended early at ']'"
        for record in caplog.records
    )


def test_no_records_above_debug(caplog: pytest.LogCaptureFixture) -> None:
    """
    Validates normal parsing is silent at INFO.
    """
    with caplog.at_level(logging.INFO, logger="jsonstack._driver"):
        SpanParser('{"a": [1, 2]}').parse()
    assert caplog.records == []
