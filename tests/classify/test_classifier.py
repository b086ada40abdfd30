# topmark:header:start
#
#   project      : Pastex
#   file         : test_classifier.py
#   file_relpath : tests/classify/test_classifier.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for the format classifier cascade."""

from __future__ import annotations

import pytest

from pastex.classifier import STAGES, classify
from pastex.formats.base import FormatId
from tests.conftest import parametrize


@parametrize(
    "text, expected",
    [
        ('{"a": 1}', FormatId.JSON),
        ("[1, 2, 3]", FormatId.JSON),
        ('  \n {"nested": {"list": [true, null]}}\n', FormatId.JSON),
        ("<!DOCTYPE html><html><body>x</body></html>", FormatId.HTML),
        ('<html lang="en"><p>hi</p></html>', FormatId.HTML),
        ('<root><item id="1">a</item></root>', FormatId.XML),
        ('title = "x"\n[owner]\nname = "y"', FormatId.TOML),
        ("a = 1", FormatId.TOML),
        ("name: pastex\nversion: 1", FormatId.YAML),
        ("- a\n- b", FormatId.YAML),
        ("FOO=bar\nBAZ=qux", FormatId.ENV),
        ("# settings\nFOO=bar\n\nBAZ=qux", FormatId.ENV),
        ("[server]\nhost=localhost\nport=8080", FormatId.INI),
        ("SELECT id, name FROM users", FormatId.SQL),
        ("drop table users;", FormatId.SQL),
        ("# Title\n\nSome prose.", FormatId.MARKDOWN),
        ("See **bold** and `code` here", FormatId.MARKDOWN),
        ("Hello world", FormatId.TEXT),
    ],
)
def test_classify_examples(text: str, expected: FormatId) -> None:
    """Representative inputs land on the expected format."""
    assert classify(text) is expected


@parametrize("text", ["", "   ", "\n\t\n"])
def test_empty_input_is_text(text: str) -> None:
    """Empty and whitespace-only input is plain text."""
    assert classify(text) is FormatId.TEXT


def test_json_is_checked_before_yaml() -> None:
    """Flow-style YAML that is also JSON is reported as JSON."""
    assert classify('{"a":1}') is FormatId.JSON


def test_non_finite_literals_are_not_json() -> None:
    """NaN is not JSON; the YAML probe then accepts the flow mapping."""
    assert classify('{"a": NaN}') is FormatId.YAML


def test_env_is_checked_before_ini() -> None:
    """Plain assignments are ENV even though INI would parse them too."""
    assert classify("KEY=value\nOTHER=1") is FormatId.ENV


def test_env_value_with_line_separator_character() -> None:
    """U+2028 inside a value does not break the one-assignment-per-line check."""
    assert classify("A=x\u2028y\nB=2") is FormatId.ENV


def test_ini_requires_no_braces() -> None:
    """Text with ``{`` is never probed as INI."""
    assert classify("[a]\nx={y}\nplain line") is not FormatId.INI


def test_broken_yaml_is_still_yaml() -> None:
    """YAML-shaped text that fails to parse is reported as YAML."""
    assert classify("a: 1\n    b: 2\n") is FormatId.YAML


def test_single_line_note_is_not_yaml() -> None:
    """The heuristic needs more than one line."""
    assert classify("Note: this: that") is FormatId.TEXT


def test_sql_matches_whole_words_only() -> None:
    """``selection`` does not contain the SELECT keyword."""
    assert classify("a selection of updates") is FormatId.TEXT


def test_single_inline_markdown_signal_is_text() -> None:
    """One inline signal is not enough for Markdown."""
    assert classify("just **bold** text") is FormatId.TEXT


def test_unparseable_markup_falls_through() -> None:
    """Markup that is neither HTML nor XML continues down the cascade."""
    assert classify("<p>unclosed") is FormatId.TEXT


def test_deeply_nested_input_does_not_raise() -> None:
    """Pathological nesting is absorbed by the probes."""
    text = "[" * 3_000 + "]" * 3_000
    assert isinstance(classify(text), FormatId)


def test_stage_order() -> None:
    """The cascade order is part of the contract."""
    assert [fid for fid, _ in STAGES] == [
        FormatId.JSON,
        FormatId.HTML,
        FormatId.XML,
        FormatId.TOML,
        FormatId.YAML,
        FormatId.YAML,
        FormatId.ENV,
        FormatId.INI,
        FormatId.SQL,
        FormatId.MARKDOWN,
    ]


@pytest.mark.parametrize("fid", list(FormatId))
def test_classify_is_deterministic(fid: FormatId) -> None:
    """Classifying the same text twice gives the same answer."""
    text = f"{fid.value}: sample\n  other: value"
    assert classify(text) is classify(text)
