# topmark:header:start
#
#   project      : Pastex
#   file         : structural.py
#   file_relpath : src/pastex/detectors/structural.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Envelope pre-checks for bracket- and tag-delimited formats."""

from __future__ import annotations

import re
from typing import Final

_HTML_RE: Final[re.Pattern[str]] = re.compile(r"<!DOCTYPE\s+html|<html[\s>]", re.IGNORECASE)

_JSON_ENVELOPES: Final[tuple[tuple[str, str], ...]] = (("{", "}"), ("[", "]"))


def has_json_envelope(text: str) -> bool:
    """True when stripped ``text`` opens and closes with a matching brace or bracket pair."""
    return any(text.startswith(o) and text.endswith(c) for o, c in _JSON_ENVELOPES)


def starts_with_markup(text: str) -> bool:
    """True when stripped ``text`` begins with a tag opener."""
    return text.startswith("<")


def looks_like_html(text: str) -> bool:
    """True when markup carries an HTML doctype or an ``<html>`` element."""
    return _HTML_RE.search(text) is not None
