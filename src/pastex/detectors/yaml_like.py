# topmark:header:start
#
#   project      : Pastex
#   file         : yaml_like.py
#   file_relpath : src/pastex/detectors/yaml_like.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Heuristic detector for YAML that a strict parser rejected.

Broken YAML should still classify as YAML so that the error reported to the user
is the YAML parser's diagnostic rather than a generic "plain text". The
heuristic requires:

- a line shaped like ``key:`` (bare word/hyphen key, or a single/double quoted
  key, then a colon followed by whitespace or end of line),
- a newline (multi-line input), and
- at least two colons overall **or** a line indented by two or more spaces.

The last two conditions keep prose such as ``Note: remember the milk`` out.
"""

from __future__ import annotations

import re
from typing import Final

_KEY_LINE_RE: Final[re.Pattern[str]] = re.compile(
    r"""^[ \t]*(?:"[^"\n]*"|'[^'\n]*'|[\w-]+)[ \t]*:(?:[ \t]|$)""",
    re.MULTILINE,
)
_INDENTED_LINE_RE: Final[re.Pattern[str]] = re.compile(r"^ {2,}\S", re.MULTILINE)


def looks_like_yaml(text: str) -> bool:
    """Return True when ``text`` is shaped like (possibly broken) block YAML."""
    if "\n" not in text:
        return False
    if _KEY_LINE_RE.search(text) is None:
        return False
    return text.count(":") >= 2 or _INDENTED_LINE_RE.search(text) is not None
