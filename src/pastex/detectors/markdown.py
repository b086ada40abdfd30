# topmark:header:start
#
#   project      : Pastex
#   file         : markdown.py
#   file_relpath : src/pastex/detectors/markdown.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Markdown detector based on a fixed set of signals.

Text is Markdown when a *block-level* signal matches (header, list, blockquote,
fenced code block) or when at least two signals of any kind match. A lone
``**bold**`` or a single inline code span is not enough.
"""

from __future__ import annotations

import re
from typing import Final, NamedTuple


class MarkdownSignal(NamedTuple):
    """A named Markdown pattern and whether it is block-level."""

    name: str
    pattern: re.Pattern[str]
    block: bool


SIGNALS: Final[tuple[MarkdownSignal, ...]] = (
    MarkdownSignal("header", re.compile(r"^#{1,6}\s", re.MULTILINE), True),
    MarkdownSignal("bullet_list", re.compile(r"^[-*+]\s", re.MULTILINE), True),
    MarkdownSignal("numbered_list", re.compile(r"^\d+\.\s", re.MULTILINE), True),
    MarkdownSignal("blockquote", re.compile(r"^>\s", re.MULTILINE), True),
    MarkdownSignal("fenced_code", re.compile(r"```[\s\S]*?```"), True),
    MarkdownSignal("link", re.compile(r"\[.+?\]\(.+?\)"), False),
    MarkdownSignal("bold", re.compile(r"\*\*.+?\*\*"), False),
    MarkdownSignal("bold_underscore", re.compile(r"__.+?__"), False),
    MarkdownSignal("inline_code", re.compile(r"`[^`\n]+?`"), False),
)


def markdown_signals(text: str) -> list[MarkdownSignal]:
    """Return the signals that match ``text``."""
    return [s for s in SIGNALS if s.pattern.search(text)]


def looks_like_markdown(text: str) -> bool:
    """True for one block-level signal or two signals of any kind."""
    found: list[MarkdownSignal] = markdown_signals(text)
    return any(s.block for s in found) or len(found) >= 2
