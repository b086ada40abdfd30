# topmark:header:start
#
#   project      : Pastex
#   file         : documents.py
#   file_relpath : src/pastex/codecs/documents.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Codecs for opaque document formats: Markdown, plain text, HTML and SQL.

Documents are never turned into structured data; parsing returns the text
itself. HTML and SQL can still be beautified and minified as text.
"""

from __future__ import annotations

import re
from typing import TYPE_CHECKING, Final

from bs4 import BeautifulSoup
from bs4.builder import ParserRejectedMarkup
from bs4.dammit import EntitySubstitution
from bs4.formatter import HTMLFormatter
import sqlparse
from sqlparse.exceptions import SQLParseError

from pastex.codecs.base import Codec
from pastex.codecs.registry import register_codec
from pastex.config.logging import get_logger
from pastex.formats.base import FormatId

if TYPE_CHECKING:
    from pastex.config.logging import PastexLogger
    from pastex.config.model import RenderOptions
    from pastex.core.values import StructuredValue

logger: PastexLogger = get_logger(__name__)

_HTML_COMMENT_RE: Final[re.Pattern[str]] = re.compile(r"<!--[\s\S]*?-->")
_INTER_TAG_WS_RE: Final[re.Pattern[str]] = re.compile(r">\s+<")
_WS_RUN_RE: Final[re.Pattern[str]] = re.compile(r"\s+")
_SQL_LINE_COMMENT_RE: Final[re.Pattern[str]] = re.compile(r"--.*$", re.MULTILINE)
_SQL_BLOCK_COMMENT_RE: Final[re.Pattern[str]] = re.compile(r"/\*[\s\S]*?\*/")


def _html_formatter(options: RenderOptions) -> HTMLFormatter:
    # Same escaping as the "minimal" formatter, with a configurable indent.
    return HTMLFormatter(
        entity_substitution=EntitySubstitution.substitute_xml, indent=options.indent
    )


@register_codec(FormatId.MARKDOWN)
class MarkdownCodec(Codec):
    """Markdown is kept as-is."""


@register_codec(FormatId.TEXT)
class TextCodec(Codec):
    """Plain text, the classifier's fallback."""


class _TextOnlyCodec(Codec):
    """Base for formats that are beautified as text but never dumped from values."""

    def dump(self, value: StructuredValue, options: RenderOptions) -> str:
        if isinstance(value, str):
            return self.dump_text(value, options)
        return ""


@register_codec(FormatId.HTML)
class HtmlCodec(_TextOnlyCodec):
    """HTML, prettified with BeautifulSoup's builtin parser."""

    def dump_text(self, text: str, options: RenderOptions) -> str:
        try:
            soup = BeautifulSoup(text, "html.parser")
            return soup.prettify(formatter=_html_formatter(options)).rstrip("\n")
        except (ParserRejectedMarkup, RecursionError) as exc:
            logger.debug("Cannot reformat html text, returning it unchanged: %s", exc)
            return text

    def minify(self, text: str) -> str:
        out: str = _HTML_COMMENT_RE.sub("", text)
        out = _INTER_TAG_WS_RE.sub("><", out)
        return _WS_RUN_RE.sub(" ", out).strip()


@register_codec(FormatId.SQL)
class SqlCodec(_TextOnlyCodec):
    """SQL, reindented with sqlparse.

    Comments are removed by `minify`, string literals are not inspected, so a
    ``--`` inside a quoted string is treated as a comment.
    """

    def dump_text(self, text: str, options: RenderOptions) -> str:
        try:
            formatted: str = sqlparse.format(
                text,
                reindent=True,
                keyword_case=options.sql_keyword_case,
                indent_width=options.indent or 2,
            )
        except (SQLParseError, RecursionError) as exc:
            # sqlparse caps grouping depth and token count on large or deeply nested input
            logger.debug("Cannot reformat sql text, returning it unchanged: %s", exc)
            return text
        return formatted.strip()

    def minify(self, text: str) -> str:
        out: str = _SQL_LINE_COMMENT_RE.sub("", text)
        out = _SQL_BLOCK_COMMENT_RE.sub("", out)
        return _WS_RUN_RE.sub(" ", out).strip()
