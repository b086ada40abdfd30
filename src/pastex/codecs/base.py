# topmark:header:start
#
#   project      : Pastex
#   file         : base.py
#   file_relpath : src/pastex/codecs/base.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Codec base class for Pastex's per-format parse/serialize/minify behavior.

A *codec* knows how to **parse** text of one format into a `StructuredValue`,
how to **dump** a value back into canonical text, how to **pretty-print raw
text** it may not be able to parse, and how to **minify** text. The registry
binds one codec instance to each `FormatId` at import time
(``codec.format_id = fid``), and the dispatch layer looks codecs up by format.

The base implementation describes an *opaque document* format (Markdown, plain
text): parsing returns the text itself, dumping passes strings through and
renders anything else as pretty JSON, and minifying is the identity. Data
codecs override `parse` and `dump`; text-only codecs (HTML, SQL) override
`dump_text` and `minify`.

Error contract:
    * `parse` raises `ParseError` carrying the native parser message.
    * `dump` raises `SerializeError` when the value cannot be expressed.
    * `dump_text` and `minify` never raise.
"""

from __future__ import annotations

import json
from typing import TYPE_CHECKING

from pastex.config.logging import get_logger
from pastex.core.errors import ParseError, SerializeError
from pastex.core.outcomes import ProbeResult
from pastex.formats.base import FormatId

if TYPE_CHECKING:
    from pastex.config.logging import PastexLogger
    from pastex.config.model import RenderOptions
    from pastex.core.values import StructuredValue

logger: PastexLogger = get_logger(__name__)


def pretty_json(value: StructuredValue, options: RenderOptions) -> str:
    """Render ``value`` as indented JSON, keeping non-ASCII characters.

    Raises:
        SerializeError: If the value holds something JSON cannot express, including
            NaN and infinite floats.
    """
    try:
        return json.dumps(
            value,
            indent=options.indent,
            ensure_ascii=False,
            sort_keys=options.sort_keys,
            allow_nan=False,
        )
    except (TypeError, ValueError) as exc:
        raise SerializeError(FormatId.JSON, str(exc)) from exc


class Codec:
    """Base class for format codecs.

    Subclasses are registered with [`pastex.codecs.registry.register_codec`][];
    the registry sets `format_id` on the instance it creates.
    """

    format_id: FormatId = FormatId.TEXT

    def parse(self, text: str) -> StructuredValue:
        """Parse ``text`` into a structured value.

        The base implementation treats the text as an opaque document and returns
        it unchanged.

        Raises:
            ParseError: If the text is not valid for this format.
        """
        return text

    def try_parse(self, text: str) -> ProbeResult:
        """Non-throwing variant of `parse` used by the classifier cascade."""
        try:
            return ProbeResult.success(self.parse(text))
        except ParseError as exc:
            logger.trace("%s probe rejected input: %s", self.format_id.value, exc.message)
            return ProbeResult.failure(exc.message)
        except RecursionError:
            logger.trace("%s probe hit the recursion limit", self.format_id.value)
            return ProbeResult.failure("maximum nesting depth exceeded")
        except Exception as exc:  # noqa: BLE001 - a probe must not raise
            logger.warning(
                "%s parser failed unexpectedly: %r", self.format_id.value, exc, exc_info=True
            )
            return ProbeResult.failure(str(exc))

    def dump(self, value: StructuredValue, options: RenderOptions) -> str:
        """Render a structured value as canonical text.

        Strings pass through; anything else is rendered as pretty JSON.

        Raises:
            SerializeError: If the value cannot be expressed in this format.
        """
        if isinstance(value, str):
            return value
        return pretty_json(value, options)

    def dump_text(self, text: str, options: RenderOptions) -> str:
        """Pretty-print raw text: parse then dump, or return ``text`` unchanged."""
        try:
            return self.dump(self.parse(text), options)
        except (ParseError, SerializeError, RecursionError) as exc:
            logger.debug(
                "Cannot reformat %s text, returning it unchanged: %s", self.format_id.value, exc
            )
            return text

    def minify(self, text: str) -> str:
        """Strip non-semantic whitespace; identity unless a subclass knows better."""
        return text

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(format_id={self.format_id.value!r})"
