# topmark:header:start
#
#   project      : Pastex
#   file         : json_like.py
#   file_relpath : src/pastex/codecs/json_like.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Codecs for JSON and JSON Lines.

JSON parsing is *strict*: the ``NaN``, ``Infinity`` and ``-Infinity`` literals
that Python's `json` module accepts by default are rejected, so the classifier
only reports JSON for text a standard JSON parser would accept.

JSON Lines parsing keeps partial results: each line is parsed on its own and a
line that fails is dropped (and counted in a warning) instead of failing the
whole document.
"""

from __future__ import annotations

import json
from typing import TYPE_CHECKING, NoReturn

from pastex.codecs.base import Codec, pretty_json
from pastex.codecs.registry import register_codec
from pastex.config.logging import get_logger
from pastex.core.errors import ParseError, SerializeError
from pastex.formats.base import FormatId

if TYPE_CHECKING:
    from pastex.config.logging import PastexLogger
    from pastex.config.model import RenderOptions
    from pastex.core.values import StructuredValue

logger: PastexLogger = get_logger(__name__)

COMPACT_SEPARATORS: tuple[str, str] = (",", ":")


def _reject_constant(name: str) -> NoReturn:
    raise ValueError(f"Invalid JSON literal: {name}")


def loads_strict(text: str) -> StructuredValue:
    """Parse standard JSON, rejecting non-finite number literals.

    Raises:
        ValueError: On any syntax error (`json.JSONDecodeError` is a subclass).
    """
    return json.loads(text, parse_constant=_reject_constant)


def dumps_compact(value: StructuredValue) -> str:
    """Serialize ``value`` without insignificant whitespace.

    Raises:
        ValueError: For NaN and infinite floats, which standard JSON cannot express.
    """
    return json.dumps(value, separators=COMPACT_SEPARATORS, ensure_ascii=False, allow_nan=False)


@register_codec(FormatId.JSON)
class JsonCodec(Codec):
    """Strict JSON with two-space (configurable) pretty printing."""

    def parse(self, text: str) -> StructuredValue:
        try:
            return loads_strict(text)
        except ValueError as exc:
            raise ParseError(self.format_id, str(exc)) from exc

    def dump(self, value: StructuredValue, options: RenderOptions) -> str:
        return pretty_json(value, options)

    def minify(self, text: str) -> str:
        try:
            return dumps_compact(loads_strict(text))
        except (ValueError, RecursionError) as exc:
            logger.debug("Cannot minify invalid JSON, returning it unchanged: %s", exc)
            return text


@register_codec(FormatId.JSONL)
class JsonLinesCodec(Codec):
    """Newline-delimited JSON records."""

    def parse(self, text: str) -> StructuredValue:
        records: list[StructuredValue] = []
        dropped: int = 0
        # Only "\n" ends a record; U+2028 and friends are legal inside JSON strings.
        for lineno, raw in enumerate(text.split("\n"), start=1):
            line: str = raw.removesuffix("\r")
            if not line.strip():
                continue
            try:
                records.append(loads_strict(line))
            except (ValueError, RecursionError) as exc:
                dropped += 1
                logger.debug("Dropping JSON Lines record on line %d: %s", lineno, exc)
        if dropped:
            logger.warning("Dropped %d unparseable JSON Lines record(s)", dropped)
        return records

    def dump(self, value: StructuredValue, options: RenderOptions) -> str:
        items: list[StructuredValue] = value if isinstance(value, list) else [value]
        try:
            return "\n".join(dumps_compact(item) for item in items)
        except (TypeError, ValueError) as exc:
            raise SerializeError(self.format_id, str(exc)) from exc
