# topmark:header:start
#
#   project      : Pastex
#   file         : toml_doc.py
#   file_relpath : src/pastex/codecs/toml_doc.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""TOML codec backed by `tomlkit`.

Parsed documents are unwrapped to plain Python values and normalized (TOML
dates and times become ISO-8601 strings). TOML has no null, so ``None`` members
of a mapping or array are dropped when dumping.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import tomlkit
from tomlkit.exceptions import TOMLKitError

from pastex.codecs.base import Codec
from pastex.codecs.registry import register_codec
from pastex.core.errors import ParseError, SerializeError
from pastex.core.values import normalize
from pastex.formats.base import FormatId

if TYPE_CHECKING:
    from pastex.config.model import RenderOptions
    from pastex.core.values import StructuredValue


def _drop_nulls(value: StructuredValue) -> StructuredValue:
    if isinstance(value, dict):
        return {k: _drop_nulls(v) for k, v in value.items() if v is not None}
    if isinstance(value, list):
        return [_drop_nulls(v) for v in value if v is not None]
    return value


@register_codec(FormatId.TOML)
class TomlCodec(Codec):
    """TOML documents (the top level is always a table)."""

    def parse(self, text: str) -> StructuredValue:
        try:
            return normalize(tomlkit.parse(text).unwrap())
        except (TOMLKitError, ValueError) as exc:
            raise ParseError(self.format_id, str(exc)) from exc

    def dump(self, value: StructuredValue, options: RenderOptions) -> str:
        if not isinstance(value, dict):
            raise SerializeError(
                self.format_id, f"TOML documents must be tables, not {type(value).__name__}"
            )
        try:
            return tomlkit.dumps(_drop_nulls(value), sort_keys=options.sort_keys)
        except (TOMLKitError, TypeError, ValueError) as exc:
            raise SerializeError(self.format_id, str(exc)) from exc
