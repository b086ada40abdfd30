# topmark:header:start
#
#   project      : Pastex
#   file         : tabular.py
#   file_relpath : src/pastex/codecs/tabular.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""CSV codec.

The first row is the header; every following row becomes a mapping from header
names to cell strings. Blank lines are skipped. Cells beyond the header width
are collected in a list under ``__parsed_extra``; cells missing from a short row
are ``None``.
"""

from __future__ import annotations

import csv
import io
import json
from typing import TYPE_CHECKING, Any, Final

from pastex.codecs.base import Codec
from pastex.codecs.registry import register_codec
from pastex.core.errors import ParseError, SerializeError
from pastex.formats.base import FormatId

if TYPE_CHECKING:
    from pastex.config.model import RenderOptions
    from pastex.core.values import StructuredValue

EXTRA_FIELDS_KEY: Final[str] = "__parsed_extra"


def _cell(value: StructuredValue) -> str:
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (dict, list)):
        return json.dumps(value, ensure_ascii=False, separators=(",", ":"))
    return str(value)


def _is_blank_row(row: dict[str, Any]) -> bool:
    extra: list[str] = row.get(EXTRA_FIELDS_KEY) or []
    cells: list[Any] = [v for k, v in row.items() if k != EXTRA_FIELDS_KEY]
    return not any(cells) and not any(extra)


@register_codec(FormatId.CSV)
class CsvCodec(Codec):
    """Comma-separated values with a header row."""

    def parse(self, text: str) -> StructuredValue:
        reader = csv.DictReader(
            io.StringIO(text, newline=""), restkey=EXTRA_FIELDS_KEY, strict=True
        )
        try:
            return [dict(row) for row in reader if not _is_blank_row(row)]
        except csv.Error as exc:
            raise ParseError(self.format_id, f"line {reader.line_num}: {exc}") from exc

    def dump(self, value: StructuredValue, options: RenderOptions) -> str:
        rows: list[StructuredValue]
        if isinstance(value, dict):
            rows = [value]
        elif isinstance(value, list):
            rows = value
        else:
            raise SerializeError(
                self.format_id, f"CSV output needs a list of rows, not {type(value).__name__}"
            )

        buffer = io.StringIO(newline="")
        terminator: str = options.csv_line_terminator
        if all(isinstance(row, dict) for row in rows):
            fieldnames: dict[str, None] = {}
            for row in rows:
                fieldnames.update(dict.fromkeys(row))  # type: ignore[arg-type]
            writer = csv.DictWriter(buffer, fieldnames=list(fieldnames), lineterminator=terminator)
            writer.writeheader()
            for row in rows:
                record: dict[str, Any] = row  # type: ignore[assignment]
                writer.writerow({k: _cell(v) for k, v in record.items()})
        elif not any(isinstance(row, dict) for row in rows):
            plain = csv.writer(buffer, lineterminator=terminator)
            for row in rows:
                cells: list[StructuredValue] = row if isinstance(row, list) else [row]
                plain.writerow([_cell(c) for c in cells])
        else:
            raise SerializeError(self.format_id, "CSV rows must be all mappings or all sequences")
        return buffer.getvalue()
