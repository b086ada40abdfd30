# topmark:header:start
#
#   project      : Pastex
#   file         : dispatch.py
#   file_relpath : src/pastex/dispatch.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Parse, serialize and minify dispatchers.

Each dispatcher looks up the codec bound to a `FormatId` and applies the
boundary rules shared by every format:

* `parse_text` returns None for whitespace-only text and otherwise raises
  `ParseError` with the native parser diagnostic.
* `stringify` never raises. A value that the target format cannot express is
  rendered as pretty JSON; raw text that cannot be reformatted comes back
  unchanged.
* `minify` never raises and returns ``""`` for whitespace-only text.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from pastex.codecs import get_codec
from pastex.codecs.base import pretty_json
from pastex.config.logging import get_logger
from pastex.config.model import DEFAULT_RENDER_OPTIONS
from pastex.core.errors import ParseError, SerializeError
from pastex.core.outcomes import ProbeResult

if TYPE_CHECKING:
    from pastex.codecs.base import Codec
    from pastex.config.logging import PastexLogger
    from pastex.config.model import RenderOptions
    from pastex.core.values import StructuredValue
    from pastex.formats.base import FormatId

logger: PastexLogger = get_logger(__name__)


def parse_text(text: str, format_id: FormatId) -> StructuredValue:
    """Parse ``text`` as ``format_id``.

    Args:
        text (str): The input text.
        format_id (FormatId): The format to parse as.

    Returns:
        StructuredValue: The parsed value, or None for whitespace-only input.

    Raises:
        ParseError: If the format's parser rejects the text.
    """
    if not text.strip():
        return None
    codec: Codec = get_codec(format_id)
    try:
        return codec.parse(text)
    except RecursionError as exc:
        raise ParseError(format_id, "maximum nesting depth exceeded") from exc


def try_parse(text: str, format_id: FormatId) -> ProbeResult:
    """Non-throwing `parse_text`, used by the classifier."""
    if not text.strip():
        return ProbeResult.success(None)
    return get_codec(format_id).try_parse(text)


def stringify(
    value: StructuredValue,
    format_id: FormatId,
    options: RenderOptions | None = None,
) -> str:
    """Render a parsed value, or raw text, as canonical text for ``format_id``.

    Args:
        value (StructuredValue): A parsed value, or raw text of the format.
        format_id (FormatId): The target format.
        options (RenderOptions | None): Rendering options; defaults apply when None.

    Returns:
        str: The rendered text. Never raises.
    """
    if value is None:
        return ""
    opts: RenderOptions = options or DEFAULT_RENDER_OPTIONS
    codec: Codec = get_codec(format_id)
    if isinstance(value, str):
        return codec.dump_text(value, opts)

    try:
        return codec.dump(value, opts)
    except (SerializeError, RecursionError) as exc:
        logger.warning(
            "Cannot render value as %s (%s); falling back to JSON", format_id.value, exc
        )
    try:
        return pretty_json(value, opts)
    except (SerializeError, RecursionError) as exc:
        logger.error("Cannot render value as JSON either: %s", exc)
        return str(value)


def minify(text: str, format_id: FormatId) -> str:
    """Strip non-semantic whitespace (and comments, where the format has them)."""
    if not text.strip():
        return ""
    return get_codec(format_id).minify(text)
