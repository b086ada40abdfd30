# topmark:header:start
#
#   project      : Pastex
#   file         : api.py
#   file_relpath : src/pastex/api.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Public Pastex API (stable surface).

Front ends (an editor, the CLI, scripts) talk to Pastex through two contracts:
"classify and parse this text" and "render this value or text back to text".
Everything here is synchronous and side-effect free apart from logging.

Notes:
-----
- `classify_and_parse` never raises: parser failures come back as an invalid
  `ValidationOutcome` carrying the native diagnostic.
- `render` and `minify_text` never raise: in the worst case the caller gets
  back text no better than what it sent in.
- Rendering options may be given as a `RenderOptions` instance or as a plain
  mapping shaped like the ``[tool.pastex]`` TOML table.

```python
from pastex import api

outcome = api.classify_and_parse('{"b": 1, "a": [true, null]}')
assert outcome.detected_format is api.FormatId.JSON
print(api.render(outcome.parsed_value, outcome.detected_format, {"indent": 4}))
```
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from pastex import dispatch
from pastex.classifier import classify
from pastex.config.logging import get_logger
from pastex.config.model import DEFAULT_RENDER_OPTIONS, RenderOptions
from pastex.constants import PASTEX_VERSION
from pastex.core.errors import ParseError
from pastex.core.outcomes import ValidationOutcome
from pastex.formats.base import FormatDefinition, FormatId
from pastex.formats.registry import lookup_format_metadata, suggest_filename

if TYPE_CHECKING:
    from collections.abc import Mapping

    from pastex.config.logging import PastexLogger
    from pastex.core.values import StructuredValue

logger: PastexLogger = get_logger(__name__)

__all__: list[str] = [
    "FormatDefinition",
    "FormatId",
    "RenderOptions",
    "ValidationOutcome",
    "classify",
    "classify_and_parse",
    "compact",
    "lookup_format_metadata",
    "minify_text",
    "prettify",
    "render",
    "suggest_filename",
    "version",
]


def _coerce_options(options: RenderOptions | Mapping[str, Any] | None) -> RenderOptions:
    if options is None:
        return DEFAULT_RENDER_OPTIONS
    if isinstance(options, RenderOptions):
        return options
    return RenderOptions.from_toml_dict(options)


def classify_and_parse(text: str, explicit_format: FormatId | None = None) -> ValidationOutcome:
    """Classify ``text`` (unless a format is given) and parse it.

    Args:
        text (str): The input text.
        explicit_format (FormatId | None): Skip classification and parse as this format.

    Returns:
        ValidationOutcome: A fresh outcome. Empty or whitespace-only input yields a
            valid TEXT outcome without a value, even when a format is given.
    """
    if not text.strip():
        return ValidationOutcome.empty()

    format_id: FormatId = explicit_format if explicit_format is not None else classify(text)
    try:
        value: StructuredValue = dispatch.parse_text(text, format_id)
    except ParseError as exc:
        logger.debug("Input rejected as %s: %s", format_id.value, exc.message)
        return ValidationOutcome.invalid(format_id, exc.message)
    return ValidationOutcome.valid(format_id, value)


def render(
    value: StructuredValue,
    format_id: FormatId,
    options: RenderOptions | Mapping[str, Any] | None = None,
) -> str:
    """Render a parsed value (or raw text) as pretty text in ``format_id``.

    None renders as ``""``.
    """
    return dispatch.stringify(value, format_id, _coerce_options(options))


def minify_text(text: str, format_id: FormatId) -> str:
    """Minify ``text`` as ``format_id``."""
    return dispatch.minify(text, format_id)


def prettify(
    text: str,
    outcome: ValidationOutcome | None = None,
    options: RenderOptions | Mapping[str, Any] | None = None,
) -> str:
    """Reformat ``text``, preferring the parsed value when one is available.

    Args:
        text (str): The raw input text.
        outcome (ValidationOutcome | None): A previous result for ``text``; computed
            when None.
        options (RenderOptions | Mapping[str, Any] | None): Rendering options.

    Returns:
        str: The reformatted text, ``""`` for whitespace-only input. Invalid input
            is rendered from the raw text, which lets the YAML indentation repair
            kick in.
    """
    if not text.strip():
        return ""
    if outcome is None:
        outcome = classify_and_parse(text)
    opts: RenderOptions = _coerce_options(options)
    if outcome.has_value:
        return dispatch.stringify(outcome.parsed_value, outcome.detected_format, opts)
    return dispatch.stringify(text, outcome.detected_format, opts)


def compact(text: str, outcome: ValidationOutcome | None = None) -> str:
    """Minify ``text``, re-serializing a parsed JSON value first."""
    if outcome is None:
        outcome = classify_and_parse(text)
    if outcome.detected_format is FormatId.JSON and outcome.has_value:
        pretty: str = dispatch.stringify(outcome.parsed_value, FormatId.JSON)
        return dispatch.minify(pretty, FormatId.JSON)
    return dispatch.minify(text, outcome.detected_format)


def version() -> str:
    """Return the installed Pastex version string."""
    return PASTEX_VERSION
