# topmark:header:start
#
#   project      : Pastex
#   file         : yaml_doc.py
#   file_relpath : src/pastex/codecs/yaml_doc.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""YAML codec with a fallback chain for text that does not parse.

Pretty-printing raw YAML text tries an ordered list of strategies; the first
one that returns a string wins:

1. ``strict``: parse with `yaml.safe_load` and dump.
2. ``repaired``: run [`pastex.repair.repair_indent`][] first, then parse and dump.
3. ``reflow``: a line-level cleanup that cannot fail. It normalizes line
   endings, expands tabs in indentation, strips trailing whitespace and ends
   the text with one newline. Errors in the document are kept.
"""

from __future__ import annotations

import re
from typing import TYPE_CHECKING, Callable, Final

import yaml

from pastex.codecs.base import Codec
from pastex.codecs.registry import register_codec
from pastex.config.logging import get_logger
from pastex.core.errors import ParseError, SerializeError
from pastex.core.values import normalize
from pastex.formats.base import FormatId
from pastex.repair import repair_indent

if TYPE_CHECKING:
    from pastex.config.logging import PastexLogger
    from pastex.config.model import RenderOptions
    from pastex.core.values import StructuredValue

logger: PastexLogger = get_logger(__name__)

_LINE_SPLIT_RE: Final[re.Pattern[str]] = re.compile(r"\r\n|\r|\n")
_DOCUMENT_END: Final[str] = "\n...\n"

TextStrategy = Callable[[str, "RenderOptions"], "str | None"]


def load_yaml(text: str) -> StructuredValue:
    """Parse a single YAML document with the safe loader.

    Raises:
        ParseError: With the PyYAML diagnostic (it includes line and column).
    """
    try:
        return normalize(yaml.safe_load(text))
    except (yaml.YAMLError, ValueError, TypeError, OverflowError) as exc:
        # ValueError: e.g. timestamps with an out-of-range month
        raise ParseError(FormatId.YAML, str(exc)) from exc


def dump_yaml(value: StructuredValue, options: RenderOptions) -> str:
    """Serialize ``value`` as block-style YAML, keeping key order unless sorting is on.

    A top-level scalar is written without PyYAML's ``...`` document-end marker.
    """
    try:
        out: str = yaml.safe_dump(
            value,
            default_flow_style=False,
            allow_unicode=True,
            sort_keys=options.sort_keys,
            indent=options.indent,
        )
    except yaml.YAMLError as exc:
        raise SerializeError(FormatId.YAML, str(exc)) from exc
    if out.endswith(_DOCUMENT_END):
        return out[: -len(_DOCUMENT_END) + 1]
    return out


def _strict(text: str, options: RenderOptions) -> str | None:
    try:
        return dump_yaml(load_yaml(text), options)
    except (ParseError, SerializeError):
        return None


def _repaired(text: str, options: RenderOptions) -> str | None:
    return _strict(repair_indent(text), options)


def _reflow(text: str, options: RenderOptions) -> str:
    tab: str = " " * (options.indent or 2)
    out: list[str] = []
    for line in _LINE_SPLIT_RE.split(text):
        body: str = line.rstrip()
        content: str = body.lstrip(" \t")
        lead: str = body[: len(body) - len(content)]
        out.append(lead.replace("\t", tab) + content)
    return "\n".join(out).strip("\n") + "\n"


TEXT_STRATEGIES: Final[tuple[tuple[str, TextStrategy], ...]] = (
    ("strict", _strict),
    ("repaired", _repaired),
    ("reflow", _reflow),
)


@register_codec(FormatId.YAML)
class YamlCodec(Codec):
    """YAML via PyYAML's safe loader and dumper."""

    def parse(self, text: str) -> StructuredValue:
        return load_yaml(text)

    def dump(self, value: StructuredValue, options: RenderOptions) -> str:
        return dump_yaml(value, options)

    def dump_text(self, text: str, options: RenderOptions) -> str:
        for name, strategy in TEXT_STRATEGIES:
            result: str | None = strategy(text, options)
            if result is not None:
                logger.debug("YAML text rendered with the %s strategy", name)
                return result
        return text
