# topmark:header:start
#
#   project      : Pastex
#   file         : xml_doc.py
#   file_relpath : src/pastex/codecs/xml_doc.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""XML codec mapping elements to nested dicts and back.

Mapping rules (shared by parse and dump):

- The document becomes ``{root_tag: content}``.
- Attributes are keys prefixed with ``@_`` (``<a id="1"/>`` -> ``{"@_id": "1"}``).
- An element with neither children nor attributes maps to its text (``""`` when
  empty).
- Otherwise the element maps to a dict; its own text goes under ``#text``.
- Sibling elements sharing a tag collapse into a list, in document order.

All leaf values stay strings; no numeric or boolean coercion is applied.
Comments and processing instructions are not preserved.
"""

from __future__ import annotations

import json
import re
import xml.etree.ElementTree as ET
from typing import TYPE_CHECKING, Final

from pastex.codecs.base import Codec
from pastex.codecs.registry import register_codec
from pastex.core.errors import ParseError, SerializeError
from pastex.formats.base import FormatId

if TYPE_CHECKING:
    from pastex.config.model import RenderOptions
    from pastex.core.values import StructuredValue

ATTRIBUTE_PREFIX: Final[str] = "@_"
TEXT_KEY: Final[str] = "#text"

_TAG_RE: Final[re.Pattern[str]] = re.compile(r"^[A-Za-z_][\w.\-]*(?::[A-Za-z_][\w.\-]*)?$")
_INTER_TAG_WS_RE: Final[re.Pattern[str]] = re.compile(r">\s+<")


def _element_to_value(element: ET.Element) -> StructuredValue:
    children: list[ET.Element] = list(element)
    parts: list[str | None] = [element.text, *(c.tail for c in children)]
    text: str = "".join(p.strip() for p in parts if p and p.strip())
    if not children and not element.attrib:
        return text

    node: dict[str, StructuredValue] = {
        f"{ATTRIBUTE_PREFIX}{name}": value for name, value in element.attrib.items()
    }
    for child in children:
        value: StructuredValue = _element_to_value(child)
        if child.tag not in node:
            node[child.tag] = value
            continue
        existing: StructuredValue = node[child.tag]
        if isinstance(existing, list):
            existing.append(value)
        else:
            node[child.tag] = [existing, value]
    if text:
        node[TEXT_KEY] = text
    return node


def _scalar_text(value: StructuredValue) -> str:
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (dict, list)):
        return json.dumps(value, ensure_ascii=False)
    return str(value)


def _build_elements(tag: str, content: StructuredValue) -> list[ET.Element]:
    if not _TAG_RE.match(tag):
        raise SerializeError(FormatId.XML, f"Not a valid XML element name: {tag!r}")
    if isinstance(content, list):
        elements: list[ET.Element] = []
        for item in content:
            elements.extend(_build_elements(tag, item))
        return elements

    element = ET.Element(tag)
    if isinstance(content, dict):
        for key, value in content.items():
            if key.startswith(ATTRIBUTE_PREFIX):
                element.set(key[len(ATTRIBUTE_PREFIX) :], _scalar_text(value))
            elif key == TEXT_KEY:
                element.text = _scalar_text(value)
            else:
                element.extend(_build_elements(key, value))
    elif content is not None:
        element.text = _scalar_text(content)
    return [element]


@register_codec(FormatId.XML)
class XmlCodec(Codec):
    """XML documents via `xml.etree.ElementTree`."""

    def parse(self, text: str) -> StructuredValue:
        try:
            root: ET.Element = ET.fromstring(text.lstrip())
        except ET.ParseError as exc:
            raise ParseError(self.format_id, str(exc)) from exc
        return {root.tag: _element_to_value(root)}

    def dump(self, value: StructuredValue, options: RenderOptions) -> str:
        if not isinstance(value, dict) or not value:
            raise SerializeError(
                self.format_id, "XML output needs a mapping of root element names to content"
            )
        rendered: list[str] = []
        for tag, content in value.items():
            if tag.startswith("?"):
                # declarations (``?xml``) are regenerated by consumers, not stored
                continue
            for element in _build_elements(tag, content):
                ET.indent(element, space=" " * options.indent)
                rendered.append(ET.tostring(element, encoding="unicode"))
        return "\n".join(rendered)

    def minify(self, text: str) -> str:
        return _INTER_TAG_WS_RE.sub("><", text).strip()
