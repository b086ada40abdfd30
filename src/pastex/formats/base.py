# topmark:header:start
#
#   project      : Pastex
#   file         : base.py
#   file_relpath : src/pastex/formats/base.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Format identifiers and format metadata records.

Defines the closed `FormatId` enumeration used as a discriminant everywhere in
Pastex, the coarse `FormatCategory` used by front ends to pick a rendering branch
(structured tree, document preview, plain text), and the immutable
`FormatDefinition` record describing one format.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class FormatId(str, Enum):
    """Closed set of recognized textual formats.

    The string values double as the CLI spelling (``--as yaml``) and as the
    default export file suffix.
    """

    JSON = "json"
    YAML = "yaml"
    XML = "xml"
    TOML = "toml"
    CSV = "csv"
    INI = "ini"
    ENV = "env"
    JSONL = "jsonl"
    MARKDOWN = "markdown"
    HTML = "html"
    SQL = "sql"
    TEXT = "text"


class FormatCategory(str, Enum):
    """How a format is presented to the user.

    Attributes:
        DATA: Parses into a `StructuredValue` tree.
        DOCUMENT: Rendered as a document preview (Markdown, HTML).
        CODE: Shown as plain or highlighted text (SQL, plain text).
    """

    DATA = "data"
    DOCUMENT = "document"
    CODE = "code"


@dataclass(frozen=True)
class FormatDefinition:
    """Static metadata for one format.

    Attributes:
        id (FormatId): The format identifier.
        display_name (str): Human-readable label (e.g. ``"JSON Lines"``).
        category (FormatCategory): Presentation category.
        mime_types (frozenset[str]): Associated MIME types.
        extensions (tuple[str, ...]): File extensions with the leading dot, primary first.
        editor_language (str): Syntax-highlighting language hint for editors.
    """

    id: FormatId
    display_name: str
    category: FormatCategory
    mime_types: frozenset[str]
    extensions: tuple[str, ...]
    editor_language: str = "text"

    @property
    def is_structured(self) -> bool:
        """True for formats that parse into a structured value."""
        return self.category is FormatCategory.DATA

    @property
    def primary_extension(self) -> str:
        """The preferred file extension (with leading dot)."""
        return self.extensions[0] if self.extensions else ".txt"
