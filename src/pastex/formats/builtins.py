# topmark:header:start
#
#   project      : Pastex
#   file         : builtins.py
#   file_relpath : src/pastex/formats/builtins.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Built-in format definitions.

Exports:
    FORMATS: One `FormatDefinition` per `FormatId`, in declaration order.

Notes:
    - ENV is categorized as data: it parses into a flat key/value mapping.
    - SQL and plain text share the code category; neither has a structured value.
"""

from __future__ import annotations

from pastex.formats.base import FormatCategory, FormatDefinition, FormatId

FORMATS: list[FormatDefinition] = [
    FormatDefinition(
        id=FormatId.JSON,
        display_name="JSON",
        category=FormatCategory.DATA,
        mime_types=frozenset({"application/json"}),
        extensions=(".json",),
        editor_language="json",
    ),
    FormatDefinition(
        id=FormatId.YAML,
        display_name="YAML",
        category=FormatCategory.DATA,
        mime_types=frozenset({"text/yaml", "application/x-yaml"}),
        extensions=(".yaml", ".yml"),
        editor_language="yaml",
    ),
    FormatDefinition(
        id=FormatId.XML,
        display_name="XML",
        category=FormatCategory.DATA,
        mime_types=frozenset({"application/xml", "text/xml"}),
        extensions=(".xml",),
        editor_language="xml",
    ),
    FormatDefinition(
        id=FormatId.TOML,
        display_name="TOML",
        category=FormatCategory.DATA,
        mime_types=frozenset({"application/toml"}),
        extensions=(".toml",),
        editor_language="toml",
    ),
    FormatDefinition(
        id=FormatId.CSV,
        display_name="CSV",
        category=FormatCategory.DATA,
        mime_types=frozenset({"text/csv"}),
        extensions=(".csv",),
        editor_language="csv",
    ),
    FormatDefinition(
        id=FormatId.INI,
        display_name="INI",
        category=FormatCategory.DATA,
        mime_types=frozenset({"text/ini"}),
        extensions=(".ini",),
        editor_language="ini",
    ),
    FormatDefinition(
        id=FormatId.ENV,
        display_name="Env File",
        category=FormatCategory.DATA,
        mime_types=frozenset({"text/plain"}),
        extensions=(".env",),
        editor_language="shell",
    ),
    FormatDefinition(
        id=FormatId.JSONL,
        display_name="JSON Lines",
        category=FormatCategory.DATA,
        mime_types=frozenset({"application/x-ndjson"}),
        extensions=(".jsonl", ".ndjson"),
        editor_language="json",
    ),
    FormatDefinition(
        id=FormatId.MARKDOWN,
        display_name="Markdown",
        category=FormatCategory.DOCUMENT,
        mime_types=frozenset({"text/markdown"}),
        extensions=(".md", ".markdown"),
        editor_language="markdown",
    ),
    FormatDefinition(
        id=FormatId.HTML,
        display_name="HTML",
        category=FormatCategory.DOCUMENT,
        mime_types=frozenset({"text/html"}),
        extensions=(".html", ".htm"),
        editor_language="html",
    ),
    FormatDefinition(
        id=FormatId.SQL,
        display_name="SQL",
        category=FormatCategory.CODE,
        mime_types=frozenset({"application/sql"}),
        extensions=(".sql",),
        editor_language="sql",
    ),
    FormatDefinition(
        id=FormatId.TEXT,
        display_name="Plain Text",
        category=FormatCategory.CODE,
        mime_types=frozenset({"text/plain"}),
        extensions=(".txt",),
        editor_language="text",
    ),
]
