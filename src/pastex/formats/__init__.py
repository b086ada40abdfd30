# topmark:header:start
#
#   project      : Pastex
#   file         : __init__.py
#   file_relpath : src/pastex/formats/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Format identifiers and the static format registry.

Responsibilities:
    * Define the closed `FormatId` vocabulary and its `FormatCategory`.
    * Hold one immutable `FormatDefinition` per format (display name, MIME types,
      extensions).
    * Provide lookups used by front ends for labels, export names and
      category-based rendering branches.
"""

from __future__ import annotations

from pastex.formats.base import FormatCategory, FormatDefinition, FormatId
from pastex.formats.registry import (
    format_for_extension,
    formats_in_category,
    get_format_registry,
    lookup_format_metadata,
    suggest_filename,
)

__all__ = [
    "FormatCategory",
    "FormatDefinition",
    "FormatId",
    "format_for_extension",
    "formats_in_category",
    "get_format_registry",
    "lookup_format_metadata",
    "suggest_filename",
]
