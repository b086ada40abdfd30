# topmark:header:start
#
#   project      : Pastex
#   file         : registry.py
#   file_relpath : src/pastex/formats/registry.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Runtime registry of format definitions.

The registry is built once, on first access, from
[`pastex.formats.builtins.FORMATS`][] and cached thereafter. Building fails
loudly if the built-in table does not cover every `FormatId` exactly once, so a
new enum member cannot ship without metadata.

The returned mapping should be treated as immutable by callers.
"""

from __future__ import annotations

from functools import lru_cache
from types import MappingProxyType
from typing import TYPE_CHECKING

from pastex.config.logging import get_logger
from pastex.constants import DEFAULT_EXPORT_STEM
from pastex.formats.base import FormatCategory, FormatDefinition, FormatId

if TYPE_CHECKING:
    from collections.abc import Mapping

    from pastex.config.logging import PastexLogger

logger: PastexLogger = get_logger(__name__)


@lru_cache(maxsize=1)
def get_format_registry() -> Mapping[FormatId, FormatDefinition]:
    """Return the read-only mapping of `FormatId` to `FormatDefinition`.

    Raises:
        RuntimeError: If a format is defined twice or a `FormatId` has no definition.
    """
    from pastex.formats.builtins import FORMATS

    registry: dict[FormatId, FormatDefinition] = {}
    for definition in FORMATS:
        if definition.id in registry:
            raise RuntimeError(f"Duplicate format definition: {definition.id.value}")
        registry[definition.id] = definition

    missing: list[str] = [f.value for f in FormatId if f not in registry]
    if missing:
        raise RuntimeError(f"Formats without a definition: {', '.join(missing)}")

    logger.debug("Registered %d formats", len(registry))
    return MappingProxyType(registry)


def lookup_format_metadata(format_id: FormatId) -> FormatDefinition:
    """Return the `FormatDefinition` for ``format_id``."""
    return get_format_registry()[format_id]


def formats_in_category(category: FormatCategory) -> list[FormatDefinition]:
    """Return all definitions of ``category`` in registry order."""
    return [d for d in get_format_registry().values() if d.category is category]


def format_for_extension(extension: str) -> FormatId | None:
    """Resolve a file extension (``".yml"`` or ``"yml"``, any case) to a `FormatId`.

    Returns None when no format claims the extension.
    """
    ext: str = extension.lower()
    if not ext.startswith("."):
        ext = f".{ext}"
    for definition in get_format_registry().values():
        if ext in definition.extensions:
            return definition.id
    return None


def suggest_filename(format_id: FormatId, stem: str = DEFAULT_EXPORT_STEM) -> str:
    """Return an export file name for content of ``format_id``.

    Plain text exports as ``.txt``; every other format uses its primary extension.
    """
    return f"{stem}{lookup_format_metadata(format_id).primary_extension}"
