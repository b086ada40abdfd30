# topmark:header:start
#
#   project      : Pastex
#   file         : registry.py
#   file_relpath : src/pastex/codecs/registry.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Registry of codecs keyed by `FormatId`.

This module provides a decorator to register a `Codec` implementation for one or
more formats. Each registration creates a separate instance bound to its format,
so a codec class can serve several formats.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, TypeVar

from pastex.config.logging import get_logger

if TYPE_CHECKING:
    from collections.abc import Callable

    from pastex.codecs.base import Codec
    from pastex.config.logging import PastexLogger
    from pastex.formats.base import FormatId

logger: PastexLogger = get_logger(__name__)

C = TypeVar("C", bound="type[Codec]")

_registry: dict[FormatId, Codec] = {}


def register_codec(format_id: FormatId) -> Callable[[C], C]:
    """Class decorator to register a codec for ``format_id``.

    Args:
        format_id (FormatId): The format the decorated codec handles.

    Returns:
        Callable[[C], C]: A decorator that registers an instance of the class and
            returns the class unchanged.

    Raises:
        ValueError: If ``format_id`` already has a registered codec.
    """

    def decorator(cls: C) -> C:
        logger.debug("Registering codec %s for format: %s", cls.__name__, format_id.value)
        if format_id in _registry:
            raise ValueError(f"Format '{format_id.value}' already has a registered codec.")
        instance = cls()
        instance.format_id = format_id
        _registry[format_id] = instance
        return cls

    return decorator


def get_codec_registry() -> dict[FormatId, Codec]:
    """Return the registry of format ids to codec instances."""
    return _registry
