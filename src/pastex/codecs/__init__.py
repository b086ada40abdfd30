# topmark:header:start
#
#   project      : Pastex
#   file         : __init__.py
#   file_relpath : src/pastex/codecs/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Auto-import all codec modules in the current package."""

from __future__ import annotations

import importlib
import pkgutil
from functools import lru_cache
from pathlib import Path
from typing import TYPE_CHECKING, Final

from pastex.config.logging import get_logger

if TYPE_CHECKING:
    from pastex.codecs.base import Codec
    from pastex.config.logging import PastexLogger
    from pastex.formats.base import FormatId

logger: PastexLogger = get_logger(__name__)

# Infrastructure modules that hold no codecs.
_SUPPORT_MODULES: Final[frozenset[str]] = frozenset({"base", "registry"})


@lru_cache(maxsize=1)
def register_all_codecs() -> dict[FormatId, Codec]:
    """Import every codec module and return the complete format-to-codec table.

    Raises:
        RuntimeError: If a known format has no registered codec.
    """
    from pastex.codecs.registry import get_codec_registry
    from pastex.formats.base import FormatId

    package_dir = Path(__file__).parent
    for module_info in pkgutil.iter_modules([str(package_dir)]):
        if not module_info.ispkg and module_info.name not in _SUPPORT_MODULES:
            # Importing the module runs its @register_codec decorators
            importlib.import_module(f"{__name__}.{module_info.name}")

    registry: dict[FormatId, Codec] = get_codec_registry()
    missing: list[str] = [fid.value for fid in FormatId if fid not in registry]
    if missing:
        raise RuntimeError(f"No codec registered for format(s): {', '.join(missing)}")
    logger.debug(
        "%3d registered codecs: %s",
        len(registry),
        ", ".join(sorted(codec.__class__.__name__ for codec in registry.values())),
    )
    return registry


def get_codec(format_id: FormatId) -> Codec:
    """Return the codec bound to ``format_id``."""
    return register_all_codecs()[format_id]
