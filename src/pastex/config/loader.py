# topmark:header:start
#
#   project      : Pastex
#   file         : loader.py
#   file_relpath : src/pastex/config/loader.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Load rendering options from TOML configuration files.

Two file shapes are recognized:
- ``pastex.toml`` with the options at the top level, and
- ``pyproject.toml`` with the options under ``[tool.pastex]``.

Parsing is done with `tomlkit` and returned as plain `dict` structures.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING, Any, Final

import tomlkit
from tomlkit.exceptions import TOMLKitError

from pastex.config.logging import get_logger
from pastex.config.model import DEFAULT_RENDER_OPTIONS, RenderOptions
from pastex.core.errors import ConfigError

if TYPE_CHECKING:
    from pastex.config.logging import PastexLogger

logger: PastexLogger = get_logger(__name__)

CONFIG_FILE_NAMES: Final[tuple[str, ...]] = ("pastex.toml", "pyproject.toml")


def load_toml_dict(path: Path) -> dict[str, Any]:
    """Read ``path`` and return its TOML content as a plain dict.

    Raises:
        ConfigError: If the file cannot be read or is not valid TOML.
    """
    try:
        text: str = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise ConfigError(f"Cannot read config file {path}: {exc}") from exc
    try:
        return tomlkit.parse(text).unwrap()
    except TOMLKitError as exc:
        raise ConfigError(f"Invalid TOML in {path}: {exc}") from exc


def _options_table(path: Path, data: dict[str, Any]) -> dict[str, Any] | None:
    if path.name == "pyproject.toml":
        tool: Any = data.get("tool", {})
        table: Any = tool.get("pastex") if isinstance(tool, dict) else None
        if table is None:
            return None
        if not isinstance(table, dict):
            raise ConfigError(f"[tool.pastex] in {path} must be a table")
        return table
    return data


def load_options_file(path: Path) -> RenderOptions | None:
    """Load `RenderOptions` from a single config file.

    Returns:
        RenderOptions | None: The options, or None for a ``pyproject.toml`` without
            a ``[tool.pastex]`` table.
    """
    logger.debug("Loading render options from %s", path)
    table: dict[str, Any] | None = _options_table(path, load_toml_dict(path))
    if table is None:
        logger.debug("No [tool.pastex] table in %s", path)
        return None
    return RenderOptions.from_toml_dict(table)


def discover_config_file(start: Path) -> Path | None:
    """Find the nearest config file walking upward from ``start``.

    In a given directory ``pastex.toml`` wins over ``pyproject.toml``; a
    ``pyproject.toml`` only counts when it has a ``[tool.pastex]`` table.
    """
    cur: Path = start.resolve()
    if cur.is_file():
        cur = cur.parent

    while True:
        for name in CONFIG_FILE_NAMES:
            candidate: Path = cur / name
            if not candidate.is_file():
                continue
            if name == "pyproject.toml":
                try:
                    if _options_table(candidate, load_toml_dict(candidate)) is None:
                        continue
                except ConfigError as exc:
                    # Best-effort discovery; an unrelated broken pyproject is skipped.
                    logger.debug("Ignoring %s during discovery: %s", candidate, exc)
                    continue
            logger.debug("Discovered config file: %s", candidate)
            return candidate

        parent: Path = cur.parent
        if parent == cur:
            return None
        cur = parent


def resolve_options(
    *,
    config_path: Path | None = None,
    start: Path | None = None,
    no_config: bool = False,
) -> RenderOptions:
    """Resolve the effective render options.

    Args:
        config_path (Path | None): Explicit config file; skips discovery.
        start (Path | None): Directory where discovery starts (defaults to the CWD).
        no_config (bool): Ignore config files and return the defaults.

    Returns:
        RenderOptions: The loaded options, or the defaults when nothing applies.
    """
    if no_config:
        return DEFAULT_RENDER_OPTIONS
    path: Path | None = config_path or discover_config_file(start or Path.cwd())
    if path is None:
        return DEFAULT_RENDER_OPTIONS
    return load_options_file(path) or DEFAULT_RENDER_OPTIONS
