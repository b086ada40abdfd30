# topmark:header:start
#
#   project      : Pastex
#   file         : model.py
#   file_relpath : src/pastex/config/model.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Rendering options applied by the serialize dispatcher.

`RenderOptions` is immutable; build a modified copy with `RenderOptions.replace`
or from a TOML table with `RenderOptions.from_toml_dict`.
"""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Final

from pastex.config.logging import get_logger
from pastex.core.errors import ConfigError

if TYPE_CHECKING:
    from collections.abc import Mapping

    from pastex.config.logging import PastexLogger

logger: PastexLogger = get_logger(__name__)

SQL_KEYWORD_CASES: Final[tuple[str, ...]] = ("upper", "lower", "capitalize")


@dataclass(frozen=True)
class RenderOptions:
    """Immutable options for pretty-printing.

    Attributes:
        indent (int): Indentation width for JSON, YAML, XML, HTML and SQL output.
        sort_keys (bool): Sort mapping keys when dumping JSON and YAML.
        sql_keyword_case (str | None): ``upper``, ``lower``, ``capitalize``, or None to
            keep the keyword case of the input.
        csv_line_terminator (str): Row terminator for CSV output.
    """

    indent: int = 2
    sort_keys: bool = False
    sql_keyword_case: str | None = None
    csv_line_terminator: str = "\n"

    def __post_init__(self) -> None:
        if isinstance(self.indent, bool) or not isinstance(self.indent, int) or self.indent < 0:
            raise ConfigError(f"indent must be a non-negative integer, got {self.indent!r}")
        if self.sql_keyword_case is not None and self.sql_keyword_case not in SQL_KEYWORD_CASES:
            raise ConfigError(
                f"sql_keyword_case must be one of {', '.join(SQL_KEYWORD_CASES)}, "
                f"got {self.sql_keyword_case!r}"
            )

    def replace(self, **changes: Any) -> RenderOptions:
        """Return a copy with ``changes`` applied (validated like the constructor)."""
        return dataclasses.replace(self, **changes)

    @classmethod
    def from_toml_dict(cls, table: Mapping[str, Any]) -> RenderOptions:
        """Build options from a ``[tool.pastex]``-style table.

        Unknown keys are logged and ignored. Values of the wrong type raise
        `ConfigError`.
        """
        known: dict[str, Any] = {}
        field_types: dict[str, Any] = {f.name: f.type for f in dataclasses.fields(cls)}
        for key, value in table.items():
            if key not in field_types:
                logger.warning("Ignoring unknown configuration key: %s", key)
                continue
            known[key] = value

        if "sort_keys" in known and not isinstance(known["sort_keys"], bool):
            raise ConfigError(f"sort_keys must be a boolean, got {known['sort_keys']!r}")
        if "csv_line_terminator" in known and not isinstance(known["csv_line_terminator"], str):
            raise ConfigError(
                f"csv_line_terminator must be a string, got {known['csv_line_terminator']!r}"
            )
        if "sql_keyword_case" in known:
            case = known["sql_keyword_case"]
            if isinstance(case, str) and case.lower() in ("", "preserve", "none"):
                known["sql_keyword_case"] = None
        return cls(**known)


DEFAULT_RENDER_OPTIONS: Final[RenderOptions] = RenderOptions()
