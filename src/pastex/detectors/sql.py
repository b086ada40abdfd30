# topmark:header:start
#
#   project      : Pastex
#   file         : sql.py
#   file_relpath : src/pastex/detectors/sql.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Lexical SQL detector (no parse attempt)."""

from __future__ import annotations

import re
from typing import Final

SQL_KEYWORDS: Final[tuple[str, ...]] = (
    "SELECT",
    "INSERT",
    "UPDATE",
    "DELETE",
    "CREATE",
    "DROP",
    "ALTER",
)

_SQL_RE: Final[re.Pattern[str]] = re.compile(
    r"\b(?:" + "|".join(SQL_KEYWORDS) + r")\b",
    re.IGNORECASE,
)


def looks_like_sql(text: str) -> bool:
    """True when any statement keyword appears as a whole word, in any case."""
    return _SQL_RE.search(text) is not None
