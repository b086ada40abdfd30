# topmark:header:start
#
#   project      : Pastex
#   file         : keyvalue.py
#   file_relpath : src/pastex/detectors/keyvalue.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Detectors for ``KEY=value`` style formats (ENV and INI)."""

from __future__ import annotations


def looks_like_env(text: str) -> bool:
    """True when every non-blank, non-comment line holds an ``=``.

    At least one such line is required so that a comment-only text is not ENV.
    The check runs before the INI probe, whose parser accepts the same shape.
    """
    assignments: int = 0
    for raw in text.split("\n"):
        line: str = raw.strip()
        if not line or line.startswith("#"):
            continue
        if "=" not in line:
            return False
        assignments += 1
    return assignments > 0


def is_ini_candidate(text: str) -> bool:
    """Pre-check gating the INI parse: an ``=`` somewhere and no ``{`` anywhere."""
    return "=" in text and "{" not in text
