# topmark:header:start
#
#   project      : Pastex
#   file         : __init__.py
#   file_relpath : src/pastex/detectors/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Cheap content detectors used by the classifier cascade.

Detectors are fast, side-effect free predicates over (stripped) text. Some are
*pre-checks* that gate a real parse attempt (JSON envelope, markup start, INI
candidate); others are purely heuristic and decide a format on their own (YAML
shape, ENV lines, SQL keywords, Markdown signals).

Relationship:
    * [`pastex.classifier`][] orders these detectors and combines them with
      parse probes from [`pastex.dispatch`][].
"""

from __future__ import annotations
