# topmark:header:start
#
#   project      : Pastex
#   file         : values.py
#   file_relpath : src/pastex/core/values.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""The structured value model shared by all data codecs.

A `StructuredValue` is the plain-Python tree every data-like format parses into:
``None``, ``bool``, ``int``/``float``, ``str``, ``dict[str, ...]`` (insertion
ordered) and ``list[...]``. Parsers for YAML and TOML can produce richer objects
(dates, sets, bytes, non-string keys, tomlkit containers); `normalize` folds those
into the plain union so downstream serializers never see library types.
"""

from __future__ import annotations

import base64
import datetime as dt
from collections.abc import Mapping
from typing import Union

StructuredValue = Union[
    None,
    bool,
    int,
    float,
    str,
    "dict[str, StructuredValue]",
    "list[StructuredValue]",
]


def key_to_str(key: object) -> str:
    """Render a mapping key the way a JSON object key would look."""
    if isinstance(key, str):
        return key
    if key is None:
        return "null"
    if isinstance(key, bool):
        return "true" if key else "false"
    if isinstance(key, (dt.date, dt.time)):
        return key.isoformat()
    return str(key)


def normalize(value: object) -> StructuredValue:
    """Fold a parser result into the plain `StructuredValue` union.

    Args:
        value (object): The raw value produced by a format library.

    Returns:
        StructuredValue: An equivalent value built only from plain Python types.
            Dates and times become ISO-8601 strings, sets and tuples become lists,
            bytes become base64 text and mapping keys become strings.
    """
    if value is None or isinstance(value, bool):
        return value
    if isinstance(value, str):
        return str(value)
    if isinstance(value, (int, float)):
        # tomlkit Integer/Float subclass int/float; collapse to the builtin type.
        return int(value) if isinstance(value, int) else float(value)
    if isinstance(value, (dt.datetime, dt.date, dt.time)):
        return value.isoformat()
    if isinstance(value, (bytes, bytearray)):
        return base64.b64encode(bytes(value)).decode("ascii")
    if isinstance(value, Mapping):
        return {key_to_str(k): normalize(v) for k, v in value.items()}
    if isinstance(value, (list, tuple, set, frozenset)):
        return [normalize(v) for v in value]
    return str(value)
