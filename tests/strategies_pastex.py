# topmark:header:start
#
#   project      : Pastex
#   file         : strategies_pastex.py
#   file_relpath : tests/strategies_pastex.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

# pyright: strict

"""Hypothesis strategies for generating pasted-text shapes and JSON values.

The generators stay small on purpose: they cover the shapes the classifier and
the YAML repair care about (indentation, ``key: value`` lines, line endings)
without exploding into megabyte inputs.
"""

from __future__ import annotations

from typing import Any, Literal

from hypothesis import strategies as st

LINE_ENDINGS: tuple[str, ...] = ("\n", "\r\n")

EXCLUDED_CATEGORIES: tuple[Literal["Cs"], ...] = ("Cs",)

_KEYS = st.from_regex(r"[a-z][a-z0-9_-]{0,8}", fullmatch=True)
_SCALARS = st.one_of(
    st.integers(min_value=-1000, max_value=1000).map(str),
    st.sampled_from(["true", "false", "null", "~", "'quoted'", '"dq"', "|", ">", ""]),
    st.text(alphabet="abc xyz:-#", max_size=8),
)


def s_text(max_size: int = 200) -> st.SearchStrategy[str]:
    """Arbitrary text without lone surrogates."""
    return st.text(
        alphabet=st.characters(exclude_categories=EXCLUDED_CATEGORIES),
        max_size=max_size,
    )


@st.composite
def s_yamlish(draw: st.DrawFn) -> str:
    """Lines shaped like block YAML with random indentation and line endings."""
    lines: list[str] = []
    for _ in range(draw(st.integers(min_value=0, max_value=12))):
        indent: str = draw(st.sampled_from(["", "  ", "    ", "\t", " "]))
        kind: str = draw(st.sampled_from(["pair", "opener", "item", "comment", "blank"]))
        if kind == "pair":
            lines.append(f"{indent}{draw(_KEYS)}: {draw(_SCALARS)}")
        elif kind == "opener":
            lines.append(f"{indent}{draw(_KEYS)}:")
        elif kind == "item":
            lines.append(f"{indent}- {draw(_SCALARS)}")
        elif kind == "comment":
            lines.append(f"{indent}# note")
        else:
            lines.append(indent)
    eol: str = draw(st.sampled_from(LINE_ENDINGS))
    return eol.join(lines)


def s_json_scalars() -> st.SearchStrategy[Any]:
    """JSON scalars; floats are finite so they survive strict parsing."""
    return st.one_of(
        st.none(),
        st.booleans(),
        st.integers(),
        st.floats(allow_nan=False, allow_infinity=False),
        s_text(max_size=20),
    )


def s_json_containers() -> st.SearchStrategy[Any]:
    """Nested JSON objects and arrays (the top level is always a container)."""
    values = st.recursive(
        s_json_scalars(),
        lambda children: st.one_of(
            st.lists(children, max_size=5),
            st.dictionaries(s_text(max_size=10), children, max_size=5),
        ),
        max_leaves=20,
    )
    return st.one_of(
        st.lists(values, max_size=5),
        st.dictionaries(s_text(max_size=10), values, max_size=5),
    )
