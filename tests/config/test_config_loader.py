# topmark:header:start
#
#   project      : Pastex
#   file         : test_config_loader.py
#   file_relpath : tests/config/test_config_loader.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for render option loading and discovery."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import pytest

from pastex.config.loader import discover_config_file, load_options_file, resolve_options
from pastex.config.model import DEFAULT_RENDER_OPTIONS, RenderOptions
from pastex.core.errors import ConfigError
from tests.conftest import parametrize

if TYPE_CHECKING:
    from pathlib import Path


def test_defaults() -> None:
    assert DEFAULT_RENDER_OPTIONS == RenderOptions(
        indent=2, sort_keys=False, sql_keyword_case=None, csv_line_terminator="\n"
    )


@parametrize(
    "kwargs",
    [
        {"indent": -1},
        {"indent": True},
        {"indent": "2"},
        {"sql_keyword_case": "shout"},
    ],
)
def test_invalid_options_raise(kwargs: dict[str, object]) -> None:
    with pytest.raises(ConfigError):
        RenderOptions(**kwargs)  # type: ignore[arg-type]


def test_replace_validates() -> None:
    assert DEFAULT_RENDER_OPTIONS.replace(indent=4).indent == 4
    with pytest.raises(ConfigError):
        DEFAULT_RENDER_OPTIONS.replace(indent=-3)


def test_from_toml_dict_ignores_unknown_keys(caplog: pytest.LogCaptureFixture) -> None:
    with caplog.at_level(logging.WARNING, logger="pastex.config.model"):
        options = RenderOptions.from_toml_dict({"indent": 3, "colour": "red"})
    assert options.indent == 3
    assert "colour" in caplog.text


@parametrize("case", ["preserve", "none", ""])
def test_from_toml_dict_keyword_case_preserve(case: str) -> None:
    assert RenderOptions.from_toml_dict({"sql_keyword_case": case}).sql_keyword_case is None


@parametrize(
    "table",
    [
        {"sort_keys": "yes"},
        {"csv_line_terminator": 1},
    ],
)
def test_from_toml_dict_type_errors(table: dict[str, object]) -> None:
    with pytest.raises(ConfigError):
        RenderOptions.from_toml_dict(table)


def test_load_pastex_toml(tmp_path: Path) -> None:
    path = tmp_path / "pastex.toml"
    path.write_text('indent = 4\nsql_keyword_case = "upper"\n', encoding="utf-8")
    assert load_options_file(path) == RenderOptions(indent=4, sql_keyword_case="upper")


def test_load_pyproject_without_table(tmp_path: Path) -> None:
    path = tmp_path / "pyproject.toml"
    path.write_text('[project]\nname = "demo"\n', encoding="utf-8")
    assert load_options_file(path) is None


def test_load_pyproject_non_table(tmp_path: Path) -> None:
    path = tmp_path / "pyproject.toml"
    path.write_text('[tool]\npastex = "oops"\n', encoding="utf-8")
    with pytest.raises(ConfigError, match="must be a table"):
        load_options_file(path)


def test_load_invalid_toml(tmp_path: Path) -> None:
    path = tmp_path / "pastex.toml"
    path.write_text("indent = = 2\n", encoding="utf-8")
    with pytest.raises(ConfigError, match="Invalid TOML"):
        load_options_file(path)


def test_discovery_walks_upward(tmp_path: Path) -> None:
    (tmp_path / "pastex.toml").write_text("indent = 4\n", encoding="utf-8")
    nested = tmp_path / "a" / "b"
    nested.mkdir(parents=True)
    assert discover_config_file(nested) == (tmp_path / "pastex.toml").resolve()


def test_discovery_prefers_pastex_toml(tmp_path: Path) -> None:
    (tmp_path / "pyproject.toml").write_text("[tool.pastex]\nindent = 3\n", encoding="utf-8")
    (tmp_path / "pastex.toml").write_text("indent = 4\n", encoding="utf-8")
    assert resolve_options(start=tmp_path).indent == 4


def test_discovery_skips_unrelated_pyproject(tmp_path: Path) -> None:
    (tmp_path / "pastex.toml").write_text("indent = 4\n", encoding="utf-8")
    nested = tmp_path / "project"
    nested.mkdir()
    (nested / "pyproject.toml").write_text('[project]\nname = "x"\n', encoding="utf-8")
    assert resolve_options(start=nested).indent == 4


def test_discovery_skips_broken_pyproject(tmp_path: Path) -> None:
    (tmp_path / "pastex.toml").write_text("indent = 5\n", encoding="utf-8")
    nested = tmp_path / "project"
    nested.mkdir()
    (nested / "pyproject.toml").write_text("[[[", encoding="utf-8")
    assert resolve_options(start=nested).indent == 5


def test_no_config_returns_defaults(tmp_path: Path) -> None:
    (tmp_path / "pastex.toml").write_text("indent = 4\n", encoding="utf-8")
    assert resolve_options(start=tmp_path, no_config=True) is DEFAULT_RENDER_OPTIONS


def test_explicit_path_wins(tmp_path: Path) -> None:
    (tmp_path / "pastex.toml").write_text("indent = 4\n", encoding="utf-8")
    explicit = tmp_path / "other.toml"
    explicit.write_text("indent = 1\n", encoding="utf-8")
    assert resolve_options(config_path=explicit, start=tmp_path).indent == 1
