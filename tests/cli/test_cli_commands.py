# topmark:header:start
#
#   project      : Pastex
#   file         : test_cli_commands.py
#   file_relpath : tests/cli/test_cli_commands.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""End-to-end tests for the Pastex CLI commands."""

from __future__ import annotations

import json
from typing import TYPE_CHECKING

from pastex.constants import PASTEX_VERSION
from pastex.formats.base import FormatId
from tests.cli.conftest import (
    assert_CONFIG_ERROR,
    assert_FILE_NOT_FOUND,
    assert_INVALID_INPUT,
    assert_SUCCESS,
    assert_USAGE_ERROR,
    run_cli,
    run_cli_in,
)
from tests.conftest import mark_cli, parametrize

if TYPE_CHECKING:
    from pathlib import Path

    from click.testing import Result


@mark_cli
def test_no_subcommand_prints_help() -> None:
    result: Result = run_cli(["--no-color"])
    assert_SUCCESS(result)
    assert "Hint:" in result.output
    assert "prettify" in result.output


@mark_cli
def test_version_plain() -> None:
    result: Result = run_cli(["--no-color", "version"])
    assert_SUCCESS(result)
    assert result.output.strip() == PASTEX_VERSION


@mark_cli
def test_version_json() -> None:
    result: Result = run_cli(["version", "--output-format", "json"])
    assert_SUCCESS(result)
    assert json.loads(result.output) == {"version": PASTEX_VERSION}


@mark_cli
def test_verbose_and_quiet_are_exclusive() -> None:
    result: Result = run_cli(["-v", "-q", "--no-color", "version"])
    assert_USAGE_ERROR(result)
    assert "mutually exclusive" in result.output


@mark_cli
def test_formats_json_lists_every_format() -> None:
    result: Result = run_cli(["formats", "--output-format", "json"])
    assert_SUCCESS(result)
    payload = json.loads(result.output)
    assert {entry["id"] for entry in payload} == {fid.value for fid in FormatId}
    assert all(set(entry) == {"id", "name"} for entry in payload)


@mark_cli
def test_formats_long_markdown_table() -> None:
    result: Result = run_cli(["--no-color", "formats", "--long", "--output-format", "markdown"])
    assert_SUCCESS(result)
    assert "# Supported Formats" in result.output
    assert "| Format" in result.output
    assert "`yaml`" in result.output
    assert ".yml" in result.output


@mark_cli
@parametrize(
    "text, expected",
    [
        ('{"a": 1}', "json"),
        ("name: pastex\nversion: 1\n", "yaml"),
        ("FOO=bar\nBAZ=qux\n", "env"),
        ("SELECT * FROM t", "sql"),
        ("just words", "text"),
    ],
)
def test_detect_from_stdin(text: str, expected: str) -> None:
    result: Result = run_cli(["--no-color", "detect"], input_text=text)
    assert_SUCCESS(result)
    assert result.output == f"{expected}\n"


@mark_cli
def test_detect_verbose_adds_metadata() -> None:
    result: Result = run_cli(["--no-color", "-v", "detect", "-"], input_text="<a><b/></a>")
    assert_SUCCESS(result)
    fields: list[str] = result.output.rstrip("\n").split("\t")
    assert fields[0] == "xml"
    assert fields[2] == "data"


@mark_cli
def test_detect_from_file(tmp_path: Path) -> None:
    (tmp_path / "snippet.txt").write_text("[server]\nhost=localhost\n", encoding="utf-8")
    result: Result = run_cli_in(tmp_path, ["--no-color", "detect", "snippet.txt"])
    assert_SUCCESS(result)
    assert result.output == "ini\n"


@mark_cli
def test_detect_missing_file(tmp_path: Path) -> None:
    result: Result = run_cli_in(tmp_path, ["--no-color", "detect", "missing.txt"])
    assert_FILE_NOT_FOUND(result)
    assert "missing.txt" in result.output


@mark_cli
def test_detect_rejects_non_utf8(tmp_path: Path) -> None:
    (tmp_path / "latin1.txt").write_bytes(b"caf\xe9 = 1\n")
    result: Result = run_cli_in(tmp_path, ["--no-color", "detect", "latin1.txt"])
    assert_INVALID_INPUT(result)
    assert "UTF-8" in result.output


@mark_cli
def test_validate_valid_input() -> None:
    result: Result = run_cli(["--no-color", "validate"], input_text='{"a": [1, 2]}')
    assert_SUCCESS(result)
    assert result.output == "valid json\n"


@mark_cli
def test_validate_quiet_prints_nothing() -> None:
    result: Result = run_cli(["--no-color", "-q", "validate"], input_text="a: 1\n")
    assert_SUCCESS(result)
    assert result.output == ""


@mark_cli
def test_validate_invalid_input() -> None:
    result: Result = run_cli(["--no-color", "validate", "--as", "json"], input_text="nope")
    assert_INVALID_INPUT(result)
    assert "Error: invalid json:" in result.output


@mark_cli
def test_validate_json_output() -> None:
    result: Result = run_cli(
        ["validate", "--as", "JSON", "--output-format", "json"], input_text="{oops"
    )
    assert_INVALID_INPUT(result)
    payload = json.loads(result.output)
    assert payload["is_valid"] is False
    assert payload["detected_format"] == "json"
    assert payload["parsed_value"] is None
    assert payload["error_message"]


@mark_cli
def test_unknown_format_is_a_click_usage_error() -> None:
    result: Result = run_cli(["--no-color", "validate", "--as", "nope"], input_text="x")
    assert result.exit_code == 2
    assert "nope" in result.output


@mark_cli
def test_prettify_json_with_overrides() -> None:
    result: Result = run_cli(
        ["--no-color", "prettify", "--no-config", "--indent", "4", "--sort-keys"],
        input_text='{"b": 1, "a": 2}',
    )
    assert_SUCCESS(result)
    assert result.output == '{\n    "a": 2,\n    "b": 1\n}\n'


@mark_cli
def test_prettify_repairs_yaml_and_warns() -> None:
    result: Result = run_cli(
        ["--no-color", "prettify", "--no-config"], input_text="a: 1\n    b: 2\n"
    )
    assert_SUCCESS(result)
    assert "a: 1\nb: 2\n" in result.output
    assert "not valid yaml" in result.output


@mark_cli
def test_prettify_discovers_config(tmp_path: Path) -> None:
    (tmp_path / "pastex.toml").write_text("indent = 4\nsort_keys = true\n", encoding="utf-8")
    result: Result = run_cli_in(tmp_path, ["--no-color", "prettify"], input_text='{"b":1,"a":2}')
    assert_SUCCESS(result)
    assert result.output == '{\n    "a": 2,\n    "b": 1\n}\n'


@mark_cli
def test_prettify_reads_tool_table_from_pyproject(tmp_path: Path) -> None:
    (tmp_path / "pyproject.toml").write_text(
        '[project]\nname = "demo"\n\n[tool.pastex]\nindent = 3\n', encoding="utf-8"
    )
    result: Result = run_cli_in(tmp_path, ["--no-color", "prettify"], input_text='{"a":1}')
    assert_SUCCESS(result)
    assert result.output == '{\n   "a": 1\n}\n'


@mark_cli
def test_prettify_no_config_ignores_discovered_file(tmp_path: Path) -> None:
    (tmp_path / "pastex.toml").write_text("indent = 4\n", encoding="utf-8")
    result: Result = run_cli_in(
        tmp_path, ["--no-color", "prettify", "--no-config"], input_text='{"a":1}'
    )
    assert_SUCCESS(result)
    assert result.output == '{\n  "a": 1\n}\n'


@mark_cli
def test_prettify_explicit_config_missing(tmp_path: Path) -> None:
    result: Result = run_cli_in(
        tmp_path, ["--no-color", "prettify", "--config", "nope.toml"], input_text='{"a":1}'
    )
    assert_FILE_NOT_FOUND(result)


@mark_cli
@parametrize(
    "content",
    [
        'indent = "wide"\n',
        "indent = [\n",
        'sql_keyword_case = "shout"\n',
    ],
)
def test_prettify_invalid_config(tmp_path: Path, content: str) -> None:
    (tmp_path / "pastex.toml").write_text(content, encoding="utf-8")
    result: Result = run_cli_in(tmp_path, ["--no-color", "prettify"], input_text='{"a":1}')
    assert_CONFIG_ERROR(result)
    assert "Error:" in result.output


@mark_cli
def test_prettify_empty_input_prints_nothing() -> None:
    result: Result = run_cli(["--no-color", "prettify", "--no-config"], input_text="  \n")
    assert_SUCCESS(result)
    assert result.output == ""


@mark_cli
@parametrize(
    "args, text, expected",
    [
        ([], '{ "a" : [1, 2] }', '{"a":[1,2]}\n'),
        (["--as", "xml"], "<a>\n  <b>1</b>\n</a>\n", "<a><b>1</b></a>\n"),
        (["--as", "sql"], "SELECT a -- c\nFROM t", "SELECT a FROM t\n"),
        ([], "name: x\n", "name: x\n"),
    ],
)
def test_minify(args: list[str], text: str, expected: str) -> None:
    result: Result = run_cli(["--no-color", "minify", *args], input_text=text)
    assert_SUCCESS(result)
    assert result.output == expected
