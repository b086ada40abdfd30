# topmark:header:start
#
#   project      : Pastex
#   file         : keyvalue.py
#   file_relpath : src/pastex/codecs/keyvalue.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Codecs for ``key=value`` formats: INI files and ENV (dotenv) files.

INI parsing uses `configparser` in a permissive mode: interpolation off, key
case preserved, ``=`` as the only delimiter, duplicate sections and keys
allowed (last one wins), and bare keys allowed (they parse to ``None``). Keys
that appear before the first ``[section]`` header land at the top level; each
section becomes a nested mapping. ``[DEFAULT]`` is an ordinary section.

ENV parsing is line oriented: split on the first ``=``, trim both sides, skip
comments, blank lines and lines without ``=``. A repeated key overwrites the
earlier value but keeps its original position.
"""

from __future__ import annotations

import configparser
import json
from typing import TYPE_CHECKING, Final

from pastex.codecs.base import Codec
from pastex.codecs.registry import register_codec
from pastex.core.errors import ParseError, SerializeError
from pastex.formats.base import FormatId

if TYPE_CHECKING:
    from pastex.config.model import RenderOptions
    from pastex.core.values import StructuredValue

# Synthetic section names; configparser rejects neither, INI text never contains NUL.
_ROOT_SECTION: Final[str] = "\x00root"
_DEFAULT_SECTION: Final[str] = "\x00defaults"


def _ini_value(value: StructuredValue) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (dict, list)):
        return json.dumps(value, ensure_ascii=False, separators=(",", ":"))
    # Continuation lines must be indented to stay inside the value.
    return str(value).replace("\n", "\n\t")


def _ini_entry(key: str, value: StructuredValue) -> str:
    return key if value is None else f"{key} = {_ini_value(value)}"


def _write_section(name: str, table: dict[str, StructuredValue], out: list[str]) -> None:
    nested: list[tuple[str, dict[str, StructuredValue]]] = []
    if out:
        out.append("")
    out.append(f"[{name}]")
    for key, value in table.items():
        if isinstance(value, dict):
            nested.append((key, value))
        else:
            out.append(_ini_entry(key, value))
    for key, sub in nested:
        _write_section(f"{name}.{key}", sub, out)


@register_codec(FormatId.INI)
class IniCodec(Codec):
    """INI files with optional top-level keys."""

    def parse(self, text: str) -> StructuredValue:
        parser = configparser.ConfigParser(
            interpolation=None,
            strict=False,
            delimiters=("=",),
            allow_no_value=True,
            default_section=_DEFAULT_SECTION,
        )
        parser.optionxform = str  # type: ignore[assignment,method-assign]
        try:
            parser.read_string(f"[{_ROOT_SECTION}]\n{text}")
        except configparser.ParsingError as exc:
            # Line numbers are shifted by the synthetic root header.
            details: str = "; ".join(f"[line {n - 1}]: {line}" for n, line in exc.errors)
            raise ParseError(self.format_id, f"Source contains parsing errors: {details}") from exc
        except configparser.Error as exc:
            raise ParseError(self.format_id, str(exc)) from exc

        result: dict[str, StructuredValue] = dict(parser.items(_ROOT_SECTION, raw=True))
        for section in parser.sections():
            if section != _ROOT_SECTION:
                result[section] = dict(parser.items(section, raw=True))
        return result

    def dump(self, value: StructuredValue, options: RenderOptions) -> str:
        if not isinstance(value, dict):
            raise SerializeError(
                self.format_id, f"INI output needs a mapping, not {type(value).__name__}"
            )
        out: list[str] = []
        sections: list[tuple[str, dict[str, StructuredValue]]] = []
        for key, item in value.items():
            if isinstance(item, dict):
                sections.append((key, item))
            else:
                out.append(_ini_entry(key, item))
        for name, table in sections:
            _write_section(name, table, out)
        return "\n".join(out) + "\n" if out else ""


@register_codec(FormatId.ENV)
class EnvCodec(Codec):
    """Dotenv-style ``KEY=value`` files."""

    def parse(self, text: str) -> StructuredValue:
        result: dict[str, StructuredValue] = {}
        for line in text.split("\n"):
            if line.lstrip().startswith("#"):
                continue
            key, sep, rest = line.partition("=")
            key = key.strip()
            if not sep or not key:
                continue
            result[key] = rest.strip()
        return result

    def dump(self, value: StructuredValue, options: RenderOptions) -> str:
        if not isinstance(value, dict):
            raise SerializeError(
                self.format_id, f"ENV output needs a mapping, not {type(value).__name__}"
            )
        lines: list[str] = []
        for key, item in value.items():
            if item is None:
                rendered = ""
            elif isinstance(item, bool):
                rendered = "true" if item else "false"
            elif isinstance(item, str) and "\n" not in item:
                rendered = item
            else:
                rendered = json.dumps(item, ensure_ascii=False, separators=(",", ":"))
            lines.append(f"{key}={rendered}")
        return "\n".join(lines)
