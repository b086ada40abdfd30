# topmark:header:start
#
#   project      : Pastex
#   file         : classifier.py
#   file_relpath : src/pastex/classifier.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Format classifier.

`classify` runs an ordered cascade of stages over the stripped input. Each stage
pairs a `FormatId` with a predicate; the first predicate that returns True
decides the format. Stages backed by a real parser use non-throwing probes
([`pastex.dispatch.try_parse`][]), purely lexical stages use the detectors in
[`pastex.detectors`][]. When nothing matches the text is `FormatId.TEXT`.

Order matters:

* JSON is probed first, so ``{"a": 1}`` is never reported as YAML.
* TOML is probed before YAML, whose grammar would accept most TOML documents
  as plain scalars.
* ENV is checked before INI because the INI parser accepts the same shape.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Callable, Final

from pastex.config.logging import get_logger
from pastex.detectors.keyvalue import is_ini_candidate, looks_like_env
from pastex.detectors.markdown import looks_like_markdown
from pastex.detectors.sql import looks_like_sql
from pastex.detectors.structural import has_json_envelope, looks_like_html, starts_with_markup
from pastex.detectors.yaml_like import looks_like_yaml
from pastex.dispatch import try_parse
from pastex.formats.base import FormatId

if TYPE_CHECKING:
    from pastex.config.logging import PastexLogger
    from pastex.core.outcomes import ProbeResult

logger: PastexLogger = get_logger(__name__)

StagePredicate = Callable[[str], bool]


def _is_json(text: str) -> bool:
    return has_json_envelope(text) and try_parse(text, FormatId.JSON).ok


def _is_html(text: str) -> bool:
    return starts_with_markup(text) and looks_like_html(text)


def _is_xml(text: str) -> bool:
    return starts_with_markup(text) and try_parse(text, FormatId.XML).ok


def _is_toml(text: str) -> bool:
    probe: ProbeResult = try_parse(text, FormatId.TOML)
    return probe.ok and isinstance(probe.value, dict) and bool(probe.value)


def _is_yaml(text: str) -> bool:
    probe: ProbeResult = try_parse(text, FormatId.YAML)
    return probe.ok and isinstance(probe.value, (dict, list))


def _is_ini(text: str) -> bool:
    if not is_ini_candidate(text):
        return False
    probe: ProbeResult = try_parse(text, FormatId.INI)
    return probe.ok and bool(probe.value)


STAGES: Final[tuple[tuple[FormatId, StagePredicate], ...]] = (
    (FormatId.JSON, _is_json),
    (FormatId.HTML, _is_html),
    (FormatId.XML, _is_xml),
    (FormatId.TOML, _is_toml),
    (FormatId.YAML, _is_yaml),
    (FormatId.YAML, looks_like_yaml),
    (FormatId.ENV, looks_like_env),
    (FormatId.INI, _is_ini),
    (FormatId.SQL, looks_like_sql),
    (FormatId.MARKDOWN, looks_like_markdown),
)


def classify(text: str) -> FormatId:
    """Return the most likely format of ``text``.

    Deterministic and total: empty input, and anything no stage recognizes,
    classifies as `FormatId.TEXT`.
    """
    stripped: str = text.strip()
    if not stripped:
        return FormatId.TEXT

    for format_id, predicate in STAGES:
        logger.trace("Classifier stage %s (%s)", format_id.value, predicate.__name__)
        if predicate(stripped):
            logger.debug("Classified input as %s", format_id.value)
            return format_id

    logger.debug("No stage matched; classified input as %s", FormatId.TEXT.value)
    return FormatId.TEXT
