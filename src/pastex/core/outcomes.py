# topmark:header:start
#
#   project      : Pastex
#   file         : outcomes.py
#   file_relpath : src/pastex/core/outcomes.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Result records produced by probes and by the combined classify+parse call.

`ProbeResult` is the option-like value returned by a non-throwing parse attempt;
the classifier cascade inspects it instead of catching exceptions itself.

`ValidationOutcome` is what front ends consume after every (debounced) text
change. A new outcome is built for each call; outcomes are never mutated.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from pastex.formats.base import FormatId

if TYPE_CHECKING:
    from pastex.core.values import StructuredValue


@dataclass(frozen=True)
class ProbeResult:
    """Outcome of a single non-throwing parse attempt.

    Attributes:
        ok (bool): True when the parser accepted the text.
        value (StructuredValue): The parsed value (meaningful only when ``ok``).
        error (str | None): The native parser diagnostic when not ``ok``.
    """

    ok: bool
    value: StructuredValue = None
    error: str | None = None

    @classmethod
    def success(cls, value: StructuredValue) -> ProbeResult:
        """Build a successful result carrying ``value``."""
        return cls(ok=True, value=value)

    @classmethod
    def failure(cls, error: str) -> ProbeResult:
        """Build a failed result carrying the parser diagnostic."""
        return cls(ok=False, error=error)


@dataclass(frozen=True)
class ValidationOutcome:
    """Result of classifying and parsing one input text.

    Attributes:
        is_valid (bool): False only when the parser for ``detected_format`` rejected
            the text.
        detected_format (FormatId): The classified (or explicitly requested) format.
        parsed_value (StructuredValue): The parsed value; None when invalid or when the
            input was empty. Document formats carry the original text.
        error_message (str | None): The native parser diagnostic when invalid.
    """

    is_valid: bool
    detected_format: FormatId
    parsed_value: StructuredValue = None
    error_message: str | None = None

    @classmethod
    def empty(cls) -> ValidationOutcome:
        """The outcome for empty or whitespace-only input."""
        return cls(is_valid=True, detected_format=FormatId.TEXT)

    @classmethod
    def valid(cls, format_id: FormatId, value: StructuredValue) -> ValidationOutcome:
        """A successful parse of ``format_id`` yielding ``value``."""
        return cls(is_valid=True, detected_format=format_id, parsed_value=value)

    @classmethod
    def invalid(cls, format_id: FormatId, message: str) -> ValidationOutcome:
        """A rejected parse of ``format_id`` with the parser's ``message``."""
        return cls(is_valid=False, detected_format=format_id, error_message=message)

    @property
    def has_value(self) -> bool:
        """True when a parsed value is available for rendering."""
        return self.is_valid and self.parsed_value is not None

    def to_dict(self) -> dict[str, Any]:
        """Return a JSON-serializable representation (machine output)."""
        return {
            "is_valid": self.is_valid,
            "detected_format": self.detected_format.value,
            "parsed_value": self.parsed_value,
            "error_message": self.error_message,
        }
