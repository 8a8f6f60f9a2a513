"""Exception hierarchy for pemkit.

The default entry points never raise these for malformed input; they are
surfaced only by ``parse_strict`` and recorded on ``Rejected`` outcomes.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from pemkit.types import Candidate


class PemError(Exception):
    """Base exception for all pemkit errors."""

    def __init__(self, message: str, *, hint: str | None = None) -> None:
        super().__init__(message)
        self.hint = hint


class ConfigurationError(PemError):
    """Delimiter configuration failed validation."""


class ExtractionError(PemError):
    """A section could not be turned into a record."""

    def __init__(
        self,
        message: str,
        *,
        hint: str | None = None,
        candidate: Candidate | None = None,
    ) -> None:
        super().__init__(message, hint=hint)
        self.candidate = candidate


class NoSectionFoundError(ExtractionError):
    """The input contains no complete BEGIN/END section."""


class LabelMismatchError(ExtractionError):
    """Opening and closing labels of a section differ."""

    def __init__(
        self,
        message: str,
        *,
        begin_label: str,
        end_label: str,
        hint: str | None = None,
        candidate: Candidate | None = None,
    ) -> None:
        super().__init__(message, hint=hint, candidate=candidate)
        self.begin_label = begin_label
        self.end_label = end_label


class InvalidEncodingError(ExtractionError):
    """Section body is not valid padded base64."""
