"""Extraction pipeline: scan -> validate labels -> decode body.

``parse`` and ``parse_many`` treat every failure the same way: the section
simply produces no record. ``parse_strict`` and ``diagnose`` expose the
cause for callers that want diagnostics.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from pemkit.config import DEFAULT_DELIMITERS
from pemkit.decoding import decode_body
from pemkit.errors import (
    ExtractionError,
    InvalidEncodingError,
    LabelMismatchError,
    NoSectionFoundError,
)
from pemkit.scanner import iter_candidates
from pemkit.types import Accepted, Pem, Rejected, RejectReason
from pemkit.validation import check_labels

if TYPE_CHECKING:
    from collections.abc import Iterator

    from pemkit.config import Delimiters
    from pemkit.types import Candidate, Outcome

log = logging.getLogger(__name__)


def _require_text(text: object) -> str:
    if not isinstance(text, str):
        raise TypeError(f"text must be a str, got {type(text).__name__}")
    return text


def evaluate(candidate: Candidate, delimiters: Delimiters | None = None) -> Outcome:
    """Run one candidate through label validation and body decoding."""
    try:
        check_labels(candidate)
        payload = decode_body(candidate.body, delimiters, candidate=candidate)
    except LabelMismatchError as e:
        return _rejected(candidate, RejectReason.LABEL_MISMATCH, e)
    except InvalidEncodingError as e:
        return _rejected(candidate, RejectReason.INVALID_ENCODING, e)
    record = Pem(label=candidate.begin_label, payload=payload)
    return Accepted(record=record, candidate=candidate)


def _rejected(
    candidate: Candidate, reason: RejectReason, error: ExtractionError
) -> Rejected:
    log.debug(
        "Dropping section at %d-%d (%s): BEGIN %r / END %r",
        candidate.span[0],
        candidate.span[1],
        reason.value,
        candidate.begin_label,
        candidate.end_label,
    )
    return Rejected(candidate=candidate, reason=reason, error=error)


def parse(text: str, *, delimiters: Delimiters | None = None) -> Pem | None:
    """Decode the first section of ``text``.

    Only the first syntactic match is attempted. If it has mismatched
    labels or an undecodable body the result is ``None``, even when a
    later section in ``text`` is valid.

    Example:
        pem = parse(key_text)
        if pem is not None:
            print(pem.label, len(pem.payload))
    """
    first = next(iter_candidates(_require_text(text), delimiters), None)
    if first is None:
        return None
    outcome = evaluate(first, delimiters)
    return outcome.record if isinstance(outcome, Accepted) else None


def iter_pems(text: str, *, delimiters: Delimiters | None = None) -> Iterator[Pem]:
    """Lazily yield every successfully decoded section, in input order."""
    for candidate in iter_candidates(_require_text(text), delimiters):
        outcome = evaluate(candidate, delimiters)
        if isinstance(outcome, Accepted):
            yield outcome.record


def parse_many(text: str, *, delimiters: Delimiters | None = None) -> list[Pem]:
    """Decode every valid section of ``text``, in input order.

    Sections with mismatched labels or undecodable bodies are omitted.
    Returns an empty list when nothing usable is found.
    """
    return list(iter_pems(text, delimiters=delimiters))


def parse_strict(text: str, *, delimiters: Delimiters | None = None) -> Pem:
    """Like ``parse``, but raise instead of returning ``None``.

    Raises:
        NoSectionFoundError: If ``text`` contains no complete section.
        LabelMismatchError: If the first section's labels differ.
        InvalidEncodingError: If the first section's body is not base64.
    """
    first = next(iter_candidates(_require_text(text), delimiters), None)
    if first is None:
        d = delimiters or DEFAULT_DELIMITERS
        raise NoSectionFoundError(
            "No BEGIN/END section found in input",
            hint=(
                f"Expected '{d.begin_marker}<label>{d.bracket}' ... "
                f"'{d.end_marker}<label>{d.bracket}'."
            ),
        )
    outcome = evaluate(first, delimiters)
    if isinstance(outcome, Rejected):
        raise outcome.error
    return outcome.record


def diagnose(text: str, *, delimiters: Delimiters | None = None) -> list[Outcome]:
    """Return one ``Accepted`` or ``Rejected`` outcome per section found."""
    return [
        evaluate(candidate, delimiters)
        for candidate in iter_candidates(_require_text(text), delimiters)
    ]
