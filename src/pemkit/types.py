"""Value types flowing through the extraction pipeline."""

from __future__ import annotations

import dataclasses
from enum import Enum

from pemkit.errors import ExtractionError  # noqa: TC001 - used at runtime in dataclass


@dataclasses.dataclass(frozen=True, slots=True)
class Pem:
    """A decoded section: its label and the raw bytes of its body.

    Attributes:
        label: Label text taken verbatim from the opening delimiter.
        payload: Decoded body bytes, owned by this record.
    """

    label: str
    payload: bytes

    def __repr__(self) -> str:
        return f"Pem(label={self.label!r}, payload=<{len(self.payload)} bytes>)"


@dataclasses.dataclass(frozen=True, slots=True)
class Candidate:
    """One syntactic match produced by the scanner.

    Fields are exact substrings of the input; nothing is trimmed. ``span``
    covers the whole match including trailing whitespace, as a half-open
    ``(start, end)`` pair of string offsets.
    """

    begin_label: str
    body: str
    end_label: str
    span: tuple[int, int]

    def __post_init__(self) -> None:
        start, end = self.span
        if start < 0 or end < start:
            raise ValueError(f"Invalid candidate span: {self.span}")

    @property
    def labels_match(self) -> bool:
        return self.begin_label == self.end_label


class RejectReason(str, Enum):
    LABEL_MISMATCH = "label_mismatch"
    INVALID_ENCODING = "invalid_encoding"


@dataclasses.dataclass(frozen=True, slots=True)
class Accepted:
    """A candidate that validated and decoded."""

    record: Pem
    candidate: Candidate


@dataclasses.dataclass(frozen=True, slots=True)
class Rejected:
    """A candidate dropped by validation or decoding, with the cause."""

    candidate: Candidate
    reason: RejectReason
    error: ExtractionError


Outcome = Accepted | Rejected
