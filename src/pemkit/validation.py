"""Label validation: a section's closing label must repeat its opening label."""

from __future__ import annotations

from typing import TYPE_CHECKING

from pemkit.errors import LabelMismatchError

if TYPE_CHECKING:
    from pemkit.types import Candidate


def check_labels(candidate: Candidate) -> Candidate:
    """Return ``candidate`` unchanged if its labels are identical.

    Comparison is exact: case, spacing and every other character count.
    Label content itself is not constrained.

    Raises:
        LabelMismatchError: If the opening and closing labels differ.
    """
    if candidate.labels_match:
        return candidate
    raise LabelMismatchError(
        f"Section label mismatch: BEGIN {candidate.begin_label!r} "
        f"closed by END {candidate.end_label!r}",
        begin_label=candidate.begin_label,
        end_label=candidate.end_label,
        candidate=candidate,
    )
