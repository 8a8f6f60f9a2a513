"""Section scanner: locate delimited regions in arbitrary text.

The scan is one forward pass built on literal substring searches. Each
step takes the nearest occurrence of the next delimiter, which yields the
same regions as the non-greedy DOTALL pattern

    BEGIN (?P<begin>.*?)BRACKET \\s* (?P<body>.*?)END (?P<end>.*?)BRACKET \\s*

without its backtracking cost. When a BEGIN marker has no complete
section after it, no later BEGIN marker can have one either, so the scan
stops there. The equivalence relies on END never starting with whitespace,
which ``Delimiters`` enforces.
"""

from __future__ import annotations

from functools import cache
import logging
import re
from typing import TYPE_CHECKING

from pemkit.config import DEFAULT_DELIMITERS
from pemkit.types import Candidate

if TYPE_CHECKING:
    from collections.abc import Iterator

    from pemkit.config import Delimiters

log = logging.getLogger(__name__)


@cache
def _whitespace_run() -> re.Pattern[str]:
    """Compile the whitespace-skipping pattern once, on first use."""
    return re.compile(r"\s*")


def _skip_whitespace(text: str, pos: int) -> int:
    # \s* always matches, possibly empty
    return _whitespace_run().match(text, pos).end()  # type: ignore[union-attr]


def iter_candidates(
    text: str, delimiters: Delimiters | None = None
) -> Iterator[Candidate]:
    """Yield every section-shaped region of ``text``, left to right.

    Regions never overlap: scanning resumes where the previous match,
    including its trailing whitespace, ended.

    Args:
        text: Input text to scan.
        delimiters: Markers to look for. Defaults to the standard
            ``-----BEGIN``/``-----END`` enclosure.

    Yields:
        ``Candidate`` regions with untrimmed labels and body.
    """
    d = delimiters or DEFAULT_DELIMITERS
    begin_marker, end_marker, bracket = d.begin_marker, d.end_marker, d.bracket

    pos = 0
    count = 0
    while True:
        start = text.find(begin_marker, pos)
        if start < 0:
            break

        label_start = start + len(begin_marker)
        label_end = text.find(bracket, label_start)
        if label_end < 0:
            log.debug("Unterminated opening label at offset %d", start)
            break

        body_start = _skip_whitespace(text, label_end + len(bracket))
        body_end = text.find(end_marker, body_start)
        if body_end < 0:
            log.debug("No closing marker after offset %d", start)
            break

        end_label_start = body_end + len(end_marker)
        end_label_end = text.find(bracket, end_label_start)
        if end_label_end < 0:
            log.debug("Unterminated closing label at offset %d", body_end)
            break

        end = _skip_whitespace(text, end_label_end + len(bracket))
        count += 1
        yield Candidate(
            begin_label=text[label_start:label_end],
            body=text[body_start:body_end],
            end_label=text[end_label_start:end_label_end],
            span=(start, end),
        )
        pos = end

    log.debug("Scan finished with %d candidate(s)", count)
