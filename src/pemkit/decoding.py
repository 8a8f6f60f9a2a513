"""Body decoding: strip line breaks and spaces, then strict padded base64."""

from __future__ import annotations

import base64
from functools import cache
import re
from typing import TYPE_CHECKING

from pemkit.config import DEFAULT_DELIMITERS
from pemkit.errors import InvalidEncodingError

if TYPE_CHECKING:
    from pemkit.config import Delimiters
    from pemkit.types import Candidate

# Whole groups of four, then at most one padded final group.
_PADDED_BASE64 = re.compile(
    r"(?:[A-Za-z0-9+/]{4})*(?:[A-Za-z0-9+/]{2}==|[A-Za-z0-9+/]{3}=)?"
)


@cache
def _deletion_table(strip_chars: str) -> dict[int, None]:
    return dict.fromkeys(map(ord, strip_chars))


def normalize_body(body: str, delimiters: Delimiters | None = None) -> str:
    """Remove every strip character from ``body``.

    With the default delimiters these are carriage return, line feed and
    plain space. Tabs and other whitespace are left in place.
    """
    d = delimiters or DEFAULT_DELIMITERS
    return body.translate(_deletion_table(d.strip_chars))


def decode_body(
    body: str,
    delimiters: Delimiters | None = None,
    *,
    candidate: Candidate | None = None,
) -> bytes:
    """Decode a raw section body to bytes.

    Decoding is strict: only ``A-Z a-z 0-9 + /`` are accepted, the length
    must be a multiple of four, and ``=`` may only pad the final group.

    Args:
        body: Raw body text as captured by the scanner.
        delimiters: Supplies the strip set; defaults to the standard one.
        candidate: Attached to the raised error for diagnostics.

    Raises:
        InvalidEncodingError: If the normalized body is not valid base64.
    """
    data = normalize_body(body, delimiters)
    if _PADDED_BASE64.fullmatch(data) is None:
        raise InvalidEncodingError(
            "Section body is not valid base64: bad length, character or padding",
            hint="Bodies may contain only base64 characters, line breaks and spaces.",
            candidate=candidate,
        )
    try:
        return base64.b64decode(data, validate=True)
    except ValueError as e:
        # binascii.Error is a ValueError; non-ASCII text raises ValueError directly
        raise InvalidEncodingError(
            f"Section body is not valid base64: {e}",
            hint="Bodies may contain only base64 characters, line breaks and spaces.",
            candidate=candidate,
        ) from e
