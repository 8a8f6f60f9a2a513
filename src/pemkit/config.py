"""Delimiter configuration: a frozen pydantic schema with literal defaults.

The defaults reproduce the standard textual enclosure exactly:

    -----BEGIN <label>-----
    <base64 body>
    -----END <label>-----

Callers that need a different enclosure build one with
``resolve_delimiters`` and pass it as ``delimiters=`` to any entry point.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from pemkit.errors import ConfigurationError

# Characters of the padded base64 alphabet; none of these may be stripped.
_BASE64_ALPHABET = frozenset(
    "ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz0123456789+/="
)


class Delimiters(BaseModel):
    """Literal markers framing a section, and the body characters to strip.

    Attributes:
        begin_marker: Text introducing the opening label.
        end_marker: Text introducing the closing label.
        bracket: Text terminating either label.
        strip_chars: Characters removed from the body before decoding.
            Line breaks and plain spaces only; tabs are kept and make the
            body undecodable.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    begin_marker: str = Field(default="-----BEGIN ", min_length=1)
    end_marker: str = Field(default="-----END ", min_length=1)
    bracket: str = Field(default="-----", min_length=1)
    strip_chars: str = Field(default="\r\n ")

    @field_validator("strip_chars")
    @classmethod
    def reject_alphabet_chars(cls, v: str) -> str:
        """Reject base64 alphabet characters in the strip set."""
        bad = sorted(set(v) & _BASE64_ALPHABET)
        if bad:
            raise ValueError(
                f"strip_chars must not contain base64 characters, got {''.join(bad)!r}"
            )
        return v

    @field_validator("end_marker")
    @classmethod
    def reject_leading_whitespace(cls, v: str) -> str:
        """Reject leading whitespace; the body begins after a skipped whitespace run."""
        if v[:1].isspace():
            raise ValueError("end_marker must not start with whitespace")
        return v


DEFAULT_DELIMITERS = Delimiters()


def resolve_delimiters(**overrides: Any) -> Delimiters:
    """Build a validated ``Delimiters`` from keyword overrides.

    Args:
        **overrides: Any subset of the ``Delimiters`` fields.

    Returns:
        The frozen configuration; ``DEFAULT_DELIMITERS`` when no overrides
        are given.

    Raises:
        ConfigurationError: If a field is unknown or fails validation.
    """
    if not overrides:
        return DEFAULT_DELIMITERS
    try:
        return Delimiters(**overrides)
    except ValidationError as e:
        fields = ", ".join(
            ".".join(str(part) for part in err["loc"]) or "<root>"
            for err in e.errors()
        )
        raise ConfigurationError(
            f"Invalid delimiter configuration ({fields})",
            hint=f"Valid fields: {', '.join(Delimiters.model_fields)}.",
        ) from e
