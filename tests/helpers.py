"""Builders for test inputs."""

from __future__ import annotations

import base64


def encode_body(payload: bytes, *, width: int = 64) -> str:
    """Return ``payload`` as base64 wrapped at ``width`` columns."""
    encoded = base64.b64encode(payload).decode("ascii")
    lines = [encoded[i : i + width] for i in range(0, len(encoded), width)]
    return "".join(f"{line}\n" for line in lines)


def make_section(
    label: str,
    payload: bytes,
    *,
    end_label: str | None = None,
    width: int = 64,
) -> str:
    """Build one BEGIN/END section around the encoded ``payload``."""
    closing = label if end_label is None else end_label
    return (
        f"-----BEGIN {label}-----\n"
        f"{encode_body(payload, width=width)}"
        f"-----END {closing}-----\n"
    )
