"""pemkit: Extract labelled base64 payloads from PEM-style text.

Public API:
    - parse(): First section of the input, or None
    - parse_many(): Every valid section, in input order
    - parse_strict(): First section, raising on failure
    - diagnose(): Per-section outcomes with rejection reasons
    - Pem: Decoded record (label + payload bytes)
"""

from __future__ import annotations

import logging

from pemkit.config import DEFAULT_DELIMITERS, Delimiters, resolve_delimiters
from pemkit.errors import (
    ConfigurationError,
    ExtractionError,
    InvalidEncodingError,
    LabelMismatchError,
    NoSectionFoundError,
    PemError,
)
from pemkit.extract import diagnose, iter_pems, parse, parse_many, parse_strict
from pemkit.types import Accepted, Candidate, Pem, Rejected, RejectReason

try:
    from importlib.metadata import PackageNotFoundError, version

    __version__ = version("pemkit")
except PackageNotFoundError:
    __version__ = "0.0.0+unknown"

# Library-level NullHandler: stay silent unless the consumer configures logging.
logging.getLogger("pemkit").addHandler(logging.NullHandler())

__all__ = [
    "DEFAULT_DELIMITERS",
    "Accepted",
    "Candidate",
    "ConfigurationError",
    "Delimiters",
    "ExtractionError",
    "InvalidEncodingError",
    "LabelMismatchError",
    "NoSectionFoundError",
    "Pem",
    "PemError",
    "RejectReason",
    "Rejected",
    "diagnose",
    "iter_pems",
    "parse",
    "parse_many",
    "parse_strict",
    "resolve_delimiters",
]
