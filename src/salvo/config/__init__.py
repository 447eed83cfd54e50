from __future__ import annotations

from salvo.config.errors import (
    BodyProvidedTwiceError,
    InvalidConnectionsError,
    InvalidDurationError,
    InvalidRequestCountError,
    InvalidURLError,
    MissingCertOrKeyError,
    NegativeTimeoutError,
    SpecError,
    UnsupportedTestTypeError,
    ZeroRateError,
)
from salvo.config.models import ClientType, Header, Spec, TestType

__all__ = [
    "BodyProvidedTwiceError",
    "ClientType",
    "Header",
    "InvalidConnectionsError",
    "InvalidDurationError",
    "InvalidRequestCountError",
    "InvalidURLError",
    "MissingCertOrKeyError",
    "NegativeTimeoutError",
    "Spec",
    "SpecError",
    "TestType",
    "UnsupportedTestTypeError",
    "ZeroRateError",
]
