from __future__ import annotations


class SpecError(ValueError):
    """Raised by ``Spec.validate`` for a configuration that cannot be run."""


class InvalidConnectionsError(SpecError):
    pass


class InvalidDurationError(SpecError):
    pass


class InvalidRequestCountError(SpecError):
    pass


class NegativeTimeoutError(SpecError):
    pass


class BodyProvidedTwiceError(SpecError):
    pass


class MissingCertOrKeyError(SpecError):
    pass


class ZeroRateError(SpecError):
    pass


class InvalidURLError(SpecError):
    pass


class UnsupportedTestTypeError(SpecError):
    pass
