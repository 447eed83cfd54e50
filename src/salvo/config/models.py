from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Mapping
from urllib.parse import urlsplit

from salvo.config.errors import (
    BodyProvidedTwiceError,
    InvalidConnectionsError,
    InvalidDurationError,
    InvalidRequestCountError,
    InvalidURLError,
    MissingCertOrKeyError,
    NegativeTimeoutError,
    UnsupportedTestTypeError,
    ZeroRateError,
)


class TestType(str, Enum):
    __test__ = False

    BY_DURATION = "by_duration"
    BY_REQUEST_COUNT = "by_request_count"


class ClientType(str, Enum):
    FAST = "fast"  # embedded fast client
    HTTP1 = "http1"  # standard client, HTTP/1.x forced
    HTTP2 = "http2"  # standard client, HTTP/2 when negotiated


@dataclass(frozen=True, slots=True)
class Header:
    key: str
    value: str


@dataclass(frozen=True, slots=True)
class Spec:
    url: str
    number_of_connections: int = 125
    test_type: TestType = TestType.BY_DURATION
    number_of_requests: int = 0
    test_duration_sec: float = 10.0
    method: str = "GET"
    headers: tuple[Header, ...] = ()
    body: str = ""
    body_file_path: str = ""
    cert_path: str = ""
    key_path: str = ""
    stream: bool = False
    timeout_sec: float = 2.0
    client_type: ClientType = ClientType.FAST
    rate: int | None = None

    def is_timed_test(self) -> bool:
        return self.test_type is TestType.BY_DURATION

    def is_test_with_number_of_reqs(self) -> bool:
        return self.test_type is TestType.BY_REQUEST_COUNT

    def is_fast_client(self) -> bool:
        return self.client_type is ClientType.FAST

    def is_http1_client(self) -> bool:
        return self.client_type is ClientType.HTTP1

    def is_http2_client(self) -> bool:
        return self.client_type is ClientType.HTTP2

    def validate(self) -> None:
        if self.number_of_connections < 1:
            msg = f"Number of connections must be positive, got {self.number_of_connections}"
            raise InvalidConnectionsError(msg)
        if self.test_type is TestType.BY_DURATION:
            if self.test_duration_sec <= 0:
                msg = f"Test duration must be positive, got {self.test_duration_sec}s"
                raise InvalidDurationError(msg)
        elif self.test_type is TestType.BY_REQUEST_COUNT:
            if self.number_of_requests < 1:
                msg = f"Number of requests must be positive, got {self.number_of_requests}"
                raise InvalidRequestCountError(msg)
        else:
            msg = f"Unsupported test type: {self.test_type}"
            raise UnsupportedTestTypeError(msg)
        if self.timeout_sec < 0:
            msg = f"Timeout can't be negative, got {self.timeout_sec}s"
            raise NegativeTimeoutError(msg)
        if self.body and self.body_file_path:
            msg = "Body and body file path can't be provided at the same time"
            raise BodyProvidedTwiceError(msg)
        if bool(self.cert_path) != bool(self.key_path):
            missing = "key" if self.cert_path else "certificate"
            msg = f"Client {missing} path is required when the other one is set"
            raise MissingCertOrKeyError(msg)
        if self.rate is not None and self.rate <= 0:
            msg = f"Rate must be positive when set, got {self.rate}"
            raise ZeroRateError(msg)
        parts = urlsplit(self.url)
        if parts.scheme not in ("http", "https") or not parts.netloc:
            msg = f"Invalid URL: {self.url!r}"
            raise InvalidURLError(msg)

    def to_metadata(self) -> Mapping[str, Any]:
        return {
            "url": self.url,
            "number_of_connections": self.number_of_connections,
            "test_type": self.test_type.value,
            "number_of_requests": self.number_of_requests,
            "test_duration_sec": self.test_duration_sec,
            "method": self.method,
            "headers": [{"key": h.key, "value": h.value} for h in self.headers],
            "body": self.body,
            "body_file_path": self.body_file_path,
            "cert_path": self.cert_path,
            "key_path": self.key_path,
            "stream": self.stream,
            "timeout_sec": self.timeout_sec,
            "client_type": self.client_type.value,
            "rate": self.rate,
        }

    @classmethod
    def from_metadata(cls, metadata: Mapping[str, Any]) -> Spec:
        params = dict(metadata)
        params["test_type"] = TestType(params.get("test_type", TestType.BY_DURATION))
        params["client_type"] = ClientType(params.get("client_type", ClientType.FAST))
        params["headers"] = tuple(
            Header(key=h["key"], value=h["value"]) for h in params.get("headers", ())
        )
        return cls(**params)
