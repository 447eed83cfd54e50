from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Any, Mapping, Sequence

from salvo.config import Spec
from salvo.histogram import FrozenHistogram, ReadonlyHistogram
from salvo.metrics.stats import LatencyStats, RequestsStats, latency_stats, requests_stats
from salvo.metrics.status import StatusClass
from salvo.settings import settings


@dataclass(frozen=True, slots=True)
class ErrorWithCount:
    error: str
    count: int


@dataclass(frozen=True, slots=True)
class Results:
    bytes_read: int = 0
    bytes_written: int = 0
    time_taken_sec: float = 0.0

    req1xx: int = 0
    req2xx: int = 0
    req3xx: int = 0
    req4xx: int = 0
    req5xx: int = 0
    req502: int = 0
    others: int = 0
    status_codes: Mapping[int, int] = field(default_factory=dict)

    errors: Sequence[ErrorWithCount] = ()

    latencies: ReadonlyHistogram[int] = field(default_factory=FrozenHistogram)
    requests: ReadonlyHistogram[float] = field(default_factory=FrozenHistogram)

    def throughput(self) -> float:
        """Bytes per second, read and written combined."""
        total = float(self.bytes_read + self.bytes_written)
        if self.time_taken_sec == 0:
            # IEEE semantics rather than ZeroDivisionError
            if total == 0:
                return math.nan
            return math.copysign(math.inf, total)
        return total / self.time_taken_sec

    def latency_stats(self, percentiles: Sequence[float] | None = None) -> LatencyStats | None:
        if percentiles is None:
            percentiles = settings.statistics.percentiles
        return latency_stats(self.latencies, percentiles)

    def requests_stats(self, percentiles: Sequence[float] | None = None) -> RequestsStats | None:
        if percentiles is None:
            percentiles = settings.statistics.percentiles
        return requests_stats(self.requests, percentiles)

    def status_counts(self) -> dict[StatusClass, int]:
        """Counters by status class.

        502 responses are already included in ``SERVER_ERROR``; the dedicated
        ``req502`` counter is a subset of it and is not repeated here.
        """
        return {
            StatusClass.INFORMATIONAL: self.req1xx,
            StatusClass.SUCCESS: self.req2xx,
            StatusClass.REDIRECTION: self.req3xx,
            StatusClass.CLIENT_ERROR: self.req4xx,
            StatusClass.SERVER_ERROR: self.req5xx,
            StatusClass.OTHERS: self.others,
        }

    def sorted_errors(self) -> list[ErrorWithCount]:
        return sorted(self.errors, key=lambda e: (-e.count, e.error))

    def to_dict(self, percentiles: Sequence[float] | None = None) -> dict[str, Any]:
        latency = self.latency_stats(percentiles)
        rps = self.requests_stats(percentiles)
        return {
            "bytes_read": self.bytes_read,
            "bytes_written": self.bytes_written,
            "time_taken_sec": self.time_taken_sec,
            "req1xx": self.req1xx,
            "req2xx": self.req2xx,
            "req3xx": self.req3xx,
            "req4xx": self.req4xx,
            "req5xx": self.req5xx,
            "req502": self.req502,
            "others": self.others,
            "status_codes": {str(code): count for code, count in sorted(self.status_codes.items())},
            "errors": [{"error": e.error, "count": e.count} for e in self.sorted_errors()],
            "latency": latency.to_dict() if latency else None,
            "rps": rps.to_dict() if rps else None,
        }


@dataclass(frozen=True, slots=True)
class TestInfo:
    __test__ = False

    spec: Spec
    result: Results

    def to_dict(self, percentiles: Sequence[float] | None = None) -> dict[str, Any]:
        return {
            "spec": dict(self.spec.to_metadata()),
            "result": self.result.to_dict(percentiles),
        }
