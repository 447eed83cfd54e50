from __future__ import annotations

from salvo.metrics.models import ErrorWithCount, Results, TestInfo
from salvo.metrics.stats import (
    LatencyStats,
    RequestsStats,
    SummaryStats,
    compute_stats,
    is_non_finite,
    latency_stats,
    requests_stats,
)
from salvo.metrics.status import StatusClass, status_class, tally_status_codes

__all__ = [
    "ErrorWithCount",
    "LatencyStats",
    "RequestsStats",
    "Results",
    "StatusClass",
    "SummaryStats",
    "TestInfo",
    "compute_stats",
    "is_non_finite",
    "latency_stats",
    "requests_stats",
    "status_class",
    "tally_status_codes",
]
