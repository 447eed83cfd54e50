from __future__ import annotations

import json
import math

import pytest

from salvo.config import Spec
from salvo.histogram import FrozenHistogram
from salvo.metrics import ErrorWithCount, Results, StatusClass, TestInfo, tally_status_codes


def test_throughput() -> None:
    results = Results(bytes_read=3_000, bytes_written=1_000, time_taken_sec=2.0)
    assert results.throughput() == 2_000.0


def test_throughput_with_zero_duration_is_not_finite() -> None:
    assert math.isinf(Results(bytes_read=10, time_taken_sec=0.0).throughput())
    assert math.isnan(Results(time_taken_sec=0.0).throughput())


def test_stats_use_results_histograms() -> None:
    results = Results(
        latencies=FrozenHistogram({100: 1, 200: 1, 300: 1, 400: 1}),
        requests=FrozenHistogram({10.0: 2, math.nan: 5, math.inf: 3, 20.0: 1}),
    )
    latency = results.latency_stats([0.5, 0.9, 1.0])
    assert latency is not None
    assert latency.percentiles == {0.5: 200, 0.9: 400, 1.0: 400}
    rps = results.requests_stats([1.0])
    assert rps is not None
    assert rps.max == 20.0
    assert rps.mean == pytest.approx(13.333333)


def test_default_percentiles_come_from_settings() -> None:
    results = Results(latencies=FrozenHistogram({5: 10}))
    latency = results.latency_stats()
    assert latency is not None
    assert sorted(latency.percentiles) == [0.5, 0.75, 0.9, 0.95, 0.99]


def test_results_without_samples_have_no_stats() -> None:
    results = Results()
    assert results.latency_stats() is None
    assert results.requests_stats() is None


def test_sorted_errors() -> None:
    results = Results(
        errors=[
            ErrorWithCount("timeout", 3),
            ErrorWithCount("connection refused", 7),
            ErrorWithCount("broken pipe", 3),
        ]
    )
    assert [e.error for e in results.sorted_errors()] == [
        "connection refused",
        "broken pipe",
        "timeout",
    ]


def test_status_counts_from_tally() -> None:
    codes = {200: 90, 502: 4, 503: 1, 404: 2, 0: 3}
    results = Results(status_codes=codes, **tally_status_codes(codes))
    assert results.req502 == 4
    assert results.status_counts()[StatusClass.SERVER_ERROR] == results.req5xx == 5
    assert results.req502 <= results.status_counts()[StatusClass.SERVER_ERROR]
    assert results.status_counts() == {
        StatusClass.INFORMATIONAL: 0,
        StatusClass.SUCCESS: 90,
        StatusClass.REDIRECTION: 0,
        StatusClass.CLIENT_ERROR: 2,
        StatusClass.SERVER_ERROR: 5,
        StatusClass.OTHERS: 3,
    }


def test_test_info_is_json_serializable() -> None:
    info = TestInfo(
        spec=Spec(url="http://localhost:8080"),
        result=Results(
            bytes_read=10,
            time_taken_sec=1.0,
            req2xx=4,
            status_codes={200: 4},
            errors=[ErrorWithCount("timeout", 1)],
            latencies=FrozenHistogram({100: 1, 200: 1, 300: 1, 400: 1}),
        ),
    )
    payload = json.loads(json.dumps(info.to_dict([0.5])))
    assert payload["spec"]["url"] == "http://localhost:8080"
    assert payload["result"]["latency"]["percentiles"] == {"0.5": 200}
    assert payload["result"]["rps"] is None
    assert payload["result"]["status_codes"] == {"200": 4}
    assert payload["result"]["errors"] == [{"error": "timeout", "count": 1}]
