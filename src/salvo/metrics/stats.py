"""
Percentile, mean and standard deviation over weighted frequency histograms.

Every bucket carries a key and an occurrence count. Count, mean and
percentiles are count-weighted; the squared deviations behind the standard
deviation are summed once per bucket and divided by the weighted total. The
cost is bounded by the number of distinct buckets rather than by the number
of requests.

A percentile ``p`` resolves to the key of the first bucket (in ascending key
order) whose cumulative count reaches ``floor(p * total + 0.5)``. Reports from
different runs are only comparable if this rule stays exactly as it is.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Any, Callable, Generic, Iterable, Mapping

import numpy as np

from salvo.histogram import ReadonlyHistogram
from salvo.histogram.base import KeyT
from salvo.logger import logger

__all__ = [
    "LatencyStats",
    "RequestsStats",
    "SummaryStats",
    "compute_stats",
    "is_non_finite",
    "latency_stats",
    "requests_stats",
]


@dataclass(frozen=True, slots=True)
class SummaryStats(Generic[KeyT]):
    mean: float
    stddev: float
    max: float
    # requested fraction in [0, 1] -> key, in the histogram's unit
    percentiles: Mapping[float, KeyT] = field(default_factory=dict)

    def to_dict(self) -> dict[str, Any]:
        return {
            "mean": self.mean,
            "stddev": self.stddev,
            "max": self.max,
            "percentiles": {str(p): value for p, value in self.percentiles.items()},
        }


# Latencies are in microseconds.
LatencyStats = SummaryStats[int]
# Throughput samples are in requests per second.
RequestsStats = SummaryStats[float]


def is_non_finite(key: float) -> bool:
    return math.isnan(key) or math.isinf(key)


def compute_stats(
    histogram: ReadonlyHistogram[KeyT],
    percentiles: Iterable[float],
    exclude: Callable[[KeyT], bool] | None = None,
) -> SummaryStats[KeyT] | None:
    """
    Summarize a weighted histogram.

    :param histogram: read-only frequency table; it is traversed twice and
        never modified
    :param percentiles: requested fractions; values outside [0, 1] (and NaN)
        are dropped and repeated values resolve once
    :param exclude: predicate for keys that must be treated as absent from
        the histogram, e.g. non-finite throughput samples
    :return: the summary, or None when no counted keys remain
    """
    pairs: list[tuple[KeyT, int]] = []
    excluded = 0

    def gather(key: KeyT, count: int) -> bool:
        nonlocal excluded
        if exclude is not None and exclude(key):
            excluded += count
            return True
        if count > 0:
            pairs.append((key, count))
        return True

    histogram.visit_all(gather)
    if excluded:
        logger.debug(f"Excluded {excluded} samples with non-countable keys")

    total = sum(count for _, count in pairs)
    if total < 1:
        logger.debug("Histogram holds no samples, no statistics available yet")
        return None

    pairs.sort(key=lambda pair: pair[0])
    keys = [key for key, _ in pairs]
    maximum = keys[-1]
    # object dtype keeps the running count as exact Python ints
    counts = np.array([count for _, count in pairs], dtype=object)
    cumulative = np.cumsum(counts)

    resolved: dict[float, KeyT] = {}
    for percentile in percentiles:
        if percentile in resolved:
            continue
        if not 0.0 <= percentile <= 1.0:
            logger.debug(f"Dropping percentile {percentile} outside of [0, 1]")
            continue
        rank = math.floor(percentile * total + 0.5)
        idx = int(np.searchsorted(cumulative, rank, side="left"))
        if idx >= len(keys):
            logger.debug(f"Percentile {percentile} (rank {rank}) could not be resolved")
            continue
        resolved[percentile] = keys[idx]

    mean = _weighted_sum(pairs) / total

    deviations: list[float] = []

    def accumulate(key: KeyT, count: int) -> bool:
        if exclude is not None and exclude(key):
            return True
        if count > 0:
            deviations.append((key - mean) ** 2)
        return True

    histogram.visit_all(accumulate)
    stddev = 0.0
    if total > 2:
        stddev = math.sqrt(math.fsum(deviations) / total)

    return SummaryStats(
        mean=mean,
        stddev=stddev,
        max=float(maximum),
        percentiles=resolved,
    )


def latency_stats(
    histogram: ReadonlyHistogram[int], percentiles: Iterable[float]
) -> LatencyStats | None:
    return compute_stats(histogram, percentiles)


def requests_stats(
    histogram: ReadonlyHistogram[float], percentiles: Iterable[float]
) -> RequestsStats | None:
    return compute_stats(histogram, percentiles, exclude=is_non_finite)


def _weighted_sum(pairs: list[tuple[KeyT, int]]) -> float:
    if all(isinstance(key, int) for key, _ in pairs):
        # exact for arbitrarily large counts
        return sum(key * count for key, count in pairs)
    return math.fsum(key * count for key, count in pairs)
