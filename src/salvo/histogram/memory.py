from __future__ import annotations

import threading
from collections import Counter
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Callable, Generic, Iterable, Mapping

from salvo.histogram.base import KeyT


@dataclass(slots=True)
class FrequencyHistogram(Generic[KeyT]):
    """Weighted frequency table safe for concurrent writers.

    Traversal works on a sorted snapshot taken under the lock, so statistics
    can be computed while a run is still recording.
    """

    _counts: dict[KeyT, int] = field(default_factory=dict)
    _total: int = 0
    _lock: threading.Lock = field(default_factory=threading.Lock)

    @classmethod
    def from_samples(cls, samples: Iterable[KeyT]) -> FrequencyHistogram[KeyT]:
        histogram: FrequencyHistogram[KeyT] = cls()
        for key, count in Counter(samples).items():
            histogram.add(key, count)
        return histogram

    def add(self, key: KeyT, count: int = 1) -> None:
        if count < 0:
            msg = f"Histogram counts must be non-negative, got {count}"
            raise ValueError(msg)
        with self._lock:
            self._counts[key] = self._counts.get(key, 0) + count
            self._total += count

    def get(self, key: KeyT) -> int:
        with self._lock:
            return self._counts.get(key, 0)

    def count(self) -> int:
        with self._lock:
            return self._total

    def visit_all(self, visitor: Callable[[KeyT, int], bool]) -> None:
        with self._lock:
            snapshot = sorted(self._counts.items(), key=_sort_key)
        _visit(snapshot, visitor)

    def freeze(self) -> FrozenHistogram[KeyT]:
        with self._lock:
            return FrozenHistogram(MappingProxyType(dict(self._counts)))


@dataclass(frozen=True, slots=True)
class FrozenHistogram(Generic[KeyT]):
    counts: Mapping[KeyT, int] = field(default_factory=lambda: MappingProxyType({}))

    def __post_init__(self) -> None:
        object.__setattr__(self, "counts", MappingProxyType(dict(self.counts)))

    def get(self, key: KeyT) -> int:
        return self.counts.get(key, 0)

    def count(self) -> int:
        return sum(self.counts.values())

    def visit_all(self, visitor: Callable[[KeyT, int], bool]) -> None:
        _visit(sorted(self.counts.items(), key=_sort_key), visitor)


def _visit(
    items: Iterable[tuple[KeyT, int]],
    visitor: Callable[[KeyT, int], bool],
) -> None:
    for key, count in items:
        if not visitor(key, count):
            return


def _sort_key(item: tuple[KeyT, int]) -> tuple[bool, KeyT | float]:
    # NaN does not order against anything; keep it last.
    key = item[0]
    if key != key:
        return (True, 0.0)
    return (False, key)
