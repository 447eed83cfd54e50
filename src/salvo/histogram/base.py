from __future__ import annotations

from typing import Callable, Protocol, TypeVar

KeyT = TypeVar("KeyT", int, float)

# Returning False from a visitor stops the traversal.
Visitor = Callable[[KeyT, int], bool]


class ReadonlyHistogram(Protocol[KeyT]):
    def get(self, key: KeyT) -> int:
        ...

    def visit_all(self, visitor: Callable[[KeyT, int], bool]) -> None:
        ...

    def count(self) -> int:
        ...


ReadonlyIntHistogram = ReadonlyHistogram[int]
ReadonlyFloatHistogram = ReadonlyHistogram[float]
