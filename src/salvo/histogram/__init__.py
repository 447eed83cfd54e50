from __future__ import annotations

from salvo.histogram.base import (
    ReadonlyFloatHistogram,
    ReadonlyHistogram,
    ReadonlyIntHistogram,
    Visitor,
)
from salvo.histogram.memory import FrequencyHistogram, FrozenHistogram

__all__ = [
    "FrequencyHistogram",
    "FrozenHistogram",
    "ReadonlyFloatHistogram",
    "ReadonlyHistogram",
    "ReadonlyIntHistogram",
    "Visitor",
]
