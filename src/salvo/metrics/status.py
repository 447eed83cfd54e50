from __future__ import annotations

from enum import Enum
from typing import Mapping


class StatusClass(str, Enum):
    INFORMATIONAL = "1xx"
    SUCCESS = "2xx"
    REDIRECTION = "3xx"
    CLIENT_ERROR = "4xx"
    SERVER_ERROR = "5xx"
    OTHERS = "others"


BAD_GATEWAY = 502

_CLASSES = {
    1: StatusClass.INFORMATIONAL,
    2: StatusClass.SUCCESS,
    3: StatusClass.REDIRECTION,
    4: StatusClass.CLIENT_ERROR,
    5: StatusClass.SERVER_ERROR,
}


def status_class(code: int) -> StatusClass:
    # Transport failures are recorded with code 0 and land in OTHERS.
    if 100 <= code < 600:
        return _CLASSES[code // 100]
    return StatusClass.OTHERS


def tally_status_codes(codes: Mapping[int, int]) -> dict[str, int]:
    """Derive the per-class counters of ``Results`` from exact status codes.

    The returned keys match the ``Results`` counter fields, so a producer can
    splat them straight into the constructor.
    """
    tally = {
        "req1xx": 0,
        "req2xx": 0,
        "req3xx": 0,
        "req4xx": 0,
        "req5xx": 0,
        "req502": 0,
        "others": 0,
    }
    for code, count in codes.items():
        klass = status_class(code)
        if klass is StatusClass.OTHERS:
            tally["others"] += count
        else:
            tally[f"req{klass.value}"] += count
        if code == BAD_GATEWAY:
            tally["req502"] += count
    return tally
