"""Time Range Parsing: pure conversion of query parameters into a TimeRange.

Invariants:
    - Absent key → bound is None; present key must be a strict integer
    - Strict integer: optional sign, ASCII digits only, within int64
    - 'before' is validated before 'after'; the first bad value wins
    - No IO: raises InvalidQueryParamError before any storage access
"""

import re
from collections.abc import Mapping

from message_board.core.domain_types import (
    TIMESTAMP_MAX, TIMESTAMP_MIN, TimeRange, Timestamp,
)
from message_board.core.errors import InvalidQueryParamError

_INTEGER_RE = re.compile(r"[+-]?[0-9]+")

TIME_RANGE_FIELDS = ("before", "after")


def parse_timestamp(field_name: str, raw_value: str) -> Timestamp:
    """Parse one bound, raising InvalidQueryParamError on anything but an int64."""
    if not _INTEGER_RE.fullmatch(raw_value):
        raise InvalidQueryParamError(field_name, raw_value)
    value = int(raw_value)
    if not TIMESTAMP_MIN <= value <= TIMESTAMP_MAX:
        raise InvalidQueryParamError(field_name, raw_value)
    return Timestamp(value)


def parse_time_range(params: Mapping[str, str] | None) -> TimeRange:
    """Build a TimeRange from query parameters; None means no query string."""
    if not params:
        return TimeRange()
    bounds: dict[str, Timestamp | None] = {}
    for field_name in TIME_RANGE_FIELDS:
        raw_value = params.get(field_name)
        bounds[field_name] = (
            None if raw_value is None else parse_timestamp(field_name, raw_value)
        )
    return TimeRange(**bounds)
