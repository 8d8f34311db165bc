"""Domain Types: value objects passed between routes, core parsing and storage.

Invariants:
    - NewMessage has no timestamp: the database assigns it on insert
    - TimeRange bounds are exclusive and independently optional
    - Timestamps are signed 64-bit integers

Design Decisions:
    - Frozen dataclasses: parsed request values are never mutated after parsing
"""

from dataclasses import dataclass
from typing import NewType


# ─── Value Types ─────────────────────────────────────────────────

Timestamp = NewType("Timestamp", int)

DEFAULT_USERNAME = "anonymous"

TIMESTAMP_MIN = -(2 ** 63)
TIMESTAMP_MAX = 2 ** 63 - 1


# ─── Request Values ──────────────────────────────────────────────

@dataclass(frozen=True)
class NewMessage:
    """A message accepted from a POST body, not yet persisted."""
    message: str
    username: str = DEFAULT_USERNAME


@dataclass(frozen=True)
class TimeRange:
    """Exclusive timestamp window: before < bound, after > bound."""
    before: Timestamp | None = None
    after: Timestamp | None = None

    @property
    def is_unbounded(self) -> bool:
        return self.before is None and self.after is None
