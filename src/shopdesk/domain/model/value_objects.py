"""Value Objects shared across the domain.

Value Objects are immutable and compared by value, not identity.
They encapsulate validation so invalid values can never exist.
"""

from __future__ import annotations

import re
import uuid
from dataclasses import dataclass
from datetime import datetime, timezone

from shopdesk.domain.exceptions import InvalidDate, StartNotBeforeEnd


def new_id() -> str:
    """Opaque identity for new aggregates."""
    return uuid.uuid4().hex


def is_strict_int(value: object) -> bool:
    """True for real integers; ``True``/``False`` do not count."""
    return isinstance(value, int) and not isinstance(value, bool)


def as_utc(moment: datetime) -> datetime:
    """Naive datetimes are read as UTC; aware ones are converted to UTC."""
    if not isinstance(moment, datetime):
        raise InvalidDate(f"Not a timestamp: {moment!r}")
    if moment.tzinfo is None:
        return moment.replace(tzinfo=timezone.utc)
    return moment.astimezone(timezone.utc)


# A calendar date alone is not a point in time.
_DATETIME_RE = re.compile(r"^\d{4}-\d{2}-\d{2}[Tt ]\d{2}:\d{2}")


def parse_timestamp(raw: str | datetime) -> datetime:
    if isinstance(raw, datetime):
        return as_utc(raw)
    if not isinstance(raw, str) or not _DATETIME_RE.match(raw.strip()):
        raise InvalidDate(f"Invalid ISO-8601 timestamp: {raw!r}")
    try:
        # fromisoformat() only learned the "Z" suffix in 3.11
        return as_utc(datetime.fromisoformat(raw.strip().replace("Z", "+00:00")))
    except ValueError as exc:
        raise InvalidDate(f"Invalid ISO-8601 timestamp: {raw!r}") from exc


@dataclass(frozen=True)
class TimeSlot:
    """A half-open interval ``[start_at, end_at)``.

    Slots that only share a boundary instant do not overlap.
    """

    start_at: datetime
    end_at: datetime

    def __post_init__(self) -> None:
        object.__setattr__(self, "start_at", as_utc(self.start_at))
        object.__setattr__(self, "end_at", as_utc(self.end_at))
        if self.start_at >= self.end_at:
            raise StartNotBeforeEnd()

    @classmethod
    def parse(cls, start_at: str | datetime, end_at: str | datetime) -> TimeSlot:
        return cls(parse_timestamp(start_at), parse_timestamp(end_at))

    def overlaps(self, other: TimeSlot) -> bool:
        return self.start_at < other.end_at and self.end_at > other.start_at

    @property
    def duration_minutes(self) -> int:
        return int((self.end_at - self.start_at).total_seconds() // 60)
