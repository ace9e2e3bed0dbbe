"""Reservation aggregate — a customer's claim on a time slot."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum

from shopdesk.domain.exceptions import ValidationError
from shopdesk.domain.model.value_objects import TimeSlot, is_strict_int, new_id


class ReservationStatus(Enum):
    PENDING = "PENDING"
    CONFIRMED = "CONFIRMED"
    CANCELLED = "CANCELLED"


# Only these take part in overlap detection.
ACTIVE_STATUSES = frozenset({ReservationStatus.PENDING, ReservationStatus.CONFIRMED})

DEFAULT_PARTY_SIZE = 1


@dataclass
class Reservation:

    id: str
    customer_id: str
    slot: TimeSlot
    party_size: int = DEFAULT_PARTY_SIZE
    status: ReservationStatus = ReservationStatus.PENDING
    notes: str | None = None
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    @staticmethod
    def create(
        customer_id: str,
        slot: TimeSlot,
        party_size: int = DEFAULT_PARTY_SIZE,
        status: ReservationStatus = ReservationStatus.PENDING,
        notes: str | None = None,
    ) -> Reservation:
        if not is_strict_int(party_size) or party_size <= 0:
            raise ValidationError("Party size must be a positive integer")
        return Reservation(
            id=new_id(),
            customer_id=customer_id,
            slot=slot,
            party_size=party_size,
            status=status,
            notes=notes,
        )

    @property
    def start_at(self) -> datetime:
        return self.slot.start_at

    @property
    def end_at(self) -> datetime:
        return self.slot.end_at

    @property
    def is_active(self) -> bool:
        return self.status in ACTIVE_STATUSES
