"""Domain service: Reservation Conflict Detector.

A customer may not hold two active (PENDING or CONFIRMED) reservations
whose half-open intervals intersect.  Back-to-back slots are fine.

``find_conflict`` and ``ensure_available`` are read-only checks.  Admission
goes through ``reserve``, which asks the repository to run the overlap
lookup and the insert as one atomic step, so two concurrent requests for
the same customer cannot both get in.
"""

from __future__ import annotations

from shopdesk.domain.exceptions import OverlappingReservation
from shopdesk.domain.model.reservation import ACTIVE_STATUSES, Reservation
from shopdesk.domain.model.value_objects import TimeSlot
from shopdesk.domain.repository.reservation_repository import ReservationRepository


class ReservationConflictDetector:

    def __init__(self, reservation_repo: ReservationRepository) -> None:
        self._reservation_repo = reservation_repo

    def find_conflict(self, customer_id: str, slot: TimeSlot) -> Reservation | None:
        return self._reservation_repo.find_overlapping(
            customer_id, slot.start_at, slot.end_at, ACTIVE_STATUSES
        )

    def ensure_available(self, customer_id: str, slot: TimeSlot) -> None:
        """Raise OverlappingReservation if ``slot`` clashes for this customer."""
        conflict = self.find_conflict(customer_id, slot)
        if conflict is not None:
            raise OverlappingReservation(conflict.id)

    def reserve(self, reservation: Reservation) -> None:
        """Store ``reservation`` or raise OverlappingReservation.

        Cancelled reservations never conflict and are stored unchecked.
        """
        if not reservation.is_active:
            self._reservation_repo.add(reservation)
            return
        conflict = self._reservation_repo.add_if_free(reservation, ACTIVE_STATUSES)
        if conflict is not None:
            raise OverlappingReservation(conflict.id)
