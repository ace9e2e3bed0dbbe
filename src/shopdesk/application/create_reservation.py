"""Application service: Create Reservation use case.

The overlap check and the insert are a single atomic repository step
(``add_if_free``).  Two concurrent requests for the same customer, from
threads or from separate processes, cannot both pass the check before
either has been stored.
"""

from __future__ import annotations

from typing import Any, Mapping

import structlog

from shopdesk.application.dto import ReservationDTO
from shopdesk.application.schemas import ReservationCreateRequest, parse_request
from shopdesk.domain.exceptions import InvalidCustomer, OverlappingReservation
from shopdesk.domain.model.reservation import Reservation, ReservationStatus
from shopdesk.domain.model.value_objects import TimeSlot
from shopdesk.domain.repository.customer_repository import CustomerRepository
from shopdesk.domain.repository.reservation_repository import ReservationRepository
from shopdesk.domain.service.reservation_conflict_detector import (
    ReservationConflictDetector,
)

logger = structlog.get_logger(__name__)


class CreateReservationHandler:

    def __init__(
        self,
        reservation_repo: ReservationRepository,
        customer_repo: CustomerRepository,
    ) -> None:
        self._reservation_repo = reservation_repo
        self._customer_repo = customer_repo

    def handle(
        self, payload: Mapping[str, Any] | ReservationCreateRequest
    ) -> ReservationDTO:
        request = parse_request(ReservationCreateRequest, payload)
        slot = TimeSlot.parse(request.start_at, request.end_at)

        if self._customer_repo.get_by_id(request.customer_id) is None:
            raise InvalidCustomer(f"Customer '{request.customer_id}' does not exist")

        reservation = Reservation.create(
            customer_id=request.customer_id,
            slot=slot,
            party_size=request.party_size,
            status=ReservationStatus(request.status),
            notes=request.notes,
        )

        detector = ReservationConflictDetector(self._reservation_repo)
        try:
            detector.reserve(reservation)
        except OverlappingReservation as exc:
            logger.info(
                "Reservation rejected: overlapping slot",
                customer_id=request.customer_id,
                start_at=slot.start_at.isoformat(),
                end_at=slot.end_at.isoformat(),
                conflicting_id=exc.conflicting_id,
            )
            raise

        logger.info(
            "Reservation created",
            reservation_id=reservation.id,
            customer_id=reservation.customer_id,
            start_at=slot.start_at.isoformat(),
            minutes=slot.duration_minutes,
            party_size=reservation.party_size,
        )
        return ReservationDTO.from_domain(reservation)
