"""Application service: List Reservations use case (query)."""

from __future__ import annotations

from shopdesk.application.dto import ReservationDTO
from shopdesk.domain.repository.reservation_repository import ReservationRepository


class ListReservationsHandler:

    def __init__(self, reservation_repo: ReservationRepository) -> None:
        self._reservation_repo = reservation_repo

    def handle(self, customer_id: str) -> list[ReservationDTO]:
        return [
            ReservationDTO.from_domain(r)
            for r in self._reservation_repo.list_for_customer(customer_id)
        ]
