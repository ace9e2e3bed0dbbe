"""Abstract repository for Reservation aggregate."""

from __future__ import annotations

from abc import ABC, abstractmethod
from datetime import datetime
from typing import Iterable

from shopdesk.domain.model.reservation import Reservation, ReservationStatus


class ReservationRepository(ABC):

    @abstractmethod
    def find_overlapping(
        self,
        customer_id: str,
        start_at: datetime,
        end_at: datetime,
        statuses: Iterable[ReservationStatus],
    ) -> Reservation | None:
        """Return one of the customer's reservations in ``statuses`` whose
        interval intersects ``[start_at, end_at)``, or None."""

    @abstractmethod
    def list_for_customer(self, customer_id: str) -> list[Reservation]:
        """Return the customer's reservations, latest start first."""

    @abstractmethod
    def add(self, reservation: Reservation) -> None:
        """Persist a new reservation without any overlap check."""

    @abstractmethod
    def add_if_free(
        self, reservation: Reservation, statuses: Iterable[ReservationStatus]
    ) -> Reservation | None:
        """Store ``reservation`` unless the customer already holds one in
        ``statuses`` that overlaps it.

        The overlap lookup and the insert are one atomic step.  Returns the
        conflicting reservation (and stores nothing), or None once stored.
        """
