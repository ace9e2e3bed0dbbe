"""JSON-file-backed implementation of ReservationRepository."""

from __future__ import annotations

from datetime import datetime
from typing import Iterable

from shopdesk.domain.model.reservation import Reservation, ReservationStatus
from shopdesk.domain.model.value_objects import TimeSlot
from shopdesk.domain.repository.reservation_repository import ReservationRepository
from shopdesk.infrastructure.persistence.json_file_store import JsonFileStore


class JsonReservationRepository(JsonFileStore, ReservationRepository):

    # --- ReservationRepository interface --------------------------------------

    def find_overlapping(
        self,
        customer_id: str,
        start_at: datetime,
        end_at: datetime,
        statuses: Iterable[ReservationStatus],
    ) -> Reservation | None:
        return self._overlap_in(self._load_raw(), customer_id, start_at, end_at, statuses)

    def list_for_customer(self, customer_id: str) -> list[Reservation]:
        found = [
            r for r in (self._decode(raw) for raw in self._load_raw())
            if r.customer_id == customer_id
        ]
        return sorted(found, key=lambda r: r.start_at, reverse=True)

    def add(self, reservation: Reservation) -> None:
        with self._transaction() as records:
            records.append(self._to_raw(reservation))

    def add_if_free(
        self, reservation: Reservation, statuses: Iterable[ReservationStatus]
    ) -> Reservation | None:
        with self._transaction() as records:
            conflict = self._overlap_in(
                records,
                reservation.customer_id,
                reservation.start_at,
                reservation.end_at,
                statuses,
            )
            if conflict is None:
                records.append(self._to_raw(reservation))
        return conflict

    # --- Helpers --------------------------------------------------------------

    def _overlap_in(
        self,
        records: list[dict],
        customer_id: str,
        start_at: datetime,
        end_at: datetime,
        statuses: Iterable[ReservationStatus],
    ) -> Reservation | None:
        wanted = set(statuses)
        for raw in records:
            existing = self._decode(raw)
            if existing.customer_id != customer_id or existing.status not in wanted:
                continue
            if existing.start_at < end_at and existing.end_at > start_at:
                return existing
        return None

    # --- Serialization --------------------------------------------------------

    @staticmethod
    def _to_raw(r: Reservation) -> dict:
        return {
            "id": r.id,
            "customer_id": r.customer_id,
            "start_at": r.start_at.isoformat(),
            "end_at": r.end_at.isoformat(),
            "party_size": r.party_size,
            "status": r.status.value,
            "notes": r.notes,
            "created_at": r.created_at.isoformat(),
        }

    @staticmethod
    def _to_domain(raw: dict) -> Reservation:
        return Reservation(
            id=raw["id"],
            customer_id=raw["customer_id"],
            slot=TimeSlot(
                datetime.fromisoformat(raw["start_at"]),
                datetime.fromisoformat(raw["end_at"]),
            ),
            party_size=raw.get("party_size", 1),
            status=ReservationStatus(raw["status"]),
            notes=raw.get("notes"),
            created_at=datetime.fromisoformat(raw["created_at"]),
        )
