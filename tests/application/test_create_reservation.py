"""Integration tests for the CreateReservation use case."""

import threading
import time

import pytest

from shopdesk.application.create_reservation import CreateReservationHandler
from shopdesk.application.list_reservations import ListReservationsHandler
from shopdesk.domain.exceptions import (
    InvalidCustomer,
    InvalidDate,
    OverlappingReservation,
    StartNotBeforeEnd,
    ValidationError,
)
from shopdesk.domain.model.customer import Customer
from tests.fakes import FakeCustomerRepository, FakeReservationRepository


def _setup(reservation_repo=None):
    reservation_repo = reservation_repo or FakeReservationRepository()
    customer_repo = FakeCustomerRepository([
        Customer(id="X", email="x@example.com", name="Xavier"),
        Customer(id="Y", email="y@example.com", name="Yara"),
    ])
    handler = CreateReservationHandler(reservation_repo, customer_repo)
    return handler, reservation_repo


def _book(handler, customer_id, start, end, **extra):
    return handler.handle({
        "customerId": customer_id,
        "startAt": f"2026-05-01T{start}:00Z",
        "endAt": f"2026-05-01T{end}:00Z",
        **extra,
    })


class TestCreateReservationHappyPath:

    def test_defaults(self):
        handler, repo = _setup()
        dto = _book(handler, "X", "10:00", "11:00")
        assert dto.status == "PENDING"
        assert dto.party_size == 1
        assert dto.start_at == "2026-05-01T10:00:00+00:00"
        assert repo.count() == 1

    def test_caller_supplied_fields(self):
        handler, _ = _setup()
        dto = _book(handler, "X", "10:00", "11:00", partySize=4, status="CONFIRMED", notes="window")
        assert (dto.party_size, dto.status, dto.notes) == (4, "CONFIRMED", "window")

    def test_snake_case_payload_accepted(self):
        handler, _ = _setup()
        dto = handler.handle({
            "customer_id": "X",
            "start_at": "2026-05-01T10:00:00Z",
            "end_at": "2026-05-01T11:00:00Z",
            "party_size": 2,
        })
        assert dto.party_size == 2


class TestOverlapRules:

    def test_overlapping_same_customer_rejected(self):
        handler, repo = _setup()
        _book(handler, "X", "10:00", "11:00", status="CONFIRMED")
        with pytest.raises(OverlappingReservation):
            _book(handler, "X", "10:30", "11:30")
        assert repo.count() == 1

    def test_back_to_back_accepted(self):
        handler, repo = _setup()
        _book(handler, "X", "10:00", "11:00", status="CONFIRMED")
        _book(handler, "X", "11:00", "12:00")
        assert repo.count() == 2

    def test_other_customer_accepted(self):
        handler, repo = _setup()
        _book(handler, "X", "10:00", "11:00", status="CONFIRMED")
        _book(handler, "Y", "10:30", "11:30")
        assert repo.count() == 2

    def test_cancelled_booking_does_not_block(self):
        handler, _ = _setup()
        _book(handler, "X", "10:00", "11:00", status="CANCELLED")
        _book(handler, "X", "10:00", "11:00")

    def test_cancelled_booking_skips_check(self):
        handler, repo = _setup()
        _book(handler, "X", "10:00", "11:00")
        _book(handler, "X", "10:00", "11:00", status="CANCELLED")
        assert repo.count() == 2


class TestCreateReservationValidation:

    def test_start_after_end(self):
        handler, repo = _setup()
        with pytest.raises(StartNotBeforeEnd):
            _book(handler, "X", "11:00", "10:00")
        assert repo.count() == 0

    def test_unparseable_date(self):
        handler, _ = _setup()
        with pytest.raises(InvalidDate):
            handler.handle({"customerId": "X", "startAt": "soon", "endAt": "later"})

    def test_unknown_customer(self):
        handler, repo = _setup()
        with pytest.raises(InvalidCustomer):
            _book(handler, "ghost", "10:00", "11:00")
        assert repo.count() == 0

    @pytest.mark.parametrize("party_size", [0, -1, "2"])
    def test_bad_party_size(self, party_size):
        handler, _ = _setup()
        with pytest.raises(ValidationError):
            _book(handler, "X", "10:00", "11:00", partySize=party_size)


class _SlowReservationRepository(FakeReservationRepository):
    """Widens the gap between the overlap check and the insert."""

    def find_overlapping(self, *args, **kwargs):
        found = super().find_overlapping(*args, **kwargs)
        time.sleep(0.05)
        return found


class TestConcurrentBookings:

    def test_only_one_of_two_racing_overlaps_wins(self):
        handler, repo = _setup(_SlowReservationRepository())
        outcomes: list[str] = []
        barrier = threading.Barrier(2)

        def book(start, end):
            barrier.wait()
            try:
                _book(handler, "X", start, end)
                outcomes.append("created")
            except OverlappingReservation:
                outcomes.append("rejected")

        threads = [
            threading.Thread(target=book, args=("10:00", "11:00")),
            threading.Thread(target=book, args=("10:30", "11:30")),
        ]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        assert sorted(outcomes) == ["created", "rejected"]
        assert repo.count() == 1


class TestListReservations:

    def test_latest_first(self):
        handler, repo = _setup()
        _book(handler, "X", "09:00", "10:00")
        _book(handler, "X", "12:00", "13:00")
        _book(handler, "Y", "12:00", "13:00")

        dtos = ListReservationsHandler(repo).handle("X")
        assert [d.start_at[11:16] for d in dtos] == ["12:00", "09:00"]
