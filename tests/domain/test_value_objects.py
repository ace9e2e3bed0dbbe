"""Unit tests for domain value objects."""

from datetime import datetime, timedelta, timezone

import pytest

from shopdesk.domain.exceptions import InvalidDate, StartNotBeforeEnd
from shopdesk.domain.model.value_objects import TimeSlot, is_strict_int, parse_timestamp


def _at(hour: int, minute: int = 0) -> datetime:
    return datetime(2026, 5, 1, hour, minute, tzinfo=timezone.utc)


# ── TimeSlot ─────────────────────────────────────────────────────────────────


class TestTimeSlot:

    def test_start_must_precede_end(self):
        with pytest.raises(StartNotBeforeEnd):
            TimeSlot(_at(11), _at(10))

    def test_empty_slot_rejected(self):
        with pytest.raises(StartNotBeforeEnd) as info:
            TimeSlot(_at(10), _at(10))
        assert info.value.code == "startAt_must_be_before_endAt"

    def test_partial_overlap(self):
        assert TimeSlot(_at(10), _at(11)).overlaps(TimeSlot(_at(10, 30), _at(11, 30)))

    def test_containment_overlaps(self):
        assert TimeSlot(_at(9), _at(12)).overlaps(TimeSlot(_at(10), _at(11)))
        assert TimeSlot(_at(10), _at(11)).overlaps(TimeSlot(_at(9), _at(12)))

    def test_back_to_back_does_not_overlap(self):
        morning = TimeSlot(_at(10), _at(11))
        later = TimeSlot(_at(11), _at(12))
        assert not morning.overlaps(later)
        assert not later.overlaps(morning)

    def test_naive_datetimes_read_as_utc(self):
        slot = TimeSlot(datetime(2026, 5, 1, 10), datetime(2026, 5, 1, 11))
        assert slot.start_at == _at(10)

    def test_other_offsets_normalised(self):
        madrid = timezone(timedelta(hours=2))
        slot = TimeSlot(datetime(2026, 5, 1, 12, tzinfo=madrid), _at(11))
        assert slot.start_at == _at(10)

    def test_parse_iso_strings(self):
        slot = TimeSlot.parse("2026-05-01T10:00:00Z", "2026-05-01T11:30:00Z")
        assert slot.duration_minutes == 90

    def test_parse_rejects_garbage(self):
        with pytest.raises(InvalidDate):
            TimeSlot.parse("tomorrow", "2026-05-01T11:00:00Z")


class TestHelpers:

    def test_parse_timestamp_with_offset(self):
        assert parse_timestamp("2026-05-01T12:00:00+02:00") == _at(10)

    @pytest.mark.parametrize("raw", ["2026-05-01", "2026-05-01T", "12:00", "2026-05-01T25:00:00Z", 1714557600])
    def test_parse_timestamp_needs_date_and_time(self, raw):
        with pytest.raises(InvalidDate):
            parse_timestamp(raw)

    def test_bool_is_not_an_int(self):
        assert is_strict_int(3)
        assert not is_strict_int(True)
        assert not is_strict_int(2.0)
