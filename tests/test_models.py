"""Tests for roster models and date normalization."""
from datetime import date, datetime, timedelta, timezone

import pytest

from shiftgrid.models import (
    NBSP,
    PLACEHOLDER_CODE,
    ShiftEntry,
    StaffEntry,
    StaffRoster,
    iso_date,
    placeholder_shift,
    to_utc_date,
)


class TestToUtcDate:
    """Tests for date normalization."""

    def test_plain_iso_string(self):
        assert to_utc_date("2024-01-31") == date(2024, 1, 31)

    def test_date_passthrough(self):
        d = date(2024, 2, 29)
        assert to_utc_date(d) is d

    def test_aware_datetime_converted_to_utc(self):
        """23:30 at UTC-05:00 is already the next UTC day."""
        dt = datetime(2024, 1, 31, 23, 30, tzinfo=timezone(timedelta(hours=-5)))
        assert to_utc_date(dt) == date(2024, 2, 1)

    def test_positive_offset_rolls_back(self):
        dt = datetime(2024, 3, 1, 0, 30, tzinfo=timezone(timedelta(hours=9)))
        assert to_utc_date(dt) == date(2024, 2, 29)

    def test_naive_datetime_taken_as_utc(self):
        assert to_utc_date(datetime(2024, 1, 1, 23, 59)) == date(2024, 1, 1)

    def test_iso_datetime_string_with_z(self):
        assert to_utc_date("2024-12-31T23:00:00Z") == date(2024, 12, 31)

    def test_iso_datetime_string_with_offset(self):
        assert to_utc_date("2024-12-31T22:00:00-03:00") == date(2025, 1, 1)

    def test_same_utc_day_normalizes_identically(self):
        a = datetime(2024, 6, 1, 2, 0, tzinfo=timezone(timedelta(hours=2)))
        b = datetime(2024, 5, 31, 20, 0, tzinfo=timezone(timedelta(hours=-4)))
        assert iso_date(a) == iso_date(b) == "2024-06-01"

    def test_rejects_other_types(self):
        with pytest.raises(TypeError):
            to_utc_date(20240131)

    def test_bad_string_raises_value_error(self):
        with pytest.raises(ValueError):
            to_utc_date("31/01/2024")


class TestShiftEntry:
    """Tests for ShiftEntry."""

    def test_from_dict_canonical_keys(self):
        s = ShiftEntry.from_dict({"id": 10, "date": "2024-01-31", "code": "C"})
        assert s == ShiftEntry(id=10, date=date(2024, 1, 31), code="C")
        assert s.iso_date == "2024-01-31"
        assert not s.is_placeholder

    def test_from_dict_legacy_keys(self):
        s = ShiftEntry.from_dict({"shift_id": "3", "shift_date": "2024-08-01", "shift_code": "-"})
        assert s.id == 3
        assert s.is_placeholder

    def test_missing_code_raises_key_error(self):
        with pytest.raises(KeyError):
            ShiftEntry.from_dict({"id": 1, "date": "2024-01-01"})

    def test_datetime_field_normalized(self):
        s = ShiftEntry(id=1, date=datetime(2024, 1, 1, 12, tzinfo=timezone.utc), code="C")
        assert s.date == date(2024, 1, 1)
        assert type(s.date) is date

    def test_to_dict(self):
        s = ShiftEntry(id=5, date=date(2024, 5, 5), code="N")
        assert s.to_dict() == {"id": 5, "date": "2024-05-05", "code": "N"}

    def test_placeholder_shift(self):
        s = placeholder_shift(date(2024, 1, 2))
        assert s.id is None
        assert s.code == PLACEHOLDER_CODE

    def test_nbsp_constant(self):
        assert NBSP == "\u00a0"


class TestStaffModels:
    """Tests for StaffEntry and StaffRoster."""

    def test_staff_from_dict(self):
        st = StaffEntry.from_dict({
            "id": "4", "name": "Ada",
            "shifts": [{"id": 1, "date": "2024-01-01", "code": "C"}],
        })
        assert st.id == 4
        assert st.name == "Ada"
        assert len(st.shifts) == 1

    def test_staff_missing_shifts_raises(self):
        with pytest.raises(KeyError):
            StaffEntry.from_dict({"id": 1, "name": "Ada"})

    def test_roster_iteration_and_len(self):
        roster = StaffRoster(staff=[StaffEntry(id=1, name="A"), StaffEntry(id=2, name="B")])
        assert len(roster) == 2
        assert [s.name for s in roster] == ["A", "B"]

    def test_roster_to_dict(self, ada_payload):
        st = StaffEntry.from_dict(ada_payload["staff"][0])
        assert StaffRoster(staff=[st]).to_dict() == ada_payload
