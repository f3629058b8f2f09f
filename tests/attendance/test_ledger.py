from __future__ import annotations

from datetime import date, datetime

import pytest

from src.attendance_ledger.attendance_ledger.attendance.ledger import AttendanceLedger
from src.attendance_ledger.attendance_ledger.core.exceptions import (
    AlreadyCheckedInError,
    CheckoutBeforeCheckinError,
    CrossDayCheckoutError,
    NoOpenSessionError,
    OpenSessionError,
    ZeroDurationCheckoutError,
)


@pytest.fixture
def ledger() -> AttendanceLedger:
    return AttendanceLedger()


def test_check_in_opens_session(ledger):
    rec = ledger.check_in("E001", datetime(2024, 1, 10, 9, 0))

    assert rec.is_open
    assert rec.record_id == 1
    assert ledger.active_session("E001") == rec
    assert len(ledger) == 1


def test_second_check_in_rejected_and_state_unchanged(ledger):
    first = ledger.check_in("E001", datetime(2024, 1, 10, 9, 0))

    with pytest.raises(AlreadyCheckedInError) as exc_info:
        ledger.check_in("E001", datetime(2024, 1, 10, 10, 0))

    assert exc_info.value.open_since == first.check_in
    assert len(ledger) == 1
    assert list(ledger) == [first]
    assert ledger.active_session("E001") == first


def test_check_out_without_check_in(ledger):
    with pytest.raises(NoOpenSessionError):
        ledger.check_out("E001", datetime(2024, 1, 10, 17, 0))


def test_cross_day_checkout_rejected(ledger):
    ledger.check_in("E001", datetime(2024, 1, 10, 9, 0))

    with pytest.raises(CrossDayCheckoutError):
        ledger.check_out("E001", datetime(2024, 1, 11, 9, 0))

    assert ledger.active_session("E001") is not None


def test_zero_duration_checkout_rejected(ledger):
    ledger.check_in("E001", datetime(2024, 1, 10, 9, 0))

    with pytest.raises(ZeroDurationCheckoutError):
        ledger.check_out("E001", datetime(2024, 1, 10, 9, 0))


def test_seconds_are_dropped_before_comparing(ledger):
    ledger.check_in("E001", datetime(2024, 1, 10, 9, 0, 15))

    with pytest.raises(ZeroDurationCheckoutError):
        ledger.check_out("E001", datetime(2024, 1, 10, 9, 0, 45))


def test_checkout_before_checkin_rejected(ledger):
    ledger.check_in("E001", datetime(2024, 1, 10, 9, 0))

    with pytest.raises(CheckoutBeforeCheckinError):
        ledger.check_out("E001", datetime(2024, 1, 10, 8, 0))

    assert ledger.completed_records() == []


def test_full_day_session(ledger):
    ledger.check_in("E001", datetime(2024, 1, 10, 9, 0))
    rec = ledger.check_out("E001", datetime(2024, 1, 10, 17, 30))

    worked = ledger.worked_duration(rec)
    assert (worked.hours, worked.minutes) == (8, 30)
    assert str(worked) == "8h 30m"

    assert ledger.completed_records() == [rec]
    assert ledger.records_in_range(date(2024, 1, 10), date(2024, 1, 10)) == [rec]
    assert ledger.records_in_range(date(2024, 1, 11), date(2024, 1, 12)) == []

    assert ledger.active_session("E001") is None
    again = ledger.check_in("E001", datetime(2024, 1, 11, 8, 0))
    assert again.is_open
    assert again.record_id == 2


def test_closed_record_cannot_be_closed_again(ledger):
    ledger.check_in("E001", datetime(2024, 1, 10, 9, 0))
    ledger.check_out("E001", datetime(2024, 1, 10, 12, 0))

    with pytest.raises(NoOpenSessionError):
        ledger.check_out("E001", datetime(2024, 1, 10, 13, 0))


def test_sessions_are_per_employee(ledger):
    ledger.check_in("E001", datetime(2024, 1, 10, 9, 0))
    ledger.check_in("E002", datetime(2024, 1, 10, 9, 5))
    ledger.check_out("E001", datetime(2024, 1, 10, 10, 0))

    assert ledger.active_session("E001") is None
    assert ledger.active_session("E002").check_in == datetime(2024, 1, 10, 9, 5)
    assert [r.employee_id for r in ledger.active_sessions()] == ["E002"]


def test_never_two_open_sessions_for_one_employee(ledger):
    moments = [
        ("in", datetime(2024, 1, 10, 9, 0)),
        ("in", datetime(2024, 1, 10, 9, 30)),
        ("out", datetime(2024, 1, 10, 12, 0)),
        ("out", datetime(2024, 1, 10, 12, 30)),
        ("in", datetime(2024, 1, 10, 13, 0)),
        ("out", datetime(2024, 1, 11, 9, 0)),
        ("in", datetime(2024, 1, 10, 14, 0)),
    ]
    for action, at in moments:
        try:
            if action == "in":
                ledger.check_in("E001", at)
            else:
                ledger.check_out("E001", at)
        except (AlreadyCheckedInError, NoOpenSessionError, CrossDayCheckoutError):
            pass
        assert sum(1 for r in ledger if r.employee_id == "E001" and r.is_open) <= 1


def test_records_in_range_inclusive_and_filters_open(ledger):
    ledger.check_in("E001", datetime(2024, 1, 9, 9, 0))
    ledger.check_out("E001", datetime(2024, 1, 9, 17, 0))
    ledger.check_in("E002", datetime(2024, 1, 10, 9, 0))
    ledger.check_out("E002", datetime(2024, 1, 10, 17, 0))
    ledger.check_in("E001", datetime(2024, 1, 11, 9, 0))

    rows = ledger.records_in_range(date(2024, 1, 9), date(2024, 1, 11))

    assert [r.employee_id for r in rows] == ["E001", "E002"]


def test_range_with_start_after_end_is_empty(ledger):
    ledger.check_in("E001", datetime(2024, 1, 10, 9, 0))
    ledger.check_out("E001", datetime(2024, 1, 10, 17, 0))

    assert ledger.records_in_range(date(2024, 1, 11), date(2024, 1, 9)) == []


def test_queries_are_repeatable(ledger):
    ledger.check_in("E001", datetime(2024, 1, 10, 9, 0))
    ledger.check_out("E001", datetime(2024, 1, 10, 17, 0))

    assert ledger.completed_records() == ledger.completed_records()
    start, end = date(2024, 1, 1), date(2024, 1, 31)
    assert ledger.records_in_range(start, end) == ledger.records_in_range(start, end)


def test_worked_duration_refuses_open_record(ledger):
    rec = ledger.check_in("E001", datetime(2024, 1, 10, 9, 0))

    with pytest.raises(OpenSessionError):
        ledger.worked_duration(rec)
