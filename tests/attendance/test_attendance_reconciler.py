from __future__ import annotations

import logging
from datetime import date, datetime

import pytest

from src.shop_payroll.shop_payroll.attendance.reconciler import AttendanceReconciler
from src.shop_payroll.shop_payroll.core.constants import NO_SCHEDULED_TIME_NOTE
from src.shop_payroll.shop_payroll.core.enums import AttendanceSource, Role

START = datetime(2024, 3, 1)
END = datetime(2024, 3, 31, 23, 59, 59)


@pytest.fixture
def emp_id(store):
    admin_id = store.add_admin("owner@example.com", role=Role.SHOP_ADMIN)
    return store.add_employee(store.add_shop(admin_id))


@pytest.fixture
def reconciler(store, fixed_now):
    return AttendanceReconciler(store.punches, store.rotas, clock=fixed_now)


def test_punches_on_same_day_are_summed(store, emp_id, reconciler):
    store.add_punch(emp_id, datetime(2024, 3, 4, 9, 0), datetime(2024, 3, 4, 13, 0))
    store.add_punch(emp_id, datetime(2024, 3, 4, 14, 0), datetime(2024, 3, 4, 17, 30))

    records = reconciler.reconcile(emp_id, START, END)

    assert len(records) == 1
    rec = records[0]
    assert rec.work_date == date(2024, 3, 4)
    assert rec.source == AttendanceSource.FROM_PUNCH
    assert rec.hours == pytest.approx(7.5)
    assert rec.punch_in == datetime(2024, 3, 4, 9, 0)
    assert rec.punch_out == datetime(2024, 3, 4, 17, 30)


def test_punch_suppresses_every_rota_entry_for_that_day(store, emp_id, reconciler):
    store.add_rota(emp_id, date(2024, 3, 5), "09:00", "17:00")
    store.add_rota(emp_id, date(2024, 3, 5), "18:00", "22:00")
    store.add_rota(emp_id, date(2024, 3, 5))
    store.add_punch(emp_id, datetime(2024, 3, 5, 10, 0), datetime(2024, 3, 5, 11, 0))

    records = reconciler.reconcile(emp_id, START, END)

    assert [(r.work_date, r.source, r.hours) for r in records] == [
        (date(2024, 3, 5), AttendanceSource.FROM_PUNCH, pytest.approx(1.0)),
    ]


def test_rota_with_times_gives_scheduled_hours(store, emp_id, reconciler):
    store.add_rota(emp_id, date(2024, 3, 6), "09:00", "17:30")

    (rec,) = reconciler.reconcile(emp_id, START, END)

    assert rec.source == AttendanceSource.FROM_SCHEDULE
    assert rec.hours == pytest.approx(8.5)
    assert rec.to_dict() == {
        "date": "2024-03-06",
        "hours": pytest.approx(8.5),
        "source": "FromSchedule",
        "scheduledStart": "09:00",
        "scheduledEnd": "17:30",
    }


def test_rota_without_times_is_zero_hour_day(store, emp_id, reconciler):
    store.add_rota(emp_id, date(2024, 3, 7), "09:00", None)

    (rec,) = reconciler.reconcile(emp_id, START, END)

    assert rec.source == AttendanceSource.SCHEDULE_NO_TIME
    assert rec.hours == 0.0
    assert rec.note == NO_SCHEDULED_TIME_NOTE


def test_overnight_rota_is_not_wrapped(store, emp_id, reconciler):
    store.add_rota(emp_id, date(2024, 3, 8), "22:00", "06:00")

    (rec,) = reconciler.reconcile(emp_id, START, END)

    assert rec.source == AttendanceSource.FROM_SCHEDULE
    assert rec.hours == 0.0


def test_punch_out_before_punch_in_clamps_to_zero(store, emp_id, reconciler):
    store.add_punch(emp_id, datetime(2024, 3, 9, 17, 0), datetime(2024, 3, 9, 9, 0))

    (rec,) = reconciler.reconcile(emp_id, START, END)

    assert rec.hours == 0.0


def test_malformed_rota_time_skips_only_that_shift(store, emp_id, reconciler, caplog):
    store.add_rota(emp_id, date(2024, 3, 10), "9am", "17:00")
    store.add_rota(emp_id, date(2024, 3, 11), "09:00", "12:00")

    with caplog.at_level(logging.WARNING):
        records = reconciler.reconcile(emp_id, START, END)

    assert [r.work_date for r in records] == [date(2024, 3, 11)]
    assert "Skipping rota" in caplog.text


def test_first_rota_entry_wins_for_duplicate_date(store, emp_id, reconciler):
    store.add_rota(emp_id, date(2024, 3, 12), "09:00", "10:00")
    store.add_rota(emp_id, date(2024, 3, 12), "09:00", "17:00")

    (rec,) = reconciler.reconcile(emp_id, START, END)

    assert rec.hours == pytest.approx(1.0)


def test_records_are_sorted_by_date_across_sources(store, emp_id, reconciler):
    store.add_rota(emp_id, date(2024, 3, 20), "09:00", "10:00")
    store.add_punch(emp_id, datetime(2024, 3, 18, 9, 0), datetime(2024, 3, 18, 10, 0))
    store.add_rota(emp_id, date(2024, 3, 2))

    records = reconciler.reconcile(emp_id, START, END)

    assert [r.work_date for r in records] == [date(2024, 3, 2), date(2024, 3, 18), date(2024, 3, 20)]


def test_no_evidence_means_no_records(store, emp_id, reconciler):
    store.add_punch(emp_id, datetime(2024, 4, 2, 9, 0), datetime(2024, 4, 2, 17, 0))

    assert reconciler.reconcile(emp_id, START, END) == []


def test_other_employees_are_not_mixed_in(store, emp_id, reconciler):
    other = store.add_employee(store.employees.get_by_id(emp_id).shop_id, name="Other")
    store.add_punch(other, datetime(2024, 3, 4, 9, 0), datetime(2024, 3, 4, 17, 0))

    assert reconciler.reconcile(emp_id, START, END) == []


def test_open_punch_counts_until_now_and_grows(store, emp_id):
    now = {"value": datetime(2024, 3, 15, 10, 0)}
    reconciler = AttendanceReconciler(store.punches, store.rotas, clock=lambda: now["value"])
    store.add_punch(emp_id, datetime(2024, 3, 15, 8, 0))

    (first,) = reconciler.reconcile(emp_id, START, END)
    assert first.hours == pytest.approx(2.0, abs=1e-6)
    assert first.punch_out == datetime(2024, 3, 15, 10, 0)

    now["value"] = datetime(2024, 3, 15, 16, 30)
    (later,) = reconciler.reconcile(emp_id, START, END)
    assert later.hours > first.hours
    assert later.hours == pytest.approx(8.5)
