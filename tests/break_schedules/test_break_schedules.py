from __future__ import annotations

from concurrent.futures import ThreadPoolExecutor

import pytest

from src.admin_dashboard.admin_dashboard.container import build_container
from src.admin_dashboard.admin_dashboard.core.exceptions import ConflictError, ValidationError


def _slot(**overrides):
    data = {
        "employeeId": 1,
        "day": "Monday",
        "startTime": "10:00",
        "endTime": "10:30",
        "week": 12,
        "month": 3,
        "year": 2025,
    }
    data.update(overrides)
    return data


def test_saving_same_slot_twice_keeps_one_row_with_latest_times(container):
    svc = container.break_schedule_service

    svc.save(_slot())
    svc.save(_slot(startTime="11:00", endTime="11:15"))

    rows = svc.list_for_employee(employee_id=1, month=3, year=2025)
    assert len(rows) == 1
    assert (rows[0].start_time, rows[0].end_time) == ("11:00", "11:15")


def test_saving_a_different_day_adds_a_row(container):
    svc = container.break_schedule_service

    svc.save(_slot())
    svc.save(_slot(day="Tuesday"))

    assert [r.day for r in svc.list_for_employee(employee_id=1, month=3, year=2025)] == ["Monday", "Tuesday"]


def test_plain_insert_of_existing_slot_is_a_conflict(container):
    svc = container.break_schedule_service
    svc.add(_slot())

    with pytest.raises(ConflictError):
        svc.add(_slot(startTime="12:00", endTime="12:30"))


def test_list_filters_by_employee_month_and_year(container):
    svc = container.break_schedule_service
    svc.add(_slot())
    svc.add(_slot(employeeId=2))
    svc.add(_slot(month=4, week=14))
    svc.add(_slot(year=2024))

    rows = svc.list_for_employee(employee_id=1, month=3, year=2025)

    assert len(rows) == 1
    assert rows[0].employee_id == 1


def test_list_query_requires_valid_numbers(container):
    with pytest.raises(ValidationError):
        container.break_schedule_service.list_for_employee(employee_id="abc", month=3, year=2025)
    with pytest.raises(ValidationError):
        container.break_schedule_service.list_for_employee(employee_id=1, month=13, year=2025)


def test_weekly_summary_totals_minutes_per_day(container):
    svc = container.break_schedule_service
    svc.add(_slot(startTime="10:00", endTime="10:30"))
    svc.add(_slot(employeeId=2, startTime="15:00", endTime="15:15"))
    svc.add(_slot(day="Tuesday", startTime="09:40", endTime="10:00"))
    svc.add(_slot(day="Tuesday", week=13, startTime="09:00", endTime="12:00"))

    summary = svc.weekly_summary(week=12, year=2025)

    assert [(d.day, d.total_minutes) for d in summary.days] == [("Monday", 45), ("Tuesday", 20)]
    assert summary.total_minutes == 65


def test_weekly_summary_of_empty_week_is_zero(container):
    summary = container.break_schedule_service.weekly_summary(week=40, year=2025)

    assert summary.days == ()
    assert summary.total_minutes == 0


@pytest.mark.parametrize(
    "overrides",
    [
        {"startTime": "25:00"},
        {"endTime": "9:5"},
        {"startTime": "11:00", "endTime": "10:00"},
        {"week": 0},
        {"month": 13},
        {"employeeId": 0},
        {"day": " "},
    ],
)
def test_invalid_slots_are_rejected(container, overrides):
    with pytest.raises(ValidationError):
        container.break_schedule_service.save(_slot(**overrides))


def test_concurrent_saves_of_one_slot_settle_on_one_row(tmp_path):
    c = build_container(
        db_config={"url": f"sqlite:///{tmp_path}/breaks.db", "auth_token": "tok", "max_retries": 0},
        sleep=lambda s: None,
    )
    svc = c.break_schedule_service
    ends = [f"10:{m:02d}" for m in range(10, 50)]

    with ThreadPoolExecutor(max_workers=16) as pool:
        list(pool.map(lambda end: svc.save(_slot(endTime=end)), ends))

    rows = svc.list_for_employee(employee_id=1, month=3, year=2025)
    assert len(rows) == 1
    assert rows[0].end_time in ends
    c.conn.dispose()
