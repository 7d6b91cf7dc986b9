from __future__ import annotations

from datetime import datetime, timedelta, timezone

import pytest
from werkzeug.security import generate_password_hash

from src.employee_portal.employee_portal.access.policy import Caller
from src.employee_portal.employee_portal.analytics.service import percent
from src.employee_portal.employee_portal.attendance.model import AttendanceRecord
from src.employee_portal.employee_portal.core.constants import MAX_TREND_MONTHS
from src.employee_portal.employee_portal.core.enums import Role
from src.employee_portal.employee_portal.core.exceptions import AccessDenied, ValidationError


def _add(container, rid: str, employee_id: str, day: str):
    container.attendance_repo.add(
        AttendanceRecord(
            id=rid,
            employee_id=employee_id,
            date=day,
            login_time=datetime(2024, 1, 1, 8, 0, tzinfo=timezone.utc),
        )
    )


def test_today_stats_counts_distinct_present(container, admin, fixed_now):
    # 10 employees in total, 3 of them checked in today
    for n in range(3, 10):
        container.employees_repo.create_employee(
            employee_id=f"EMP{n:03d}",
            name=f"Employee {n}",
            password_hash=generate_password_hash("secret1"),
            role=Role.EMPLOYEE,
        )
    for employee_id in ("EMP001", "EMP002", "EMP005"):
        container.attendance_ledger.record_login(Caller(employee_id, Role.EMPLOYEE), employee_id, now=fixed_now)
    _add(container, "old", "EMP007", "2024-02-29")

    stats = container.presence_aggregator.get_today_stats(admin, now=fixed_now)

    assert stats == {"totalEmployees": 10, "presentToday": 3, "absentToday": 7}


def test_absent_never_negative(container, admin, fixed_now):
    # attendance rows from employees since removed from the directory
    for n in range(5):
        _add(container, f"ghost{n}", f"GONE{n}", "2024-03-01")

    stats = container.presence_aggregator.get_today_stats(admin, now=fixed_now)

    assert stats["presentToday"] == 5
    assert stats["absentToday"] == 0


def test_monthly_trend_crosses_year_boundary_oldest_first(container, admin):
    _add(container, "a", "EMP001", "2023-11-03")
    _add(container, "b", "EMP001", "2024-01-10")
    _add(container, "c", "EMP002", "2024-01-11")
    _add(container, "d", "EMP002", "2024-02-30")
    _add(container, "e", "EMP002", "2023-07-01")

    # the 31st must not overflow into a month that skips February
    now = datetime(2024, 3, 31, 12, 0, tzinfo=timezone.utc)
    trend = container.presence_aggregator.get_monthly_trend(admin, 6, now=now)

    assert [t["month"] for t in trend] == ["2023-10", "2023-11", "2023-12", "2024-01", "2024-02", "2024-03"]
    assert [t["count"] for t in trend] == [0, 1, 0, 2, 1, 0]
    assert trend[0]["label"] == "Oct 2023"
    assert trend[-1]["label"] == "Mar 2024"


def test_monthly_trend_single_month(container, admin, fixed_now):
    trend = container.presence_aggregator.get_monthly_trend(admin, 1, now=fixed_now)

    assert trend == [{"month": "2024-03", "label": "Mar 2024", "count": 0}]


def test_monthly_trend_rejects_non_positive(container, admin, fixed_now):
    with pytest.raises(ValidationError):
        container.presence_aggregator.get_monthly_trend(admin, 0, now=fixed_now)


def test_monthly_trend_accepts_maximum_window(container, admin, fixed_now):
    _add(container, "oldest", "EMP001", "2014-04-30")
    _add(container, "too-old", "EMP001", "2014-03-31")

    trend = container.presence_aggregator.get_monthly_trend(admin, MAX_TREND_MONTHS, now=fixed_now)

    assert len(trend) == MAX_TREND_MONTHS
    assert trend[0] == {"month": "2014-04", "label": "Apr 2014", "count": 1}
    assert trend[-1]["month"] == "2024-03"


@pytest.mark.parametrize("months", [MAX_TREND_MONTHS + 1, 30000])
def test_monthly_trend_rejects_windows_past_maximum(container, admin, fixed_now, months):
    with pytest.raises(ValidationError, match="between 1 and 120"):
        container.presence_aggregator.get_monthly_trend(admin, months, now=fixed_now)


def test_today_stats_follow_directory_changes(container, admin, fixed_now):
    emp = container.employees_repo.get_by_employee_id("EMP002")
    container.employee_service.delete_employee(admin, emp.id)

    stats = container.presence_aggregator.get_today_stats(admin, now=fixed_now)

    assert stats["totalEmployees"] == 2


def test_aggregates_are_admin_only(container, alice, fixed_now):
    agg = container.presence_aggregator
    with pytest.raises(AccessDenied):
        agg.get_today_stats(alice, now=fixed_now)
    with pytest.raises(AccessDenied):
        agg.get_monthly_trend(alice, now=fixed_now)
    with pytest.raises(AccessDenied):
        agg.get_analytics(alice, now=fixed_now)


@pytest.mark.parametrize(
    "part,total,expected",
    [(0, 0, 0), (0, 5, 0), (1, 3, 33), (2, 3, 67), (1, 8, 13), (1, 200, 1), (3, 3, 100)],
)
def test_percent_rounds_half_up(part, total, expected):
    assert percent(part, total) == expected


def test_analytics_composes_tasks_and_leaves(container, admin, alice, bob, fixed_now):
    tasks = container.task_service
    t1 = tasks.create_task(admin, title="Report", description="Q1", assigned_to="EMP001",
                           due_date="2024-03-10", priority="High", now=fixed_now)
    tasks.create_task(admin, title="Review", description="PR", assigned_to="EMP002",
                      due_date="2024-03-11", priority="Low", now=fixed_now)
    tasks.create_task(admin, title="Deploy", description="v2", assigned_to="EMP002",
                      due_date="2024-03-12", priority="Medium", now=fixed_now)
    tasks.update_status(alice, t1.id, "Completed")

    leaves = container.leave_service
    l1 = leaves.apply(alice, start_date="2024-03-04", end_date="2024-03-05", reason="Trip", now=fixed_now)
    l2 = leaves.apply(bob, start_date="2024-03-06", end_date="2024-03-06", reason="Doctor", now=fixed_now)
    leaves.apply(bob, start_date="2024-03-20", end_date="2024-03-21", reason="Family", now=fixed_now)
    leaves.decide(admin, l1.id, "Approved")
    leaves.decide(admin, l2.id, "Rejected")

    data = container.presence_aggregator.get_analytics(admin, now=fixed_now)

    assert data["taskCompletion"] == {"total": 3, "completed": 1, "rate": 33}
    assert data["leaveRequests"] == {"pending": 1, "approved": 1, "rejected": 1}
    assert len(data["monthlyAttendance"]) == 6
    assert data["monthlyAttendance"][-1]["month"] == "2024-03"
