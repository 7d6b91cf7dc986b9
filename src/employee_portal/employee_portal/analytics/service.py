from __future__ import annotations

from datetime import date, datetime
from decimal import ROUND_HALF_UP, Decimal
from typing import Optional

from ..access.policy import AccessPolicy, Caller
from ..attendance.queries import AttendanceQueryService
from ..common.datetime_utils import as_utc, month_key, month_label, now_utc, shift_month, today_iso
from ..core.constants import DEFAULT_TREND_MONTHS, MAX_TREND_MONTHS
from ..core.enums import LeaveStatus, TaskStatus
from ..core.exceptions import ValidationError
from ..employees.service import EmployeeService
from ..leaves.repository import LeaveRepository
from ..tasks.repository import TaskRepository


def percent(part: int, total: int) -> int:
    """Whole percentage, halves rounded up; 0 for an empty total."""
    if total <= 0:
        return 0
    value = Decimal(part) * 100 / Decimal(total)
    return int(value.quantize(Decimal("1"), rounding=ROUND_HALF_UP))


class PresenceAggregator:
    """Dashboard numbers computed on read from the attendance ledger.

    Nothing here is cached or written back; each call reflects the store as it
    is at that moment.
    """

    def __init__(
        self,
        queries: AttendanceQueryService,
        employees: EmployeeService,
        tasks: TaskRepository,
        leaves: LeaveRepository,
        policy: Optional[AccessPolicy] = None,
    ):
        self._queries = queries
        self._employees = employees
        self._tasks = tasks
        self._leaves = leaves
        self._policy = policy or AccessPolicy()

    def get_today_stats(self, caller: Caller, *, now: Optional[datetime] = None) -> dict:
        self._policy.require_admin(caller)

        total = self._employees.count_employees()
        present = len({r.employee_id for r in self._queries.get_by_date(today_iso(now))})
        return {
            "totalEmployees": total,
            "presentToday": present,
            "absentToday": max(total - present, 0),
        }

    def get_monthly_trend(
        self,
        caller: Caller,
        months_back: int = DEFAULT_TREND_MONTHS,
        *,
        now: Optional[datetime] = None,
    ) -> list[dict]:
        """Record counts for the last `months_back` months, current month included, oldest first.

        `months_back` is capped at MAX_TREND_MONTHS.
        """
        self._policy.require_admin(caller)
        if not 1 <= months_back <= MAX_TREND_MONTHS:
            raise ValidationError(f"months must be between 1 and {MAX_TREND_MONTHS}")

        current = as_utc(now or now_utc())
        trend = []
        for offset in range(months_back - 1, -1, -1):
            year, month = shift_month(current.year, current.month, -offset)
            key = month_key(date(year, month, 1))
            trend.append(
                {
                    "month": key,
                    "label": month_label(key),
                    "count": len(self._queries.get_by_month(key)),
                }
            )
        return trend

    def get_task_completion_rate(self) -> dict:
        tasks = self._tasks.list_all()
        completed = sum(1 for t in tasks if t.status == TaskStatus.COMPLETED)
        return {
            "total": len(tasks),
            "completed": completed,
            "rate": percent(completed, len(tasks)),
        }

    def get_leave_breakdown(self) -> dict:
        counts = {status: 0 for status in LeaveStatus}
        for leave in self._leaves.list_all():
            counts[leave.status] += 1
        return {
            "pending": counts[LeaveStatus.PENDING],
            "approved": counts[LeaveStatus.APPROVED],
            "rejected": counts[LeaveStatus.REJECTED],
        }

    def get_analytics(self, caller: Caller, *, now: Optional[datetime] = None) -> dict:
        self._policy.require_admin(caller)
        return {
            "monthlyAttendance": self.get_monthly_trend(caller, now=now),
            "taskCompletion": self.get_task_completion_rate(),
            "leaveRequests": self.get_leave_breakdown(),
        }
