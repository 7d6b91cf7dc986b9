from __future__ import annotations

from datetime import datetime
from typing import Iterable, Optional, Sequence

from ..access.policy import AccessPolicy, Caller
from ..common.datetime_utils import today_iso
from ..common.validators import require_iso_date, require_year_month
from ..core.constants import UNKNOWN_EMPLOYEE_NAME
from ..employees.service import EmployeeService
from .model import AttendanceRecord, EnrichedAttendance
from .repository import AttendanceRepository


class AttendanceQueryService:
    """Read-only projections over the attendance ledger.

    Every call reads the store directly, so results always reflect the latest
    committed logins and logouts.
    """

    def __init__(
        self,
        attendance: AttendanceRepository,
        employees: EmployeeService,
        policy: Optional[AccessPolicy] = None,
    ):
        self._attendance = attendance
        self._employees = employees
        self._policy = policy or AccessPolicy()

    # ---- raw projections -------------------------------------------------

    def get_today(self, employee_id: str, *, now: Optional[datetime] = None) -> Optional[AttendanceRecord]:
        return self._attendance.get_for_employee_and_date(employee_id, today_iso(now))

    def get_by_date(self, date: str) -> Sequence[AttendanceRecord]:
        return self._attendance.list_by_date(require_iso_date(date, "date"))

    def get_by_month(self, year_month: str) -> Sequence[AttendanceRecord]:
        # Plain string prefix, not a calendar range: "2024-02-30" still lands in "2024-02".
        return self._attendance.list_by_date_prefix(require_year_month(year_month))

    def get_by_employee(self, employee_id: str) -> Sequence[AttendanceRecord]:
        return self._attendance.list_by_employee(employee_id)

    def get_all(self) -> Sequence[AttendanceRecord]:
        return self._attendance.list_all()

    def count_working_days(self, employee_id: str) -> int:
        return len(self._attendance.list_by_employee(employee_id))

    def enrich_with_names(self, records: Iterable[AttendanceRecord]) -> list[EnrichedAttendance]:
        names = self._employees.names_by_employee_id()
        return [EnrichedAttendance(record=r, name=names.get(r.employee_id, UNKNOWN_EMPLOYEE_NAME)) for r in records]

    def search(
        self,
        *,
        month: Optional[str] = None,
        date: Optional[str] = None,
        employee_id: Optional[str] = None,
    ) -> list[EnrichedAttendance]:
        """Filter precedence: month, then date, then employee, else everything."""
        if month:
            records = self.get_by_month(month)
        elif date:
            records = self.get_by_date(date)
        elif employee_id:
            records = self.get_by_employee(employee_id)
        else:
            records = self.get_all()
        return self.enrich_with_names(records)

    # ---- caller-scoped entry points --------------------------------------

    def my_today(self, caller: Caller, *, now: Optional[datetime] = None) -> Optional[AttendanceRecord]:
        caller = self._policy.require_authenticated(caller)
        return self.get_today(caller.employee_id, now=now)

    def my_history(self, caller: Caller) -> list[EnrichedAttendance]:
        caller = self._policy.require_authenticated(caller)
        return self.enrich_with_names(self.get_by_employee(caller.employee_id))

    def my_working_days(self, caller: Caller) -> int:
        caller = self._policy.require_authenticated(caller)
        return self.count_working_days(caller.employee_id)

    def list_for(
        self,
        caller: Caller,
        *,
        month: Optional[str] = None,
        date: Optional[str] = None,
        employee_id: Optional[str] = None,
    ) -> list[EnrichedAttendance]:
        """Cross-employee listing; a non-admin may only ask for their own history."""
        if month or date or not employee_id:
            self._policy.require_admin(caller)
        else:
            self._policy.require_self_or_admin(caller, employee_id)
        return self.search(month=month, date=date, employee_id=employee_id)
