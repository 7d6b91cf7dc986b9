from __future__ import annotations

from datetime import datetime
from typing import Optional, Protocol, Sequence

from .model import AttendanceRecord, LogoutUpdate


class AttendanceRepository(Protocol):
    """Backing store for the attendance ledger.

    Implementations must make `create_login` and `apply_logout` atomic: two
    concurrent calls for the same (employee, date) must not both succeed.
    """

    def get_for_employee_and_date(self, employee_id: str, date: str) -> Optional[AttendanceRecord]:
        raise NotImplementedError

    def create_login(self, *, employee_id: str, date: str, login_time: datetime) -> Optional[AttendanceRecord]:
        """Insert the day's record; returns None if one already exists for (employee_id, date)."""

        raise NotImplementedError

    def apply_logout(self, update: LogoutUpdate) -> Optional[AttendanceRecord]:
        """Set logout_time if still unset; returns None if the record is already closed."""

        raise NotImplementedError

    def list_by_date(self, date: str) -> Sequence[AttendanceRecord]:
        raise NotImplementedError

    def list_by_date_prefix(self, prefix: str) -> Sequence[AttendanceRecord]:
        raise NotImplementedError

    def list_by_employee(self, employee_id: str) -> Sequence[AttendanceRecord]:
        raise NotImplementedError

    def list_all(self) -> Sequence[AttendanceRecord]:
        raise NotImplementedError
