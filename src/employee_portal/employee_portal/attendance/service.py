from __future__ import annotations

import logging
from datetime import datetime
from typing import Optional

from ..access.policy import AccessPolicy, Caller
from ..common.datetime_utils import as_utc, iso_day, now_utc
from ..core.exceptions import AlreadyCheckedOut, DuplicateCheckIn, NoActiveSession
from .model import AttendanceRecord, LogoutUpdate
from .repository import AttendanceRepository

logger = logging.getLogger(__name__)


class AttendanceLedger:
    """Owns the per-day attendance lifecycle: NotStarted -> LoggedIn -> LoggedOut.

    NotStarted is the absence of a record. A record is created by login and
    closed by logout; there is no way back.
    """

    def __init__(self, attendance: AttendanceRepository, policy: Optional[AccessPolicy] = None):
        self._attendance = attendance
        self._policy = policy or AccessPolicy()

    def record_login(self, caller: Caller, employee_id: str, *, now: Optional[datetime] = None) -> AttendanceRecord:
        self._policy.require_self(caller, employee_id)
        now = as_utc(now or now_utc())
        today = iso_day(now)

        if self._attendance.get_for_employee_and_date(employee_id, today):
            logger.warning("Duplicate check-in rejected for %s on %s", employee_id, today)
            raise DuplicateCheckIn("Already marked present today")

        record = self._attendance.create_login(employee_id=employee_id, date=today, login_time=now)
        if record is None:
            # lost the race against a concurrent login for the same day
            logger.warning("Concurrent check-in rejected for %s on %s", employee_id, today)
            raise DuplicateCheckIn("Already marked present today")

        logger.info("Check-in %s on %s at %s", employee_id, today, now.isoformat())
        return record

    def record_logout(self, caller: Caller, employee_id: str, *, now: Optional[datetime] = None) -> AttendanceRecord:
        self._policy.require_self(caller, employee_id)
        now = as_utc(now or now_utc())
        today = iso_day(now)

        record = self._attendance.get_for_employee_and_date(employee_id, today)
        if record is None:
            logger.warning("Check-out without check-in for %s on %s", employee_id, today)
            raise NoActiveSession("No login record found for today")
        if record.logout_time is not None:
            logger.warning("Repeated check-out rejected for %s on %s", employee_id, today)
            raise AlreadyCheckedOut("Already logged out")

        # logout never precedes login, even if the clock stepped backwards
        logout_time = max(now, as_utc(record.login_time))
        updated = self._attendance.apply_logout(LogoutUpdate(record_id=record.id, logout_time=logout_time))
        if updated is None:
            raise AlreadyCheckedOut("Already logged out")

        logger.info("Check-out %s on %s at %s", employee_id, today, logout_time.isoformat())
        return updated
