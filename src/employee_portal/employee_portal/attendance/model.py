from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from ..common.datetime_utils import to_iso_timestamp


@dataclass(frozen=True)
class AttendanceRecord:
    """Domain entity: one employee's attendance for one UTC calendar day.

    `login_time` is set once at creation; `logout_time` is None while the
    employee is still clocked in and is written at most once afterwards.
    """

    id: str
    employee_id: str
    date: str
    login_time: datetime
    logout_time: Optional[datetime] = None

    @property
    def is_open(self) -> bool:
        return self.logout_time is None

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "employeeId": self.employee_id,
            "date": self.date,
            "loginTime": to_iso_timestamp(self.login_time),
            "logoutTime": to_iso_timestamp(self.logout_time),
        }


@dataclass(frozen=True)
class EnrichedAttendance:
    """Read-model: an attendance record joined with the employee's display name."""

    record: AttendanceRecord
    name: str

    def to_dict(self) -> dict:
        data = self.record.to_dict()
        data["name"] = self.name
        return data


@dataclass(frozen=True)
class LogoutUpdate:
    """The only change the store accepts for an existing attendance record."""

    record_id: str
    logout_time: datetime
