from __future__ import annotations

from dataclasses import dataclass

from ..core.enums import LeaveStatus


@dataclass(frozen=True)
class LeaveRequest:
    id: str
    employee_id: str
    start_date: str
    end_date: str
    reason: str
    applied_date: str
    status: LeaveStatus = LeaveStatus.PENDING

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "employeeId": self.employee_id,
            "startDate": self.start_date,
            "endDate": self.end_date,
            "reason": self.reason,
            "appliedDate": self.applied_date,
            "status": self.status.value,
        }


@dataclass(frozen=True)
class LeaveDecision:
    request_id: str
    status: LeaveStatus
