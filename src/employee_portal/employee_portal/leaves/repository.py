from __future__ import annotations

from typing import Optional, Protocol, Sequence

from .model import LeaveDecision, LeaveRequest


class LeaveRepository(Protocol):
    def get_by_id(self, request_id: str) -> Optional[LeaveRequest]:
        raise NotImplementedError

    def list_by_employee(self, employee_id: str) -> Sequence[LeaveRequest]:
        raise NotImplementedError

    def list_all(self) -> Sequence[LeaveRequest]:
        raise NotImplementedError

    def create_leave(
        self,
        *,
        employee_id: str,
        start_date: str,
        end_date: str,
        reason: str,
        applied_date: str,
    ) -> LeaveRequest:
        raise NotImplementedError

    def decide(self, decision: LeaveDecision) -> Optional[LeaveRequest]:
        raise NotImplementedError
