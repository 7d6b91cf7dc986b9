from __future__ import annotations

import threading
import uuid
from dataclasses import replace
from typing import Optional, Sequence

from ..core.enums import LeaveStatus
from .model import LeaveDecision, LeaveRequest
from .repository import LeaveRepository


class InMemoryLeaveRepository(LeaveRepository):
    def __init__(self):
        self._lock = threading.Lock()
        self._by_id: dict[str, LeaveRequest] = {}

    def get_by_id(self, request_id: str) -> Optional[LeaveRequest]:
        return self._by_id.get(request_id)

    def list_by_employee(self, employee_id: str) -> Sequence[LeaveRequest]:
        return [r for r in list(self._by_id.values()) if r.employee_id == employee_id]

    def list_all(self) -> Sequence[LeaveRequest]:
        return list(self._by_id.values())

    def create_leave(
        self,
        *,
        employee_id: str,
        start_date: str,
        end_date: str,
        reason: str,
        applied_date: str,
    ) -> LeaveRequest:
        leave = LeaveRequest(
            id=str(uuid.uuid4()),
            employee_id=employee_id,
            start_date=start_date,
            end_date=end_date,
            reason=reason,
            applied_date=applied_date,
            status=LeaveStatus.PENDING,
        )
        with self._lock:
            self._by_id[leave.id] = leave
        return leave

    def decide(self, decision: LeaveDecision) -> Optional[LeaveRequest]:
        with self._lock:
            leave = self._by_id.get(decision.request_id)
            if not leave:
                return None
            leave = replace(leave, status=decision.status)
            self._by_id[leave.id] = leave
            return leave
