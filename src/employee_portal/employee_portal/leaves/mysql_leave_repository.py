from __future__ import annotations

import uuid
from typing import Optional, Sequence

from ..core.enums import LeaveStatus
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone
from .model import LeaveDecision, LeaveRequest
from .repository import LeaveRepository

_SELECT = """
    SELECT id, employee_id, start_date, end_date, reason, applied_date, status
    FROM leave_requests
"""


def _to_leave(r: dict) -> LeaveRequest:
    return LeaveRequest(
        id=r["id"],
        employee_id=r["employee_id"],
        start_date=r["start_date"],
        end_date=r["end_date"],
        reason=r["reason"],
        applied_date=r["applied_date"],
        status=LeaveStatus(r["status"]),
    )


class MySQLLeaveRepository(LeaveRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get_by_id(self, request_id: str) -> Optional[LeaveRequest]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(_SELECT + " WHERE id=%s", (request_id,))
            r = fetchone(cur)
            return _to_leave(r) if r else None

    def list_by_employee(self, employee_id: str) -> Sequence[LeaveRequest]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(_SELECT + " WHERE employee_id=%s ORDER BY seq", (employee_id,))
            return [_to_leave(r) for r in fetchall(cur)]

    def list_all(self) -> Sequence[LeaveRequest]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(_SELECT + " ORDER BY seq")
            return [_to_leave(r) for r in fetchall(cur)]

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
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO leave_requests(id, employee_id, start_date, end_date, reason, applied_date, status)
                VALUES(%s,%s,%s,%s,%s,%s,%s)
                """,
                (
                    leave.id,
                    leave.employee_id,
                    leave.start_date,
                    leave.end_date,
                    leave.reason,
                    leave.applied_date,
                    leave.status.value,
                ),
            )
        return leave

    def decide(self, decision: LeaveDecision) -> Optional[LeaveRequest]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                "UPDATE leave_requests SET status=%s WHERE id=%s",
                (decision.status.value, decision.request_id),
            )
        return self.get_by_id(decision.request_id)
