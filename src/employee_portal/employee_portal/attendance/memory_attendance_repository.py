from __future__ import annotations

import threading
import uuid
from dataclasses import replace
from datetime import datetime
from typing import Optional, Sequence

from .model import AttendanceRecord, LogoutUpdate
from .repository import AttendanceRepository


class InMemoryAttendanceRepository(AttendanceRepository):
    """Insertion-ordered attendance store; check-and-write steps run under one lock."""

    def __init__(self):
        self._lock = threading.Lock()
        self._by_id: dict[str, AttendanceRecord] = {}

    def get_for_employee_and_date(self, employee_id: str, date: str) -> Optional[AttendanceRecord]:
        for r in list(self._by_id.values()):
            if r.employee_id == employee_id and r.date == date:
                return r
        return None

    def create_login(self, *, employee_id: str, date: str, login_time: datetime) -> Optional[AttendanceRecord]:
        with self._lock:
            if self.get_for_employee_and_date(employee_id, date):
                return None
            rec = AttendanceRecord(
                id=str(uuid.uuid4()),
                employee_id=employee_id,
                date=date,
                login_time=login_time,
                logout_time=None,
            )
            self._by_id[rec.id] = rec
            return rec

    def apply_logout(self, update: LogoutUpdate) -> Optional[AttendanceRecord]:
        with self._lock:
            rec = self._by_id.get(update.record_id)
            if rec is None or rec.logout_time is not None:
                return None
            rec = replace(rec, logout_time=update.logout_time)
            self._by_id[rec.id] = rec
            return rec

    def list_by_date(self, date: str) -> Sequence[AttendanceRecord]:
        return [r for r in list(self._by_id.values()) if r.date == date]

    def list_by_date_prefix(self, prefix: str) -> Sequence[AttendanceRecord]:
        return [r for r in list(self._by_id.values()) if r.date.startswith(prefix)]

    def list_by_employee(self, employee_id: str) -> Sequence[AttendanceRecord]:
        return [r for r in list(self._by_id.values()) if r.employee_id == employee_id]

    def list_all(self) -> Sequence[AttendanceRecord]:
        return list(self._by_id.values())

    def add(self, record: AttendanceRecord) -> AttendanceRecord:
        """Load an existing record as-is (imports and fixtures)."""
        with self._lock:
            self._by_id[record.id] = record
            return record
