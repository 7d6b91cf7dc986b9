from __future__ import annotations

import uuid
from datetime import datetime
from typing import Optional, Sequence

from mysql.connector.errors import IntegrityError

from ..common.datetime_utils import as_utc
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone, is_duplicate_key
from .model import AttendanceRecord, LogoutUpdate
from .repository import AttendanceRepository

_SELECT = """
    SELECT id, employee_id, work_date, login_time, logout_time
    FROM attendance_records
"""


def _naive_utc(value: datetime) -> datetime:
    # DATETIME columns hold UTC wall-clock values without tzinfo.
    return as_utc(value).replace(tzinfo=None)


def _to_record(r: dict) -> AttendanceRecord:
    return AttendanceRecord(
        id=r["id"],
        employee_id=r["employee_id"],
        date=r["work_date"],
        login_time=as_utc(r["login_time"]),
        logout_time=as_utc(r["logout_time"]) if r.get("logout_time") else None,
    )


class MySQLAttendanceRepository(AttendanceRepository):
    """Attendance store backed by `attendance_records`.

    UNIQUE(employee_id, work_date) makes the login insert race-safe; logout is a
    conditional UPDATE on `logout_time IS NULL`.
    """

    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get_for_employee_and_date(self, employee_id: str, date: str) -> Optional[AttendanceRecord]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(_SELECT + " WHERE employee_id=%s AND work_date=%s", (employee_id, date))
            r = fetchone(cur)
            return _to_record(r) if r else None

    def _get_by_id(self, record_id: str) -> Optional[AttendanceRecord]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(_SELECT + " WHERE id=%s", (record_id,))
            r = fetchone(cur)
            return _to_record(r) if r else None

    def create_login(self, *, employee_id: str, date: str, login_time: datetime) -> Optional[AttendanceRecord]:
        record = AttendanceRecord(
            id=str(uuid.uuid4()),
            employee_id=employee_id,
            date=date,
            login_time=as_utc(login_time),
            logout_time=None,
        )
        try:
            with db_cursor(self._conn_factory) as (_, cur):
                cur.execute(
                    """
                    INSERT INTO attendance_records(id, employee_id, work_date, login_time, logout_time)
                    VALUES(%s,%s,%s,%s,NULL)
                    """,
                    (record.id, employee_id, date, _naive_utc(login_time)),
                )
        except IntegrityError as e:
            if is_duplicate_key(e):
                return None
            raise
        return record

    def apply_logout(self, update: LogoutUpdate) -> Optional[AttendanceRecord]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                UPDATE attendance_records
                SET logout_time=%s
                WHERE id=%s AND logout_time IS NULL
                """,
                (_naive_utc(update.logout_time), update.record_id),
            )
            changed = cur.rowcount > 0
        if not changed:
            return None
        return self._get_by_id(update.record_id)

    def list_by_date(self, date: str) -> Sequence[AttendanceRecord]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(_SELECT + " WHERE work_date=%s ORDER BY seq", (date,))
            return [_to_record(r) for r in fetchall(cur)]

    def list_by_date_prefix(self, prefix: str) -> Sequence[AttendanceRecord]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                _SELECT + " WHERE LEFT(work_date, CHAR_LENGTH(%s)) = %s ORDER BY seq",
                (prefix, prefix),
            )
            return [_to_record(r) for r in fetchall(cur)]

    def list_by_employee(self, employee_id: str) -> Sequence[AttendanceRecord]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(_SELECT + " WHERE employee_id=%s ORDER BY seq", (employee_id,))
            return [_to_record(r) for r in fetchall(cur)]

    def list_all(self) -> Sequence[AttendanceRecord]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(_SELECT + " ORDER BY seq")
            return [_to_record(r) for r in fetchall(cur)]
