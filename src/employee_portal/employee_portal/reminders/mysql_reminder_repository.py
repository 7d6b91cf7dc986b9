from __future__ import annotations

import uuid
from typing import Optional, Sequence

from ..core.enums import Priority
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone
from .model import Reminder
from .repository import ReminderRepository

_SELECT = "SELECT id, title, description, reminder_date, importance, created_at FROM reminders"


def _to_reminder(r: dict) -> Reminder:
    return Reminder(
        id=r["id"],
        title=r["title"],
        description=r["description"],
        reminder_date=r["reminder_date"],
        importance=Priority(r["importance"]),
        created_at=r["created_at"],
    )


class MySQLReminderRepository(ReminderRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get_by_id(self, reminder_id: str) -> Optional[Reminder]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(_SELECT + " WHERE id=%s", (reminder_id,))
            r = fetchone(cur)
            return _to_reminder(r) if r else None

    def list_all(self) -> Sequence[Reminder]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(_SELECT + " ORDER BY seq DESC")
            return [_to_reminder(r) for r in fetchall(cur)]

    def create_reminder(
        self,
        *,
        title: str,
        description: str,
        reminder_date: str,
        importance: Priority,
        created_at: str,
    ) -> Reminder:
        reminder = Reminder(
            id=str(uuid.uuid4()),
            title=title,
            description=description,
            reminder_date=reminder_date,
            importance=importance,
            created_at=created_at,
        )
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO reminders(id, title, description, reminder_date, importance, created_at)
                VALUES(%s,%s,%s,%s,%s,%s)
                """,
                (reminder.id, title, description, reminder_date, importance.value, created_at),
            )
        return reminder

    def delete_by_id(self, reminder_id: str) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("DELETE FROM reminders WHERE id=%s", (reminder_id,))
            return cur.rowcount > 0
