from __future__ import annotations

import uuid
from typing import Optional, Sequence

from ..core.enums import Priority, TaskStatus
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone
from .model import Task, TaskStatusUpdate
from .repository import TaskRepository

_SELECT = """
    SELECT id, title, description, assigned_to, assigned_date, due_date, priority, status
    FROM tasks
"""


def _to_task(r: dict) -> Task:
    return Task(
        id=r["id"],
        title=r["title"],
        description=r["description"],
        assigned_to=r["assigned_to"],
        assigned_date=r["assigned_date"],
        due_date=r["due_date"],
        priority=Priority(r["priority"]),
        status=TaskStatus(r["status"]),
    )


class MySQLTaskRepository(TaskRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get_by_id(self, task_id: str) -> Optional[Task]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(_SELECT + " WHERE id=%s", (task_id,))
            r = fetchone(cur)
            return _to_task(r) if r else None

    def list_by_assignee(self, employee_id: str) -> Sequence[Task]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(_SELECT + " WHERE assigned_to=%s ORDER BY seq", (employee_id,))
            return [_to_task(r) for r in fetchall(cur)]

    def list_all(self) -> Sequence[Task]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(_SELECT + " ORDER BY seq")
            return [_to_task(r) for r in fetchall(cur)]

    def create_task(
        self,
        *,
        title: str,
        description: str,
        assigned_to: str,
        assigned_date: str,
        due_date: str,
        priority: Priority,
    ) -> Task:
        task = Task(
            id=str(uuid.uuid4()),
            title=title,
            description=description,
            assigned_to=assigned_to,
            assigned_date=assigned_date,
            due_date=due_date,
            priority=priority,
            status=TaskStatus.PENDING,
        )
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO tasks(id, title, description, assigned_to, assigned_date, due_date, priority, status)
                VALUES(%s,%s,%s,%s,%s,%s,%s,%s)
                """,
                (
                    task.id,
                    task.title,
                    task.description,
                    task.assigned_to,
                    task.assigned_date,
                    task.due_date,
                    task.priority.value,
                    task.status.value,
                ),
            )
        return task

    def update_status(self, update: TaskStatusUpdate) -> Optional[Task]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("UPDATE tasks SET status=%s WHERE id=%s", (update.status.value, update.task_id))
        return self.get_by_id(update.task_id)
