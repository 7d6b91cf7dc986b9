from __future__ import annotations

import threading
import uuid
from dataclasses import replace
from typing import Optional, Sequence

from ..core.enums import Priority, TaskStatus
from .model import Task, TaskStatusUpdate
from .repository import TaskRepository


class InMemoryTaskRepository(TaskRepository):
    def __init__(self):
        self._lock = threading.Lock()
        self._by_id: dict[str, Task] = {}

    def get_by_id(self, task_id: str) -> Optional[Task]:
        return self._by_id.get(task_id)

    def list_by_assignee(self, employee_id: str) -> Sequence[Task]:
        return [t for t in list(self._by_id.values()) if t.assigned_to == employee_id]

    def list_all(self) -> Sequence[Task]:
        return list(self._by_id.values())

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
        with self._lock:
            self._by_id[task.id] = task
        return task

    def update_status(self, update: TaskStatusUpdate) -> Optional[Task]:
        with self._lock:
            task = self._by_id.get(update.task_id)
            if not task:
                return None
            task = replace(task, status=update.status)
            self._by_id[task.id] = task
            return task
