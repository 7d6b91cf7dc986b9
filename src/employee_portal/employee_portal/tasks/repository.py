from __future__ import annotations

from typing import Optional, Protocol, Sequence

from ..core.enums import Priority
from .model import Task, TaskStatusUpdate


class TaskRepository(Protocol):
    def get_by_id(self, task_id: str) -> Optional[Task]:
        raise NotImplementedError

    def list_by_assignee(self, employee_id: str) -> Sequence[Task]:
        raise NotImplementedError

    def list_all(self) -> Sequence[Task]:
        raise NotImplementedError

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
        raise NotImplementedError

    def update_status(self, update: TaskStatusUpdate) -> Optional[Task]:
        raise NotImplementedError
