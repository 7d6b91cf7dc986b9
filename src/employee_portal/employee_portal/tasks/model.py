from __future__ import annotations

from dataclasses import dataclass

from ..core.enums import Priority, TaskStatus


@dataclass(frozen=True)
class Task:
    id: str
    title: str
    description: str
    assigned_to: str
    assigned_date: str
    due_date: str
    priority: Priority
    status: TaskStatus = TaskStatus.PENDING

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "title": self.title,
            "description": self.description,
            "assignedTo": self.assigned_to,
            "assignedDate": self.assigned_date,
            "dueDate": self.due_date,
            "priority": self.priority.value,
            "status": self.status.value,
        }


@dataclass(frozen=True)
class TaskStatusUpdate:
    """Assignees and admins may only move a task between statuses."""

    task_id: str
    status: TaskStatus
