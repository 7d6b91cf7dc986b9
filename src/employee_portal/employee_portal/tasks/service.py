from __future__ import annotations

import logging
from datetime import datetime
from typing import Optional, Sequence

from ..access.policy import AccessPolicy, Caller
from ..common.datetime_utils import today_iso
from ..common.validators import require_choice, require_iso_date, require_non_empty
from ..core.enums import Priority, TaskStatus
from ..core.exceptions import AccessDenied, NotFound, ValidationError
from ..employees.repository import EmployeeRepository
from .model import Task, TaskStatusUpdate
from .repository import TaskRepository

logger = logging.getLogger(__name__)


class TaskService:
    def __init__(
        self,
        tasks: TaskRepository,
        employees: EmployeeRepository,
        policy: Optional[AccessPolicy] = None,
    ):
        self._tasks = tasks
        self._employees = employees
        self._policy = policy or AccessPolicy()

    def list_for(self, caller: Caller) -> Sequence[Task]:
        caller = self._policy.require_authenticated(caller)
        if caller.is_admin:
            return self._tasks.list_all()
        return self._tasks.list_by_assignee(caller.employee_id)

    def create_task(
        self,
        caller: Caller,
        *,
        title: str,
        description: str,
        assigned_to: str,
        due_date: str,
        priority: str,
        now: Optional[datetime] = None,
    ) -> Task:
        self._policy.require_admin(caller)

        title = require_non_empty(title, "Title")
        description = require_non_empty(description, "Description")
        assigned_to = require_non_empty(assigned_to, "Assignee")
        due_date = require_iso_date(due_date, "Due date")
        priority_value = require_choice(priority, Priority, "priority")

        if not self._employees.get_by_employee_id(assigned_to):
            raise ValidationError("Assigned employee does not exist")

        task = self._tasks.create_task(
            title=title,
            description=description,
            assigned_to=assigned_to,
            assigned_date=today_iso(now),
            due_date=due_date,
            priority=priority_value,
        )
        logger.info("Task %s assigned to %s", task.id, assigned_to)
        return task

    def update_status(self, caller: Caller, task_id: str, status: str) -> Task:
        caller = self._policy.require_authenticated(caller)
        status_value = require_choice(status, TaskStatus, "status")

        task = self._tasks.get_by_id(task_id)
        if not task:
            raise NotFound("Task not found")
        if not caller.is_admin and task.assigned_to != caller.employee_id:
            raise AccessDenied("Access denied")

        updated = self._tasks.update_status(TaskStatusUpdate(task_id=task_id, status=status_value))
        if not updated:
            raise NotFound("Task not found")
        return updated
