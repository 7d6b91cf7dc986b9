from __future__ import annotations

from enum import Enum


class Role(str, Enum):
    """Caller role used for access checks."""

    ADMIN = "Admin"
    EMPLOYEE = "Employee"


class Priority(str, Enum):
    """Priority scale shared by tasks and reminders."""

    LOW = "Low"
    MEDIUM = "Medium"
    HIGH = "High"


class TaskStatus(str, Enum):
    PENDING = "Pending"
    COMPLETED = "Completed"


class LeaveStatus(str, Enum):
    """Leave request approval states."""

    PENDING = "Pending"
    APPROVED = "Approved"
    REJECTED = "Rejected"
