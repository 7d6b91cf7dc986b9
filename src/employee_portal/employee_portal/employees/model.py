from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from ..core.enums import Role


@dataclass(frozen=True)
class Employee:
    """Domain entity: an employee identity.

    `employee_id` is the business key (e.g. "EMP001") every attendance, task and
    leave row points at; `id` is the opaque system identifier.
    """

    id: str
    employee_id: str
    name: str
    role: Role
    password_hash: str

    def to_dict(self) -> dict:
        # password_hash never leaves the server
        return {
            "id": self.id,
            "employeeId": self.employee_id,
            "name": self.name,
            "role": self.role.value,
        }


@dataclass(frozen=True)
class EmployeeUpdate:
    """Fields an administrator may change on an existing employee."""

    name: Optional[str] = None
    role: Optional[Role] = None
    password_hash: Optional[str] = None

    def is_empty(self) -> bool:
        return self.name is None and self.role is None and self.password_hash is None
