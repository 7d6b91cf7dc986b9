from __future__ import annotations

from typing import Optional, Protocol, Sequence

from ..core.enums import Role
from .model import Employee, EmployeeUpdate


class EmployeeRepository(Protocol):
    """Repository interface for the employee directory.

    Services depend on this interface, not on a concrete database.
    """

    def get_by_id(self, id: str) -> Optional[Employee]:
        raise NotImplementedError

    def get_by_employee_id(self, employee_id: str) -> Optional[Employee]:
        raise NotImplementedError

    def list_all(self) -> Sequence[Employee]:
        raise NotImplementedError

    def count_all(self) -> int:
        raise NotImplementedError

    def create_employee(
        self,
        *,
        employee_id: str,
        name: str,
        password_hash: str,
        role: Role,
    ) -> Optional[Employee]:
        """Insert a new employee; returns None when `employee_id` is already taken."""

        raise NotImplementedError

    def update_employee(self, id: str, update: EmployeeUpdate) -> Optional[Employee]:
        raise NotImplementedError

    def delete_by_id(self, id: str) -> bool:
        raise NotImplementedError
