from __future__ import annotations

import threading
import uuid
from dataclasses import replace
from typing import Optional, Sequence

from ..core.enums import Role
from .model import Employee, EmployeeUpdate
from .repository import EmployeeRepository


class InMemoryEmployeeRepository(EmployeeRepository):
    """Process-local employee directory used by tests and `STORAGE_BACKEND=memory`."""

    def __init__(self):
        self._lock = threading.Lock()
        self._by_id: dict[str, Employee] = {}

    def get_by_id(self, id: str) -> Optional[Employee]:
        return self._by_id.get(id)

    def get_by_employee_id(self, employee_id: str) -> Optional[Employee]:
        for emp in list(self._by_id.values()):
            if emp.employee_id == employee_id:
                return emp
        return None

    def list_all(self) -> Sequence[Employee]:
        return list(self._by_id.values())

    def count_all(self) -> int:
        return len(self._by_id)

    def create_employee(
        self,
        *,
        employee_id: str,
        name: str,
        password_hash: str,
        role: Role,
    ) -> Optional[Employee]:
        with self._lock:
            if self.get_by_employee_id(employee_id):
                return None
            emp = Employee(
                id=str(uuid.uuid4()),
                employee_id=employee_id,
                name=name,
                role=role,
                password_hash=password_hash,
            )
            self._by_id[emp.id] = emp
            return emp

    def update_employee(self, id: str, update: EmployeeUpdate) -> Optional[Employee]:
        with self._lock:
            emp = self._by_id.get(id)
            if not emp:
                return None
            changes = {}
            if update.name is not None:
                changes["name"] = update.name
            if update.role is not None:
                changes["role"] = update.role
            if update.password_hash is not None:
                changes["password_hash"] = update.password_hash
            emp = replace(emp, **changes)
            self._by_id[id] = emp
            return emp

    def delete_by_id(self, id: str) -> bool:
        with self._lock:
            return self._by_id.pop(id, None) is not None
