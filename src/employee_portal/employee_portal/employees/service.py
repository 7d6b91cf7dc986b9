from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Mapping, Optional, Sequence

from werkzeug.security import check_password_hash, generate_password_hash

from ..access.policy import AccessPolicy, Caller
from ..common.validators import require_choice, require_min_length, require_non_empty
from ..core.constants import MIN_PASSWORD_LENGTH
from ..core.enums import Role
from ..core.exceptions import AuthenticationError, NotFound, ValidationError
from .model import Employee, EmployeeUpdate
from .repository import EmployeeRepository

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SessionEmployee:
    """What we store into Flask session after login."""

    id: str
    employee_id: str
    name: str
    role: Role

    def to_caller(self) -> Caller:
        return Caller(employee_id=self.employee_id, role=self.role)


class AuthService:
    """Use case: authenticate an employee (login)."""

    def __init__(self, employees: EmployeeRepository):
        self._employees = employees

    def authenticate(self, employee_id: str, password: str) -> SessionEmployee:
        if not isinstance(employee_id, str) or not isinstance(password, str):
            raise AuthenticationError("Invalid credentials")

        employee = self._employees.get_by_employee_id(employee_id.strip())
        if not employee:
            raise AuthenticationError("Invalid credentials")

        try:
            ok = check_password_hash(employee.password_hash, password)
        except ValueError:
            # e.g. placeholder hashes or corrupted values
            ok = False

        if not ok:
            raise AuthenticationError("Invalid credentials")

        logger.info("Employee %s signed in", employee.employee_id)
        return SessionEmployee(
            id=employee.id,
            employee_id=employee.employee_id,
            name=employee.name,
            role=employee.role,
        )

    def current(self, id: str) -> Employee:
        employee = self._employees.get_by_id(id)
        if not employee:
            raise NotFound("Employee not found")
        return employee


class EmployeeService:
    """Use case: manage the employee directory (admin)."""

    def __init__(self, employees: EmployeeRepository, policy: Optional[AccessPolicy] = None):
        self._employees = employees
        self._policy = policy or AccessPolicy()

    def list_employees(self, caller: Caller) -> Sequence[Employee]:
        self._policy.require_admin(caller)
        return self._employees.list_all()

    def get_employee(self, caller: Caller, id: str) -> Employee:
        self._policy.require_admin(caller)
        employee = self._employees.get_by_id(id)
        if not employee:
            raise NotFound("Employee not found")
        return employee

    def create_employee(
        self,
        caller: Caller,
        *,
        employee_id: str,
        name: str,
        password: str,
        role: str,
    ) -> Employee:
        self._policy.require_admin(caller)

        employee_id = require_non_empty(employee_id, "Employee ID")
        name = require_non_empty(name, "Name")
        require_min_length(password, "Password", MIN_PASSWORD_LENGTH)
        role_value = require_choice(role, Role, "role")

        if self._employees.get_by_employee_id(employee_id):
            raise ValidationError("Employee ID already exists")

        created = self._employees.create_employee(
            employee_id=employee_id,
            name=name,
            password_hash=generate_password_hash(password),
            role=role_value,
        )
        if created is None:
            raise ValidationError("Employee ID already exists")

        logger.info("Employee %s created by %s", created.employee_id, caller.employee_id)
        return created

    def update_employee(
        self,
        caller: Caller,
        id: str,
        *,
        name: Optional[str] = None,
        role: Optional[str] = None,
        password: Optional[str] = None,
    ) -> Employee:
        self._policy.require_admin(caller)

        update = EmployeeUpdate(
            name=require_non_empty(name, "Name") if name is not None else None,
            role=require_choice(role, Role, "role") if role is not None else None,
            password_hash=(
                generate_password_hash(require_min_length(password, "Password", MIN_PASSWORD_LENGTH))
                if password not in (None, "")
                else None
            ),
        )
        if update.is_empty():
            raise ValidationError("At least one of 'name', 'role' or 'password' must be provided")

        updated = self._employees.update_employee(id, update)
        if not updated:
            raise NotFound("Employee not found")
        return updated

    def delete_employee(self, caller: Caller, id: str) -> None:
        """Remove the identity only; attendance, task and leave history stay."""
        self._policy.require_admin(caller)

        employee = self._employees.get_by_id(id)
        if not employee:
            raise NotFound("Employee not found")
        if employee.employee_id == caller.employee_id:
            raise ValidationError("You cannot delete your own account")

        if not self._employees.delete_by_id(id):
            raise NotFound("Employee not found")
        logger.info("Employee %s deleted by %s", employee.employee_id, caller.employee_id)

    def names_by_employee_id(self) -> Mapping[str, str]:
        return {e.employee_id: e.name for e in self._employees.list_all()}

    def count_employees(self) -> int:
        return self._employees.count_all()
