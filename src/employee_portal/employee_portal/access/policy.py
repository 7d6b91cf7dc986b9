"""Role and ownership checks applied at every service entry point.

The caller identity is established by the authentication layer (Flask session)
and handed to services as a trusted `Caller`.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from ..core.enums import Role
from ..core.exceptions import AccessDenied, AuthenticationError


@dataclass(frozen=True)
class Caller:
    employee_id: str
    role: Role

    @property
    def is_admin(self) -> bool:
        return self.role == Role.ADMIN


class AccessPolicy:
    def require_authenticated(self, caller: Optional[Caller]) -> Caller:
        if caller is None or not caller.employee_id:
            raise AuthenticationError("Authentication required")
        return caller

    def require_admin(self, caller: Optional[Caller]) -> Caller:
        caller = self.require_authenticated(caller)
        if not caller.is_admin:
            raise AccessDenied("Access denied. Admin only.")
        return caller

    def require_self(self, caller: Optional[Caller], employee_id: str) -> Caller:
        """Self-scoped operations are allowed for the matching employee, whatever the role."""
        caller = self.require_authenticated(caller)
        if caller.employee_id != employee_id:
            raise AccessDenied("Employees may only act on their own attendance")
        return caller

    def require_self_or_admin(self, caller: Optional[Caller], employee_id: str) -> Caller:
        caller = self.require_authenticated(caller)
        if caller.is_admin or caller.employee_id == employee_id:
            return caller
        raise AccessDenied("Access denied")
