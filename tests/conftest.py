from __future__ import annotations

from datetime import datetime, timezone

import pytest
from werkzeug.security import generate_password_hash

from src.employee_portal.employee_portal.access.policy import Caller
from src.employee_portal.employee_portal.container import BACKEND_MEMORY, build_container
from src.employee_portal.employee_portal.core.enums import Role


@pytest.fixture
def fixed_now() -> datetime:
    return datetime(2024, 3, 1, 9, 0, 0, tzinfo=timezone.utc)


@pytest.fixture
def admin() -> Caller:
    return Caller(employee_id="ADMIN", role=Role.ADMIN)


@pytest.fixture
def alice() -> Caller:
    return Caller(employee_id="EMP001", role=Role.EMPLOYEE)


@pytest.fixture
def bob() -> Caller:
    return Caller(employee_id="EMP002", role=Role.EMPLOYEE)


@pytest.fixture
def container():
    """In-memory wiring with one admin and two employees."""
    c = build_container(backend=BACKEND_MEMORY)
    for employee_id, name, role in (
        ("ADMIN", "System Administrator", Role.ADMIN),
        ("EMP001", "Alice Nguyen", Role.EMPLOYEE),
        ("EMP002", "Bob Tran", Role.EMPLOYEE),
    ):
        c.employees_repo.create_employee(
            employee_id=employee_id,
            name=name,
            password_hash=generate_password_hash("secret1"),
            role=role,
        )
    return c
