from __future__ import annotations

import pytest

from src.employee_portal.employee_portal.main import create_app


@pytest.fixture
def app():
    return create_app(
        {
            "STORAGE_BACKEND": "memory",
            "AUTO_INIT_DB": False,
            "AUTO_SEED_DB": True,
            "SECRET_KEY": "test-secret",
            "TESTING": True,
            "DEBUG": False,
            "LOG_LEVEL": "WARNING",
        }
    )


@pytest.fixture
def client(app):
    return app.test_client()


def _login(client, employee_id: str, password: str):
    return client.post("/api/auth/login", json={"employeeId": employee_id, "password": password})


@pytest.fixture
def admin_client(app):
    c = app.test_client()
    assert _login(c, "ADMIN", "admin123").status_code == 200
    return c


@pytest.fixture
def employee_client(app):
    c = app.test_client()
    assert _login(c, "EMP001", "emp123").status_code == 200
    return c


@pytest.fixture
def login():
    return _login
