from __future__ import annotations

import uuid
from typing import Optional, Sequence

from mysql.connector.errors import IntegrityError

from ..core.enums import Role
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone, is_duplicate_key
from .model import Employee, EmployeeUpdate
from .repository import EmployeeRepository

_COLUMNS = "id, employee_id, name, password_hash, role"


def _to_employee(row: dict) -> Employee:
    return Employee(
        id=row["id"],
        employee_id=row["employee_id"],
        name=row["name"],
        role=Role(row["role"]),
        password_hash=row["password_hash"],
    )


class MySQLEmployeeRepository(EmployeeRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get_by_id(self, id: str) -> Optional[Employee]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_COLUMNS} FROM employees WHERE id=%s", (id,))
            row = fetchone(cur)
            return _to_employee(row) if row else None

    def get_by_employee_id(self, employee_id: str) -> Optional[Employee]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_COLUMNS} FROM employees WHERE employee_id=%s", (employee_id,))
            row = fetchone(cur)
            return _to_employee(row) if row else None

    def list_all(self) -> Sequence[Employee]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_COLUMNS} FROM employees ORDER BY created_at, employee_id")
            return [_to_employee(r) for r in fetchall(cur)]

    def count_all(self) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("SELECT COUNT(*) AS n FROM employees")
            row = fetchone(cur)
            return int(row["n"]) if row else 0

    def create_employee(
        self,
        *,
        employee_id: str,
        name: str,
        password_hash: str,
        role: Role,
    ) -> Optional[Employee]:
        new_id = str(uuid.uuid4())
        try:
            with db_cursor(self._conn_factory) as (_, cur):
                cur.execute(
                    """
                    INSERT INTO employees(id, employee_id, name, password_hash, role)
                    VALUES(%s,%s,%s,%s,%s)
                    """,
                    (new_id, employee_id, name, password_hash, role.value),
                )
        except IntegrityError as e:
            if is_duplicate_key(e):
                return None
            raise
        return Employee(id=new_id, employee_id=employee_id, name=name, role=role, password_hash=password_hash)

    def update_employee(self, id: str, update: EmployeeUpdate) -> Optional[Employee]:
        assignments: list[str] = []
        params: list[object] = []
        if update.name is not None:
            assignments.append("name=%s")
            params.append(update.name)
        if update.role is not None:
            assignments.append("role=%s")
            params.append(update.role.value)
        if update.password_hash is not None:
            assignments.append("password_hash=%s")
            params.append(update.password_hash)

        if assignments:
            with db_cursor(self._conn_factory) as (_, cur):
                cur.execute(
                    f"UPDATE employees SET {', '.join(assignments)} WHERE id=%s",
                    tuple(params + [id]),
                )
        return self.get_by_id(id)

    def delete_by_id(self, id: str) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("DELETE FROM employees WHERE id=%s", (id,))
            return cur.rowcount > 0
