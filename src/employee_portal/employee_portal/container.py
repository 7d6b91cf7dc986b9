from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .access.policy import AccessPolicy
from .analytics.service import PresenceAggregator
from .attendance.export import AttendanceExporter
from .attendance.memory_attendance_repository import InMemoryAttendanceRepository
from .attendance.mysql_attendance_repository import MySQLAttendanceRepository
from .attendance.queries import AttendanceQueryService
from .attendance.repository import AttendanceRepository
from .attendance.service import AttendanceLedger
from .database.connection import DBConfig, DatabaseConnection
from .employees.memory_employee_repository import InMemoryEmployeeRepository
from .employees.mysql_employee_repository import MySQLEmployeeRepository
from .employees.repository import EmployeeRepository
from .employees.service import AuthService, EmployeeService
from .leaves.memory_leave_repository import InMemoryLeaveRepository
from .leaves.mysql_leave_repository import MySQLLeaveRepository
from .leaves.repository import LeaveRepository
from .leaves.service import LeaveService
from .reminders.memory_reminder_repository import InMemoryReminderRepository
from .reminders.mysql_reminder_repository import MySQLReminderRepository
from .reminders.repository import ReminderRepository
from .reminders.service import ReminderService
from .tasks.memory_task_repository import InMemoryTaskRepository
from .tasks.mysql_task_repository import MySQLTaskRepository
from .tasks.repository import TaskRepository
from .tasks.service import TaskService

BACKEND_MYSQL = "mysql"
BACKEND_MEMORY = "memory"


@dataclass(frozen=True)
class Container:
    conn: Optional[DatabaseConnection]

    employees_repo: EmployeeRepository
    attendance_repo: AttendanceRepository
    tasks_repo: TaskRepository
    leaves_repo: LeaveRepository
    reminders_repo: ReminderRepository

    auth_service: AuthService
    employee_service: EmployeeService
    attendance_ledger: AttendanceLedger
    attendance_queries: AttendanceQueryService
    attendance_exporter: AttendanceExporter
    presence_aggregator: PresenceAggregator
    task_service: TaskService
    leave_service: LeaveService
    reminder_service: ReminderService


def build_container(*, db_config: Optional[dict] = None, backend: str = BACKEND_MYSQL) -> Container:
    if backend == BACKEND_MYSQL:
        if db_config is None:
            raise ValueError("db_config is required for the mysql backend")
        conn = DatabaseConnection.get_instance(DBConfig.from_dict(db_config))
        employees_repo = MySQLEmployeeRepository(conn)
        attendance_repo = MySQLAttendanceRepository(conn)
        tasks_repo = MySQLTaskRepository(conn)
        leaves_repo = MySQLLeaveRepository(conn)
        reminders_repo = MySQLReminderRepository(conn)
    elif backend == BACKEND_MEMORY:
        conn = None
        employees_repo = InMemoryEmployeeRepository()
        attendance_repo = InMemoryAttendanceRepository()
        tasks_repo = InMemoryTaskRepository()
        leaves_repo = InMemoryLeaveRepository()
        reminders_repo = InMemoryReminderRepository()
    else:
        raise ValueError(f"Unknown storage backend: {backend!r}")

    policy = AccessPolicy()
    employee_service = EmployeeService(employees_repo, policy)
    attendance_queries = AttendanceQueryService(attendance_repo, employee_service, policy)

    return Container(
        conn=conn,
        employees_repo=employees_repo,
        attendance_repo=attendance_repo,
        tasks_repo=tasks_repo,
        leaves_repo=leaves_repo,
        reminders_repo=reminders_repo,
        auth_service=AuthService(employees_repo),
        employee_service=employee_service,
        attendance_ledger=AttendanceLedger(attendance_repo, policy),
        attendance_queries=attendance_queries,
        attendance_exporter=AttendanceExporter(attendance_queries, policy),
        presence_aggregator=PresenceAggregator(attendance_queries, employee_service, tasks_repo, leaves_repo, policy),
        task_service=TaskService(tasks_repo, employees_repo, policy),
        leave_service=LeaveService(leaves_repo, policy),
        reminder_service=ReminderService(reminders_repo, policy),
    )
