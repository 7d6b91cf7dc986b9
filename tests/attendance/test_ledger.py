from __future__ import annotations

import threading
from datetime import datetime, timedelta, timezone

import pytest

from src.employee_portal.employee_portal.attendance.memory_attendance_repository import InMemoryAttendanceRepository
from src.employee_portal.employee_portal.attendance.service import AttendanceLedger
from src.employee_portal.employee_portal.core.exceptions import (
    AccessDenied,
    AlreadyCheckedOut,
    AuthenticationError,
    DuplicateCheckIn,
    NoActiveSession,
)


@pytest.fixture
def repo():
    return InMemoryAttendanceRepository()


@pytest.fixture
def ledger(repo):
    return AttendanceLedger(repo)


def test_login_creates_open_record_for_today(ledger, alice, fixed_now):
    rec = ledger.record_login(alice, "EMP001", now=fixed_now)

    assert rec.employee_id == "EMP001"
    assert rec.date == "2024-03-01"
    assert rec.login_time == fixed_now
    assert rec.logout_time is None
    assert rec.is_open


def test_full_day_login_then_logout(ledger, repo, alice, fixed_now):
    ledger.record_login(alice, "EMP001", now=fixed_now)
    closed = ledger.record_logout(alice, "EMP001", now=fixed_now + timedelta(hours=8))

    assert closed.logout_time == fixed_now + timedelta(hours=8)
    assert len(repo.list_all()) == 1
    assert repo.list_all()[0].logout_time is not None


def test_second_login_same_day_is_rejected(ledger, repo, alice, fixed_now):
    ledger.record_login(alice, "EMP001", now=fixed_now)

    with pytest.raises(DuplicateCheckIn, match="Already marked present today"):
        ledger.record_login(alice, "EMP001", now=fixed_now + timedelta(hours=1))
    assert len(repo.list_by_employee("EMP001")) == 1


def test_login_after_logout_same_day_is_still_duplicate(ledger, alice, fixed_now):
    ledger.record_login(alice, "EMP001", now=fixed_now)
    ledger.record_logout(alice, "EMP001", now=fixed_now + timedelta(hours=1))

    with pytest.raises(DuplicateCheckIn):
        ledger.record_login(alice, "EMP001", now=fixed_now + timedelta(hours=2))


def test_logout_without_login(ledger, alice, fixed_now):
    with pytest.raises(NoActiveSession, match="No login record found for today"):
        ledger.record_logout(alice, "EMP001", now=fixed_now)


def test_second_logout_keeps_first_time(ledger, repo, alice, fixed_now):
    ledger.record_login(alice, "EMP001", now=fixed_now)
    first = fixed_now + timedelta(hours=4)
    ledger.record_logout(alice, "EMP001", now=first)

    with pytest.raises(AlreadyCheckedOut, match="Already logged out"):
        ledger.record_logout(alice, "EMP001", now=fixed_now + timedelta(hours=6))
    assert repo.list_all()[0].logout_time == first


def test_yesterdays_open_record_does_not_count_today(ledger, alice, fixed_now):
    ledger.record_login(alice, "EMP001", now=fixed_now - timedelta(days=1))

    with pytest.raises(NoActiveSession):
        ledger.record_logout(alice, "EMP001", now=fixed_now)
    # a new day allows a fresh login
    assert ledger.record_login(alice, "EMP001", now=fixed_now).date == "2024-03-01"


def test_logout_clock_behind_login_is_clamped(ledger, alice, fixed_now):
    ledger.record_login(alice, "EMP001", now=fixed_now)
    closed = ledger.record_logout(alice, "EMP001", now=fixed_now - timedelta(minutes=5))

    assert closed.logout_time == fixed_now


def test_day_boundary_is_utc(ledger, alice):
    # 23:30 at UTC-05:00 is already the next UTC day
    local = datetime(2024, 3, 1, 23, 30, tzinfo=timezone(timedelta(hours=-5)))
    rec = ledger.record_login(alice, "EMP001", now=local)

    assert rec.date == "2024-03-02"


def test_cannot_record_for_someone_else(ledger, alice, admin, fixed_now):
    with pytest.raises(AccessDenied):
        ledger.record_login(alice, "EMP002", now=fixed_now)
    # admins check in for themselves only, too
    with pytest.raises(AccessDenied):
        ledger.record_login(admin, "EMP001", now=fixed_now)


def test_anonymous_caller_is_rejected(ledger, fixed_now):
    with pytest.raises(AuthenticationError):
        ledger.record_login(None, "EMP001", now=fixed_now)


def test_concurrent_logins_create_exactly_one_record(ledger, repo, alice, fixed_now):
    outcomes = []
    barrier = threading.Barrier(8)

    def worker():
        barrier.wait()
        try:
            ledger.record_login(alice, "EMP001", now=fixed_now)
            outcomes.append("ok")
        except DuplicateCheckIn:
            outcomes.append("dup")

    threads = [threading.Thread(target=worker) for _ in range(8)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    assert outcomes.count("ok") == 1
    assert outcomes.count("dup") == 7
    assert len(repo.list_by_employee("EMP001")) == 1


def test_concurrent_logouts_close_once(ledger, alice, fixed_now):
    ledger.record_login(alice, "EMP001", now=fixed_now)
    outcomes = []
    barrier = threading.Barrier(6)

    def worker(offset: int):
        barrier.wait()
        try:
            ledger.record_logout(alice, "EMP001", now=fixed_now + timedelta(hours=1, minutes=offset))
            outcomes.append("ok")
        except AlreadyCheckedOut:
            outcomes.append("closed")

    threads = [threading.Thread(target=worker, args=(i,)) for i in range(6)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    assert outcomes.count("ok") == 1
    assert outcomes.count("closed") == 5


class _LosingRaceRepo(InMemoryAttendanceRepository):
    """Reports no record on the pre-check, then loses the insert to another writer."""

    def get_for_employee_and_date(self, employee_id, date):
        return None

    def create_login(self, *, employee_id, date, login_time):
        return None


def test_lost_insert_race_surfaces_as_duplicate(alice, fixed_now):
    ledger = AttendanceLedger(_LosingRaceRepo())

    with pytest.raises(DuplicateCheckIn):
        ledger.record_login(alice, "EMP001", now=fixed_now)
