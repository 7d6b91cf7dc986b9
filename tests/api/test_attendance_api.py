from __future__ import annotations

import io

import pandas as pd


def test_check_in_check_out_flow(employee_client):
    assert employee_client.get("/api/attendance/today").get_json() is None

    created = employee_client.post("/api/attendance/login")
    assert created.status_code == 201
    record = created.get_json()
    assert record["employeeId"] == "EMP001"
    assert record["logoutTime"] is None
    assert record["loginTime"].endswith("Z")

    dup = employee_client.post("/api/attendance/login")
    assert dup.status_code == 400
    assert dup.get_json() == {"error": "Already marked present today", "code": "DuplicateCheckIn"}

    closed = employee_client.post("/api/attendance/logout")
    assert closed.status_code == 200
    assert closed.get_json()["logoutTime"] is not None

    again = employee_client.post("/api/attendance/logout")
    assert again.status_code == 400
    assert again.get_json()["code"] == "AlreadyCheckedOut"

    assert employee_client.get("/api/attendance/today").get_json()["id"] == record["id"]
    assert employee_client.get("/api/attendance/working-days").get_json() == {"workingDays": 1}


def test_logout_before_login(employee_client):
    resp = employee_client.post("/api/attendance/logout")

    assert resp.status_code == 400
    assert resp.get_json()["code"] == "NoActiveSession"


def test_my_history_is_enriched(employee_client):
    employee_client.post("/api/attendance/login")

    items = employee_client.get("/api/attendance/me").get_json()

    assert len(items) == 1
    assert items[0]["name"] == "John Doe"


def test_listing_permissions(admin_client, employee_client):
    employee_client.post("/api/attendance/login")

    assert employee_client.get("/api/attendance").status_code == 403
    assert employee_client.get("/api/attendance?employeeId=ADMIN").status_code == 403
    assert len(employee_client.get("/api/attendance?employeeId=EMP001").get_json()) == 1

    assert len(admin_client.get("/api/attendance").get_json()) == 1
    assert admin_client.get("/api/attendance?month=1999-01&employeeId=EMP001").get_json() == []


def test_bad_month_filter(admin_client):
    resp = admin_client.get("/api/attendance?month=2024-1")

    assert resp.status_code == 400
    assert resp.get_json()["code"] == "ValidationError"


def test_stats_and_trend(admin_client, employee_client):
    employee_client.post("/api/attendance/login")

    stats = admin_client.get("/api/attendance/stats").get_json()
    assert stats == {"totalEmployees": 2, "presentToday": 1, "absentToday": 1}

    trend = admin_client.get("/api/attendance/trend?months=3").get_json()
    assert len(trend) == 3
    assert trend[-1]["count"] == 1

    assert admin_client.get("/api/attendance/trend?months=abc").status_code == 400
    assert employee_client.get("/api/attendance/stats").status_code == 403
    assert employee_client.get("/api/attendance/trend").status_code == 403


def test_csv_export(admin_client, employee_client):
    employee_client.post("/api/attendance/login")

    resp = admin_client.get("/api/attendance/export/csv")

    assert resp.status_code == 200
    assert resp.mimetype == "text/csv"
    assert "attachment" in resp.headers["Content-Disposition"]
    lines = resp.data.decode("utf-8-sig").splitlines()
    assert lines[0] == "Employee ID,Name,Date,Login Time,Logout Time"
    assert lines[1].startswith("EMP001,John Doe,")


def test_excel_export(admin_client):
    resp = admin_client.get("/api/attendance/export/excel?month=2024-03")

    assert resp.status_code == 200
    assert "attendance_2024-03.xlsx" in resp.headers["Content-Disposition"]
    df = pd.read_excel(io.BytesIO(resp.data), engine="openpyxl")
    assert df.empty


def test_exports_forbidden_for_employees(employee_client):
    assert employee_client.get("/api/attendance/export/csv").status_code == 403
    assert employee_client.get("/api/attendance/export/excel").status_code == 403


def test_unpadded_date_filter(admin_client):
    resp = admin_client.get("/api/attendance?date=2024-3-1")

    assert resp.status_code == 400
    assert resp.get_json() == {"error": "date must be a YYYY-MM-DD date", "code": "ValidationError"}


def test_trend_window_is_bounded(admin_client):
    assert len(admin_client.get("/api/attendance/trend?months=120").get_json()) == 120

    resp = admin_client.get("/api/attendance/trend?months=30000")
    assert resp.status_code == 400
    assert resp.get_json() == {"error": "months must be between 1 and 120", "code": "ValidationError"}
    assert admin_client.get("/api/attendance/trend?months=-2").status_code == 400
