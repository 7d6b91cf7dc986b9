from __future__ import annotations


def test_task_lifecycle(admin_client, employee_client):
    created = admin_client.post(
        "/api/tasks",
        json={
            "title": "Inventory",
            "description": "Count laptops",
            "assignedTo": "EMP001",
            "dueDate": "2030-01-15",
            "priority": "High",
        },
    )
    assert created.status_code == 201
    task_id = created.get_json()["id"]

    assert [t["id"] for t in employee_client.get("/api/tasks").get_json()] == [task_id]

    done = employee_client.patch(f"/api/tasks/{task_id}", json={"status": "Completed"})
    assert done.get_json()["status"] == "Completed"

    assert employee_client.patch("/api/tasks/missing", json={"status": "Completed"}).status_code == 404
    assert employee_client.post("/api/tasks", json={}).status_code == 403

    analytics = admin_client.get("/api/analytics").get_json()
    assert analytics["taskCompletion"] == {"total": 1, "completed": 1, "rate": 100}


def test_leave_lifecycle(admin_client, employee_client):
    applied = employee_client.post(
        "/api/leave-requests",
        json={"startDate": "2030-02-01", "endDate": "2030-02-03", "reason": "Vacation"},
    )
    assert applied.status_code == 201
    leave = applied.get_json()
    assert leave["status"] == "Pending"
    assert leave["employeeId"] == "EMP001"

    assert employee_client.patch(f"/api/leave-requests/{leave['id']}", json={"status": "Approved"}).status_code == 403

    bad = admin_client.patch(f"/api/leave-requests/{leave['id']}", json={"status": "Pending"})
    assert bad.status_code == 400
    assert bad.get_json()["error"] == "Invalid status"

    ok = admin_client.patch(f"/api/leave-requests/{leave['id']}", json={"status": "Approved"})
    assert ok.get_json()["status"] == "Approved"

    analytics = admin_client.get("/api/analytics").get_json()
    assert analytics["leaveRequests"] == {"pending": 0, "approved": 1, "rejected": 0}
    assert len(analytics["monthlyAttendance"]) == 6


def test_reminders(admin_client, employee_client):
    created = admin_client.post(
        "/api/reminders",
        json={
            "title": "Payroll cut-off",
            "description": "Submit timesheets",
            "reminderDate": "2030-03-25",
            "importance": "Medium",
        },
    )
    assert created.status_code == 201
    reminder_id = created.get_json()["id"]

    assert [r["title"] for r in employee_client.get("/api/reminders").get_json()] == ["Payroll cut-off"]
    assert employee_client.delete(f"/api/reminders/{reminder_id}").status_code == 403

    assert admin_client.delete(f"/api/reminders/{reminder_id}").status_code == 204
    assert admin_client.delete(f"/api/reminders/{reminder_id}").status_code == 404


def test_analytics_is_admin_only(employee_client):
    resp = employee_client.get("/api/analytics")

    assert resp.status_code == 403
    assert resp.get_json()["code"] == "AccessDenied"


def test_leave_payload_validation(admin_client, employee_client):
    unpadded = employee_client.post(
        "/api/leave-requests",
        json={"startDate": "2024-3-1", "endDate": "2024-10-01", "reason": "Vacation"},
    )
    assert unpadded.status_code == 400
    assert unpadded.get_json()["code"] == "ValidationError"

    leave = employee_client.post(
        "/api/leave-requests",
        json={"startDate": "2030-03-01", "endDate": "2030-03-02", "reason": "Vacation"},
    ).get_json()

    for status in (["Approved"], {"value": "Approved"}, 1, None):
        resp = admin_client.patch(f"/api/leave-requests/{leave['id']}", json={"status": status})
        assert resp.status_code == 400, status
        assert resp.get_json() == {"error": "Invalid status", "code": "ValidationError"}

    assert [lr["status"] for lr in employee_client.get("/api/leave-requests").get_json()] == ["Pending"]


def test_task_payload_with_wrong_types(admin_client, employee_client):
    resp = admin_client.post(
        "/api/tasks",
        json={"title": "Audit", "description": "Q3", "assignedTo": "EMP001", "dueDate": "2030-1-5", "priority": "Low"},
    )
    assert resp.status_code == 400

    task = admin_client.post(
        "/api/tasks",
        json={"title": "Audit", "description": "Q3", "assignedTo": "EMP001", "dueDate": "2030-01-05", "priority": "Low"},
    ).get_json()
    resp = employee_client.patch(f"/api/tasks/{task['id']}", json={"status": ["Completed"]})
    assert resp.status_code == 400
    assert resp.get_json()["code"] == "ValidationError"
