from __future__ import annotations

from flask import Flask, jsonify

from ..common.web import admin_required, current_caller, json_body, login_required
from ..container import Container


def register(app: Flask, container: Container) -> None:
    @app.route("/api/tasks", methods=["GET"], endpoint="tasks_list")
    @login_required
    def tasks_list():
        tasks = container.task_service.list_for(current_caller())
        return jsonify([t.to_dict() for t in tasks])

    @app.route("/api/tasks", methods=["POST"], endpoint="tasks_create")
    @admin_required
    def tasks_create():
        data = json_body()
        task = container.task_service.create_task(
            current_caller(),
            title=data.get("title", ""),
            description=data.get("description", ""),
            assigned_to=data.get("assignedTo", ""),
            due_date=data.get("dueDate", ""),
            priority=data.get("priority", ""),
        )
        return jsonify(task.to_dict()), 201

    @app.route("/api/tasks/<task_id>", methods=["PATCH"], endpoint="tasks_update_status")
    @login_required
    def tasks_update_status(task_id: str):
        data = json_body()
        task = container.task_service.update_status(current_caller(), task_id, data.get("status", ""))
        return jsonify(task.to_dict())
