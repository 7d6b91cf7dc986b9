from __future__ import annotations

from flask import Flask, jsonify

from ..common.web import admin_required, current_caller, json_body, login_required
from ..container import Container


def register(app: Flask, container: Container) -> None:
    @app.route("/api/reminders", methods=["GET"], endpoint="reminders_list")
    @login_required
    def reminders_list():
        reminders = container.reminder_service.list_all(current_caller())
        return jsonify([r.to_dict() for r in reminders])

    @app.route("/api/reminders", methods=["POST"], endpoint="reminders_create")
    @admin_required
    def reminders_create():
        data = json_body()
        reminder = container.reminder_service.create(
            current_caller(),
            title=data.get("title", ""),
            description=data.get("description", ""),
            reminder_date=data.get("reminderDate", ""),
            importance=data.get("importance", ""),
        )
        return jsonify(reminder.to_dict()), 201

    @app.route("/api/reminders/<reminder_id>", methods=["DELETE"], endpoint="reminders_delete")
    @admin_required
    def reminders_delete(reminder_id: str):
        container.reminder_service.delete(current_caller(), reminder_id)
        return "", 204
