from __future__ import annotations

from flask import Flask, jsonify

from ..common.web import admin_required, current_caller, json_body, login_required
from ..container import Container


def register(app: Flask, container: Container) -> None:
    @app.route("/api/leave-requests", methods=["GET"], endpoint="leaves_list")
    @login_required
    def leaves_list():
        leaves = container.leave_service.list_for(current_caller())
        return jsonify([lr.to_dict() for lr in leaves])

    @app.route("/api/leave-requests", methods=["POST"], endpoint="leaves_apply")
    @login_required
    def leaves_apply():
        data = json_body()
        leave = container.leave_service.apply(
            current_caller(),
            start_date=data.get("startDate", ""),
            end_date=data.get("endDate", ""),
            reason=data.get("reason", ""),
        )
        return jsonify(leave.to_dict()), 201

    @app.route("/api/leave-requests/<request_id>", methods=["PATCH"], endpoint="leaves_decide")
    @admin_required
    def leaves_decide(request_id: str):
        data = json_body()
        leave = container.leave_service.decide(current_caller(), request_id, data.get("status", ""))
        return jsonify(leave.to_dict())
