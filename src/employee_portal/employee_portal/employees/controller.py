from __future__ import annotations

from flask import Flask, jsonify, session

from ..common.web import (
    SESSION_EMPLOYEE_ID,
    SESSION_ID,
    SESSION_NAME,
    SESSION_ROLE,
    admin_required,
    current_caller,
    json_body,
    login_required,
)
from ..container import Container


def register(app: Flask, container: Container) -> None:
    @app.route("/api/auth/login", methods=["POST"], endpoint="auth_login")
    def auth_login():
        data = json_body()
        user = container.auth_service.authenticate(data.get("employeeId", ""), data.get("password", ""))

        session.clear()
        session.permanent = True
        session[SESSION_ID] = user.id
        session[SESSION_EMPLOYEE_ID] = user.employee_id
        session[SESSION_NAME] = user.name
        session[SESSION_ROLE] = user.role.value

        return jsonify(
            {
                "employee": {
                    "id": user.id,
                    "employeeId": user.employee_id,
                    "name": user.name,
                    "role": user.role.value,
                }
            }
        )

    @app.route("/api/auth/logout", methods=["POST"], endpoint="auth_logout")
    def auth_logout():
        session.clear()
        return "", 204

    @app.route("/api/auth/me", methods=["GET"], endpoint="auth_me")
    @login_required
    def auth_me():
        employee = container.auth_service.current(session[SESSION_ID])
        return jsonify(employee.to_dict())

    @app.route("/api/employees", methods=["GET"], endpoint="employees_list")
    @admin_required
    def employees_list():
        employees = container.employee_service.list_employees(current_caller())
        return jsonify([e.to_dict() for e in employees])

    @app.route("/api/employees", methods=["POST"], endpoint="employees_create")
    @admin_required
    def employees_create():
        data = json_body()
        employee = container.employee_service.create_employee(
            current_caller(),
            employee_id=data.get("employeeId", ""),
            name=data.get("name", ""),
            password=data.get("password", ""),
            role=data.get("role", ""),
        )
        return jsonify(employee.to_dict()), 201

    @app.route("/api/employees/<id>", methods=["GET"], endpoint="employees_get")
    @admin_required
    def employees_get(id: str):
        return jsonify(container.employee_service.get_employee(current_caller(), id).to_dict())

    @app.route("/api/employees/<id>", methods=["PUT"], endpoint="employees_update")
    @admin_required
    def employees_update(id: str):
        data = json_body()
        employee = container.employee_service.update_employee(
            current_caller(),
            id,
            name=data.get("name"),
            role=data.get("role"),
            password=data.get("password"),
        )
        return jsonify(employee.to_dict())

    @app.route("/api/employees/<id>", methods=["DELETE"], endpoint="employees_delete")
    @admin_required
    def employees_delete(id: str):
        container.employee_service.delete_employee(current_caller(), id)
        return "", 204
