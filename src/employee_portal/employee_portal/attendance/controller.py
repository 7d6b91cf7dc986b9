from __future__ import annotations

from typing import Optional

from flask import Flask, jsonify, request

from ..common.datetime_utils import today_iso
from ..common.web import admin_required, current_caller, login_required
from ..core.constants import DEFAULT_TREND_MONTHS, MAX_TREND_MONTHS
from ..core.exceptions import ValidationError
from ..container import Container
from .export import CSV_MIMETYPE, XLSX_MIMETYPE


def _export_filename(month: Optional[str], ext: str) -> str:
    return f"attendance_{month or today_iso()}.{ext}"


def register(app: Flask, container: Container) -> None:
    @app.route("/api/attendance/login", methods=["POST"], endpoint="attendance_login")
    @login_required
    def attendance_login():
        caller = current_caller()
        record = container.attendance_ledger.record_login(caller, caller.employee_id)
        return jsonify(record.to_dict()), 201

    @app.route("/api/attendance/logout", methods=["POST"], endpoint="attendance_logout")
    @login_required
    def attendance_logout():
        caller = current_caller()
        record = container.attendance_ledger.record_logout(caller, caller.employee_id)
        return jsonify(record.to_dict())

    @app.route("/api/attendance/today", methods=["GET"], endpoint="attendance_today")
    @login_required
    def attendance_today():
        record = container.attendance_queries.my_today(current_caller())
        return jsonify(record.to_dict() if record else None)

    @app.route("/api/attendance/me", methods=["GET"], endpoint="attendance_me")
    @login_required
    def attendance_me():
        items = container.attendance_queries.my_history(current_caller())
        return jsonify([i.to_dict() for i in items])

    @app.route("/api/attendance/working-days", methods=["GET"], endpoint="attendance_working_days")
    @login_required
    def attendance_working_days():
        return jsonify({"workingDays": container.attendance_queries.my_working_days(current_caller())})

    @app.route("/api/attendance", methods=["GET"], endpoint="attendance_list")
    @login_required
    def attendance_list():
        # month wins over date, date wins over employeeId
        items = container.attendance_queries.list_for(
            current_caller(),
            month=request.args.get("month") or None,
            date=request.args.get("date") or None,
            employee_id=request.args.get("employeeId") or None,
        )
        return jsonify([i.to_dict() for i in items])

    @app.route("/api/attendance/stats", methods=["GET"], endpoint="attendance_stats")
    @admin_required
    def attendance_stats():
        return jsonify(container.presence_aggregator.get_today_stats(current_caller()))

    @app.route("/api/attendance/trend", methods=["GET"], endpoint="attendance_trend")
    @admin_required
    def attendance_trend():
        raw = request.args.get("months")
        try:
            months = int(raw) if raw else DEFAULT_TREND_MONTHS
        except ValueError:
            raise ValidationError(f"months must be between 1 and {MAX_TREND_MONTHS}")
        return jsonify(container.presence_aggregator.get_monthly_trend(current_caller(), months))

    @app.route("/api/attendance/export/csv", methods=["GET"], endpoint="attendance_export_csv")
    @admin_required
    def attendance_export_csv():
        month = request.args.get("month") or None
        body = container.attendance_exporter.export_csv(current_caller(), month=month)
        return app.response_class(
            body,
            mimetype=CSV_MIMETYPE,
            headers={"Content-Disposition": f"attachment; filename={_export_filename(month, 'csv')}"},
        )

    @app.route("/api/attendance/export/excel", methods=["GET"], endpoint="attendance_export_excel")
    @admin_required
    def attendance_export_excel():
        month = request.args.get("month") or None
        body = container.attendance_exporter.export_excel(current_caller(), month=month)
        return app.response_class(
            body,
            mimetype=XLSX_MIMETYPE,
            headers={"Content-Disposition": f"attachment; filename={_export_filename(month, 'xlsx')}"},
        )
