from __future__ import annotations

from flask import Flask, jsonify

from ..common.web import admin_required, current_caller
from ..container import Container


def register(app: Flask, container: Container) -> None:
    @app.route("/api/analytics", methods=["GET"], endpoint="analytics")
    @admin_required
    def analytics():
        return jsonify(container.presence_aggregator.get_analytics(current_caller()))
