from __future__ import annotations

from flask import Blueprint, g, jsonify

from ..auth.guards import session_required
from ..common.http import json_body, json_errors
from ..container import Container


def register(bp: Blueprint, container: Container) -> None:
    settings = container.settings_service
    login_required = session_required(container.auth_service)

    @bp.route("/settings", methods=["GET"], endpoint="get_settings")
    @json_errors("Failed to get settings")
    @login_required
    def get_settings():
        return jsonify(settings.get_settings())

    @bp.route("/settings/break-types", methods=["POST"], endpoint="set_break_types")
    @json_errors("Failed to update break types")
    @login_required
    def set_break_types():
        settings.set_break_types(actor=g.session, break_types=json_body().get("breakTypes"))
        return jsonify({"success": True})

    @bp.route("/settings/activities", methods=["POST"], endpoint="set_activities")
    @json_errors("Failed to update activities")
    @login_required
    def set_activities():
        settings.set_activities(actor=g.session, activities=json_body().get("activities"))
        return jsonify({"success": True})
