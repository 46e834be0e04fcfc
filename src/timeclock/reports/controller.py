from __future__ import annotations

from flask import Blueprint, g, jsonify

from ..auth.guards import session_required
from ..common.http import json_errors
from ..container import Container


def register(bp: Blueprint, container: Container) -> None:
    reports = container.report_service
    login_required = session_required(container.auth_service)

    @bp.route("/live-status", methods=["GET"], endpoint="live_status")
    @json_errors("Failed to get live status")
    @login_required
    def live_status():
        return jsonify(reports.live_status(actor=g.session))

    @bp.route("/admin-live-status", methods=["GET"], endpoint="admin_live_status")
    @json_errors("Failed to get live status")
    @login_required
    def admin_live_status():
        return jsonify(reports.team_live_status(actor=g.session))
