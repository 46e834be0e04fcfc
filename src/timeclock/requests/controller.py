from __future__ import annotations

from flask import Blueprint, g, jsonify

from ..auth.guards import session_required
from ..common.http import json_body, json_errors
from ..container import Container


def register(bp: Blueprint, container: Container) -> None:
    requests = container.request_service
    login_required = session_required(container.auth_service)

    @bp.route("/request-time-change", methods=["POST"], endpoint="request_time_change")
    @json_errors("Failed to create request")
    @login_required
    def request_time_change():
        data = json_body()
        req = requests.submit_time_change(
            requester=g.session,
            change_type=data.get("type"),
            date=data.get("date"),
            original_time=data.get("originalTime"),
            requested_time=data.get("requestedTime"),
            reason=data.get("reason"),
        )
        return jsonify({"success": True, "requestId": req.request_id})

    @bp.route("/request-leave", methods=["POST"], endpoint="request_leave")
    @json_errors("Failed to create leave request")
    @login_required
    def request_leave():
        data = json_body()
        req = requests.submit_leave(
            requester=g.session,
            start_date=data.get("startDate"),
            end_date=data.get("endDate"),
            reason=data.get("reason"),
        )
        return jsonify({"success": True, "requestId": req.request_id})

    @bp.route("/approve-time-change", methods=["POST"], endpoint="approve_time_change")
    @json_errors("Failed to approve request")
    @login_required
    def approve_time_change():
        data = json_body()
        requests.decide_time_change(
            actor=g.session,
            request_id=data.get("requestId"),
            approved=bool(data.get("approved")),
        )
        return jsonify({"success": True})

    @bp.route("/approve-leave", methods=["POST"], endpoint="approve_leave")
    @json_errors("Failed to approve leave request")
    @login_required
    def approve_leave():
        data = json_body()
        requests.decide_leave(
            actor=g.session,
            request_id=data.get("requestId"),
            approved=bool(data.get("approved")),
        )
        return jsonify({"success": True})

    @bp.route("/pending-requests", methods=["GET"], endpoint="pending_requests")
    @json_errors("Failed to get requests")
    @login_required
    def pending_requests():
        return jsonify(requests.list_pending(actor=g.session))
