from __future__ import annotations

from flask import Blueprint, g, jsonify

from ..auth.guards import session_required
from ..common.http import json_body, json_errors
from ..container import Container


def register(bp: Blueprint, container: Container) -> None:
    schedules = container.schedule_service
    login_required = session_required(container.auth_service)

    @bp.route("/settings/schedules", methods=["GET"], endpoint="list_schedules")
    @json_errors("Failed to get schedules")
    @login_required
    def list_schedules():
        return jsonify({"schedules": schedules.list(actor=g.session)})

    @bp.route("/settings/schedules", methods=["POST"], endpoint="create_schedule")
    @json_errors("Failed to create schedule")
    @login_required
    def create_schedule():
        schedule = schedules.create(actor=g.session, payload=json_body().get("schedule") or {})
        return jsonify({"schedule": schedule.to_dict()})

    @bp.route("/settings/schedules/<schedule_id>", methods=["PUT"], endpoint="update_schedule")
    @json_errors("Failed to update schedule")
    @login_required
    def update_schedule(schedule_id: str):
        schedule = schedules.update(
            actor=g.session,
            schedule_id=schedule_id,
            payload=json_body().get("schedule") or {},
        )
        return jsonify({"schedule": schedule.to_dict()})

    @bp.route("/settings/schedules/<schedule_id>", methods=["DELETE"], endpoint="delete_schedule")
    @json_errors("Failed to delete schedule")
    @login_required
    def delete_schedule(schedule_id: str):
        schedules.delete(actor=g.session, schedule_id=schedule_id)
        return jsonify({"success": True})
