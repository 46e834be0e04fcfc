from __future__ import annotations

from flask import Blueprint, g, jsonify

from ..auth.guards import session_required
from ..common.http import client_ip, json_body, json_errors
from ..container import Container
from ..core.constants import UNKNOWN, UNKNOWN_DEVICE_NAME
from .model import DeviceInfo


def register(bp: Blueprint, container: Container) -> None:
    attendance = container.attendance_service
    login_required = session_required(container.auth_service)

    @bp.route("/clock-in", methods=["POST"], endpoint="clock_in")
    @json_errors("Failed to clock in")
    @login_required
    def clock_in():
        data = json_body()
        device = DeviceInfo(
            name=data.get("deviceName") or UNKNOWN_DEVICE_NAME,
            type=data.get("deviceType") or UNKNOWN,
            os=data.get("deviceOS") or UNKNOWN,
            ip_address=client_ip(),
        )
        record = attendance.clock_in(g.session.user_id, activity=data.get("activity"), device=device)
        return jsonify({"success": True, "attendanceId": record.attendance_id})

    @bp.route("/clock-out", methods=["POST"], endpoint="clock_out")
    @json_errors("Failed to clock out")
    @login_required
    def clock_out():
        attendance.clock_out(g.session.user_id)
        return jsonify({"success": True})

    @bp.route("/update-activity", methods=["POST"], endpoint="update_activity")
    @json_errors("Failed to update activity")
    @login_required
    def update_activity():
        attendance.update_activity(g.session.user_id, activity=json_body().get("activity"))
        return jsonify({"success": True})

    @bp.route("/start-break", methods=["POST"], endpoint="start_break")
    @json_errors("Failed to start break")
    @login_required
    def start_break():
        data = json_body()
        record = attendance.start_break(
            g.session.user_id,
            break_type=data.get("breakType"),
            activity=data.get("activity"),
        )
        return jsonify({"success": True, "breakId": record.break_id})

    @bp.route("/end-break", methods=["POST"], endpoint="end_break")
    @json_errors("Failed to end break")
    @login_required
    def end_break():
        data = json_body()
        attendance.end_break(g.session.user_id, break_id=data.get("breakId"), activity=data.get("activity"))
        return jsonify({"success": True})

    @bp.route("/current-attendance/<user_id>", methods=["GET"], endpoint="current_attendance")
    @json_errors("Failed to get attendance status")
    @login_required
    def current_attendance(user_id: str):
        record = attendance.get_current_attendance(user_id)
        return jsonify({"attendance": record.to_dict() if record else None})

    @bp.route("/current-break/<user_id>", methods=["GET"], endpoint="current_break")
    @json_errors("Failed to get break status")
    @login_required
    def current_break(user_id: str):
        record = attendance.get_current_break(user_id)
        return jsonify({"activeBreak": record.to_dict() if record else None})

    @bp.route("/attendance/<user_id>/<int:year>/<int:month>", methods=["GET"], endpoint="month_attendance")
    @json_errors("Failed to get attendance")
    @login_required
    def month_attendance(user_id: str, year: int, month: int):
        return jsonify(attendance.get_month(actor=g.session, user_id=user_id, year=year, month=month))
