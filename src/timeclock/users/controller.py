from __future__ import annotations

from flask import Blueprint, g, jsonify

from ..auth.guards import session_required
from ..common.http import json_body, json_errors
from ..container import Container


def register(bp: Blueprint, container: Container) -> None:
    users = container.user_service
    login_required = session_required(container.auth_service)

    @bp.route("/create-user", methods=["POST"], endpoint="create_user")
    @json_errors("Failed to create user")
    @login_required
    def create_user():
        data = json_body()
        user = users.create_user(
            actor=g.session,
            email=data.get("email"),
            password=data.get("password"),
            name=data.get("name"),
            role=data.get("role"),
            assigned_to=data.get("assignedTo"),
            team=data.get("team"),
        )
        return jsonify({"success": True, "user": user.to_public_dict()})

    @bp.route("/users", methods=["GET"], endpoint="list_users")
    @json_errors("Failed to get users")
    @login_required
    def list_users():
        return jsonify({"users": users.list_users(actor=g.session)})

    @bp.route("/reset-password", methods=["POST"], endpoint="reset_password")
    @json_errors("Failed to reset password")
    @login_required
    def reset_password():
        data = json_body()
        users.reset_password(actor=g.session, user_id=data.get("userId"), new_password=data.get("newPassword"))
        return jsonify({"success": True})

    @bp.route("/teams", methods=["GET"], endpoint="list_teams")
    @json_errors("Failed to get teams")
    @login_required
    def list_teams():
        return jsonify({"teams": users.list_teams()})
