from __future__ import annotations

from flask import Blueprint, g, jsonify

from ..common.http import bearer_token, json_body, json_errors
from ..container import Container
from .guards import session_required


def register(bp: Blueprint, container: Container) -> None:
    auth = container.auth_service
    login_required = session_required(auth)

    @bp.route("/health", methods=["GET"], endpoint="health")
    def health():
        return jsonify({"status": "ok"})

    @bp.route("/login", methods=["POST"], endpoint="login")
    @json_errors("Login failed")
    def login():
        data = json_body()
        grant = auth.login(email=data.get("email"), password=data.get("password"))
        return jsonify(grant.to_dict())

    @bp.route("/register", methods=["POST"], endpoint="register")
    @json_errors("Failed to register user")
    def register_user():
        data = json_body()
        grant = auth.register(email=data.get("email"), password=data.get("password"), name=data.get("name"))
        return jsonify(grant.to_dict())

    @bp.route("/logout-session", methods=["POST"], endpoint="logout_session")
    @json_errors("Logout failed")
    def logout_session():
        session_id = json_body().get("sessionId") or bearer_token()
        auth.logout(session_id)
        return jsonify({"success": True})

    @bp.route("/impersonate", methods=["POST"], endpoint="impersonate")
    @json_errors("Failed to impersonate user")
    @login_required
    def impersonate():
        grant = auth.impersonate(
            actor=g.session,
            actor_session_id=g.session_id,
            target_user_id=json_body().get("userId"),
        )
        return jsonify(grant.to_dict())

    @bp.route("/exit-impersonation", methods=["POST"], endpoint="exit_impersonation")
    @json_errors("Failed to exit impersonation")
    @login_required
    def exit_impersonation():
        grant = auth.exit_impersonation(session=g.session, session_id=g.session_id)
        return jsonify(grant.to_dict())
