from __future__ import annotations

from flask import Blueprint, g, jsonify

from ..auth.guards import session_required
from ..common.http import json_body, json_errors
from ..container import Container


def register(bp: Blueprint, container: Container) -> None:
    categories = container.category_service
    login_required = session_required(container.auth_service)

    @bp.route("/categories", methods=["GET"], endpoint="list_categories")
    @json_errors("Failed to get categories")
    @login_required
    def list_categories():
        return jsonify({"categories": categories.list(actor=g.session)})

    @bp.route("/categories", methods=["POST"], endpoint="create_category")
    @json_errors("Failed to create category")
    @login_required
    def create_category():
        data = json_body()
        category = categories.create(actor=g.session, name=data.get("name"), subcategories=data.get("subcategories"))
        return jsonify({"success": True, "categoryId": category.category_id})

    @bp.route("/categories/<category_id>", methods=["PUT"], endpoint="update_category")
    @json_errors("Failed to update category")
    @login_required
    def update_category(category_id: str):
        data = json_body()
        categories.update(
            actor=g.session,
            category_id=category_id,
            name=data.get("name"),
            subcategories=data.get("subcategories"),
        )
        return jsonify({"success": True})

    @bp.route("/categories/<category_id>", methods=["DELETE"], endpoint="delete_category")
    @json_errors("Failed to delete category")
    @login_required
    def delete_category(category_id: str):
        categories.delete(actor=g.session, category_id=category_id)
        return jsonify({"success": True})
