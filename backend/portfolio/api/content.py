"""
Generic create/update/delete routes, one set per registered content family.
"""
from flask import jsonify
from flask_jwt_extended import jwt_required

from portfolio.application.content.create_item import create_item
from portfolio.application.content.delete_item import delete_item
from portfolio.application.content.registry import ENTITIES
from portfolio.application.content.update_item import update_item
from portfolio.utils.decorators import admin_required
from portfolio.utils.request import json_body
from . import api_bp


def _admin_view(fn):
    return jwt_required()(admin_required(fn))


def register_entity_routes(spec):
    def create_view():
        item = create_item(spec, json_body())
        return jsonify(spec.normalize(item)), 201

    def update_view(item_id):
        item = update_item(spec, item_id, json_body())
        return jsonify(spec.normalize(item)), 200

    def delete_view(item_id):
        delete_item(spec, item_id)
        return jsonify({"message": f"{spec.label} {item_id} deleted successfully."}), 200

    api_bp.add_url_rule(
        f"/{spec.slug}",
        endpoint=f"{spec.entity_type}_create",
        view_func=_admin_view(create_view),
        methods=["POST"],
    )
    api_bp.add_url_rule(
        f"/{spec.slug}/<item_id>",
        endpoint=f"{spec.entity_type}_update",
        view_func=_admin_view(update_view),
        methods=["PUT"],
    )
    api_bp.add_url_rule(
        f"/{spec.slug}/<item_id>",
        endpoint=f"{spec.entity_type}_delete",
        view_func=_admin_view(delete_view),
        methods=["DELETE"],
    )


for _spec in ENTITIES.values():
    register_entity_routes(_spec)
