from flask import jsonify
from flask_jwt_extended import jwt_required

from portfolio.application.content.categories import (
    create_category,
    delete_category,
    list_categories,
    update_category,
)
from portfolio.normalizers.category import normalize_category
from portfolio.utils.decorators import admin_required
from portfolio.utils.request import json_body
from . import api_bp


@api_bp.route("/categories", methods=["GET"])
def get_categories():
    return jsonify([normalize_category(c) for c in list_categories()])


@api_bp.route("/categories", methods=["POST"])
@jwt_required()
@admin_required
def post_category():
    category = create_category(json_body())
    return jsonify(normalize_category(category)), 201


@api_bp.route("/categories/<category_id>", methods=["PUT"])
@jwt_required()
@admin_required
def put_category(category_id):
    category = update_category(category_id, json_body())
    return jsonify(normalize_category(category)), 200


@api_bp.route("/categories/<category_id>", methods=["DELETE"])
@jwt_required()
@admin_required
def remove_category(category_id):
    delete_category(category_id)
    return jsonify({"message": f"Category {category_id} deleted successfully."}), 200
