from flask import jsonify
from flask_jwt_extended import jwt_required

from portfolio.application.content.settings import get_settings, update_settings
from portfolio.normalizers.setting import normalize_setting
from portfolio.utils.decorators import admin_required
from portfolio.utils.request import json_body
from . import api_bp


@api_bp.route("/settings", methods=["GET"])
def read_settings():
    return jsonify(normalize_setting(get_settings()))


@api_bp.route("/settings", methods=["PUT"])
@jwt_required()
@admin_required
def write_settings():
    return jsonify(normalize_setting(update_settings(json_body()))), 200
