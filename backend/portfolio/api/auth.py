from flask import jsonify
from flask_jwt_extended import create_access_token, get_jwt_identity, jwt_required

from portfolio.domain.exceptions import ValidationError
from portfolio.models.user import User
from portfolio.normalizers.user import normalize_user
from portfolio.utils.request import json_body
from . import api_bp


@api_bp.route("/auth/login", methods=["POST"])
def login():
    data = json_body()

    email = data.get("email")
    password = data.get("password")

    if not email or not password:
        raise ValidationError("Email and password required")

    user = User.query.filter_by(email=str(email).strip().lower()).first()

    if not user or not user.check_password(password):
        return jsonify({"error": "Unauthorized", "message": "Invalid credentials"}), 401

    if not user.is_active:
        return jsonify({"error": "Forbidden", "message": "User account disabled"}), 403

    access_token = create_access_token(
        identity=user.id,
        additional_claims={
            "is_admin": bool(user.is_admin),
            "email": user.email,
            "name": user.name,
        },
    )

    return jsonify({
        "access_token": access_token,
        "user": normalize_user(user),
    }), 200


@api_bp.route("/auth/me", methods=["GET"])
@jwt_required(optional=True)
def me():
    user_id = get_jwt_identity()
    user = User.query.filter_by(id=user_id, is_active=True).first() if user_id else None

    return jsonify({"user": normalize_user(user)}), 200
