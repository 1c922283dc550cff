from functools import wraps
from flask import jsonify
from flask_jwt_extended import get_jwt


def admin_required(fn):
    """Must sit below ``@jwt_required()``; rejects tokens without the admin claim."""
    @wraps(fn)
    def wrapper(*args, **kwargs):
        claims = get_jwt()

        if not claims.get("is_admin"):
            return jsonify({
                "error": "Forbidden",
                "message": "Admin privileges required"
            }), 403

        return fn(*args, **kwargs)
    return wrapper
