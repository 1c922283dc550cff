from flask import request, jsonify
from flask_jwt_extended import jwt_required

from portfolio.models.audit_log import AuditLog
from portfolio.normalizers.audit import normalize_audit_log
from portfolio.normalizers.pagination import normalize_pagination
from portfolio.utils.decorators import admin_required
from portfolio.utils.pagination import paginate_cursor, parse_limit
from . import api_bp


@api_bp.route("/audit", methods=["GET"])
@jwt_required()
@admin_required
def list_audit_logs():
    limit = parse_limit(request.args.get("limit"))
    cursor = request.args.get("cursor")

    query = AuditLog.query

    # Optional filters
    if action := request.args.get("action"):
        query = query.filter(AuditLog.action == action)

    if entity_type := request.args.get("entity_type"):
        query = query.filter(AuditLog.entity_type == entity_type)

    if entity_id := request.args.get("entity_id"):
        query = query.filter(AuditLog.entity_id == entity_id)

    logs, meta = paginate_cursor(query, model=AuditLog, limit=limit, cursor=cursor)

    return jsonify(normalize_pagination(logs, normalize_audit_log, cursor=meta)), 200
