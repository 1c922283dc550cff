from flask import jsonify
from flask_jwt_extended import jwt_required

from portfolio.extensions import asset_store, db
from portfolio.models.asset_deletion import PendingAssetDeletion
from portfolio.normalizers.asset import normalize_pending_deletion
from portfolio.utils.audit import log_action
from portfolio.utils.decorators import admin_required
from portfolio.utils.media import purge_pending_deletions
from . import api_bp


@api_bp.route("/assets/pending", methods=["GET"])
@jwt_required()
@admin_required
def list_pending_deletions():
    rows = PendingAssetDeletion.query.order_by(PendingAssetDeletion.created_at.asc()).all()
    return jsonify([normalize_pending_deletion(row) for row in rows])


@api_bp.route("/assets/pending/purge", methods=["POST"])
@jwt_required()
@admin_required
def purge_pending():
    purged, remaining = purge_pending_deletions()

    log_action(
        action="asset.purge",
        entity_type="asset",
        entity_id=None,
        payload={"purged": purged, "remaining": remaining},
    )
    db.session.commit()

    return jsonify({
        "message": "Pending asset deletions processed",
        "purged": purged,
        "remaining": remaining,
    }), 200


@api_bp.route("/uploads/config", methods=["GET"])
@jwt_required()
@admin_required
def upload_config():
    """Parameters for the browser's unsigned upload widget."""
    return jsonify(asset_store.upload_config())
