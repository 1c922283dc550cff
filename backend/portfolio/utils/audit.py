from typing import Optional

from flask_jwt_extended import get_jwt_identity
from flask_jwt_extended.exceptions import JWTExtendedException

from portfolio.extensions import db
from portfolio.models.audit_log import AuditLog


def current_actor_id() -> Optional[str]:
    try:
        return get_jwt_identity()
    except (RuntimeError, JWTExtendedException):
        # Outside a JWT-protected request (CLI, seed)
        return None


def log_action(
    *,
    action: str,
    entity_type: str,
    entity_id: Optional[str],
    payload: dict | None = None
):
    """Add an audit row to the current session; the caller commits it."""
    log = AuditLog()

    log.actor_id = current_actor_id()
    log.action = action
    log.entity_type = entity_type
    log.entity_id = entity_id or "*"
    log.payload = payload or {}

    db.session.add(log)
