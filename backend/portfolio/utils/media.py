from flask import current_app
from sqlalchemy.exc import SQLAlchemyError

from portfolio.domain.exceptions import AssetStoreError
from portfolio.extensions import db, asset_store
from portfolio.models.asset_deletion import PendingAssetDeletion


def release_asset(public_id, *, entity_type=None, entity_id=None):
    """
    Delete a remote image after its owning row change has been committed.

    Failures never propagate: they are logged and parked in the pending
    deletion outbox for a later purge. Returns True when the asset is gone.
    """
    if not public_id:
        return False

    try:
        asset_store.destroy(public_id)
        return True
    except AssetStoreError as exc:
        current_app.logger.error(
            f"Failed to delete remote asset {public_id} for {entity_type} {entity_id}: {exc}"
        )
        error = str(exc)
    except Exception as exc:
        # The row change is already committed; the request must still succeed
        current_app.logger.exception(
            f"Unexpected error deleting remote asset {public_id} for {entity_type} {entity_id}"
        )
        error = f"{type(exc).__name__}: {exc}"

    _queue_deletion(public_id, entity_type, entity_id, error)
    return False


def release_assets(public_ids, *, entity_type=None, entity_id=None):
    released = 0
    for public_id in public_ids:
        if release_asset(public_id, entity_type=entity_type, entity_id=entity_id):
            released += 1
    return released


def _queue_deletion(public_id, entity_type, entity_id, error):
    pending = PendingAssetDeletion()
    pending.public_id = public_id
    pending.entity_type = entity_type
    pending.entity_id = entity_id
    pending.attempts = 1
    pending.last_error = error

    try:
        db.session.add(pending)
        db.session.commit()
    except SQLAlchemyError as exc:
        db.session.rollback()
        current_app.logger.error(f"Could not queue remote asset {public_id} for deletion: {exc}")


def purge_pending_deletions():
    """Retry every queued remote delete. Returns (purged, still_pending)."""
    purged = 0
    pending_rows = PendingAssetDeletion.query.order_by(PendingAssetDeletion.created_at.asc()).all()

    for pending in pending_rows:
        try:
            asset_store.destroy(pending.public_id)
        except Exception as exc:
            pending.attempts += 1
            pending.last_error = str(exc)
            current_app.logger.warning(
                f"Remote asset {pending.public_id} still not deleted after {pending.attempts} attempts: {exc}"
            )
        else:
            db.session.delete(pending)
            purged += 1

    db.session.commit()
    return purged, len(pending_rows) - purged
