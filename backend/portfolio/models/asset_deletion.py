from portfolio.extensions import db
from .base import BaseModel


class PendingAssetDeletion(BaseModel):
    """
    Outbox row for a remote image that could not be deleted.

    Rows are written after the owning entity change has been committed and are
    retried by the purge job until the remote host confirms the delete.
    """

    __tablename__ = "pending_asset_deletions"

    public_id = db.Column(db.String(255), nullable=False, index=True)
    entity_type = db.Column(db.String(50), nullable=True)
    entity_id = db.Column(db.String(36), nullable=True)
    attempts = db.Column(db.Integer, nullable=False, default=1)
    last_error = db.Column(db.Text, nullable=True)
