def normalize_pending_deletion(pending):
    return {
        "id": pending.id,
        "publicId": pending.public_id,
        "entityType": pending.entity_type,
        "entityId": pending.entity_id,
        "attempts": pending.attempts,
        "lastError": pending.last_error,
        "createdAt": pending.created_at.isoformat() if pending.created_at else None,
        "updatedAt": pending.updated_at.isoformat() if pending.updated_at else None,
    }
