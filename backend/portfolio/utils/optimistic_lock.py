from flask import request
from datetime import timezone
from dateutil.parser import parse

from portfolio.domain.exceptions import ConflictError, ValidationError


def normalize_ts(ts):
    """
    Ensure datetime is timezone-aware.
    Defaults to UTC if naive.
    """
    if ts.tzinfo is None:
        return ts.replace(tzinfo=timezone.utc)
    return ts


def enforce_optimistic_lock(entity, label="Resource"):
    """
    Honour an optional If-Unmodified-Since header.

    Without the header the update proceeds (last write wins). With it, a row
    modified after the given instant is rejected with 409.
    """
    client_ts = request.headers.get("If-Unmodified-Since")
    if not client_ts:
        return

    try:
        client_ts = normalize_ts(parse(client_ts))
    except (ValueError, OverflowError):
        raise ValidationError("Invalid If-Unmodified-Since header")

    if entity.updated_at is None:
        return

    # HTTP dates carry whole seconds only
    server_ts = normalize_ts(entity.updated_at).replace(microsecond=0)

    if server_ts > client_ts:
        raise ConflictError(f"{label} has been modified since {client_ts.isoformat()}")
