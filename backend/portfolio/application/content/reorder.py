from typing import Any, Dict, List, Tuple

from flask import current_app
from sqlalchemy.exc import SQLAlchemyError

from portfolio.domain.exceptions import ValidationError
from portfolio.extensions import db
from portfolio.utils.audit import log_action
from portfolio.utils.order import DEFAULT_ITEMS_PER_ROW, positions_from_ids, positions_from_rows


def _is_id_list(value) -> bool:
    return isinstance(value, list) and all(isinstance(item_id, str) for item_id in value)


def parse_positions(data: Dict[str, Any]) -> List[Tuple[str, int]]:
    """
    Turn a reorder body into ``(id, order)`` pairs.

    Accepts either ``{"orderedIds": [...]}`` or the grid form
    ``{"rows": [[...], ...], "itemsPerRow": n}``.
    """
    has_ids = "orderedIds" in data
    has_rows = "rows" in data

    if has_ids == has_rows:
        raise ValidationError("Provide exactly one of orderedIds or rows")

    if has_ids:
        if not _is_id_list(data["orderedIds"]):
            raise ValidationError("orderedIds must be an array of strings")
        return positions_from_ids(data["orderedIds"])

    rows = data["rows"]
    if not isinstance(rows, list) or not all(_is_id_list(row) for row in rows):
        raise ValidationError("rows must be an array of arrays of strings")

    items_per_row = data.get("itemsPerRow", DEFAULT_ITEMS_PER_ROW)
    if isinstance(items_per_row, bool) or not isinstance(items_per_row, int) or items_per_row <= 0:
        raise ValidationError("itemsPerRow must be a positive integer")

    return positions_from_rows(rows, items_per_row)


def reorder_scope(model, positions, *, entity_type: str, scope: Dict[str, Any] = None) -> Dict[str, int]:
    """
    Best-effort bulk reorder.

    Each row is written and committed on its own; ids that are unknown or
    outside ``scope`` are skipped, and a failing row does not stop the rest.
    """
    scope = scope or {}
    updated = skipped = failed = 0

    for item_id, position in positions:
        try:
            row = model.query.filter_by(id=item_id, **scope).first()
            if row is None:
                skipped += 1
                continue

            row.order = position
            db.session.commit()
            updated += 1
        except SQLAlchemyError as exc:
            db.session.rollback()
            failed += 1
            current_app.logger.error(f"Failed to reorder {entity_type} {item_id}: {exc}")

    counts = {"updated": updated, "skipped": skipped, "failed": failed}

    log_action(
        action=f"{entity_type}.reorder",
        entity_type=entity_type,
        entity_id=next(iter(scope.values()), None),
        payload=counts,
    )
    db.session.commit()

    return counts
