from portfolio.extensions import db
from portfolio.domain.exceptions import ValidationError

DEFAULT_ITEMS_PER_ROW = 3


def next_order(model, **scope):
    """
    Order value that appends a new row at the end of its scope.

    An empty scope starts at 0.
    """
    max_order = db.session.query(db.func.max(model.order))\
        .filter(*[getattr(model, column) == value for column, value in scope.items()])\
        .scalar()

    return 0 if max_order is None else max_order + 1


def positions_from_ids(ordered_ids):
    """Map each id to its index in the list."""
    return [(item_id, index) for index, item_id in enumerate(ordered_ids)]


def positions_from_rows(rows, items_per_row=DEFAULT_ITEMS_PER_ROW):
    """
    Map ids laid out in grid rows to a flat order value.

    order = row_index * items_per_row + index_in_row, so gaps appear when a row
    is not full.
    """
    positions = []
    for row_index, row in enumerate(rows):
        if len(row) > items_per_row:
            raise ValidationError(
                f"Row {row_index} holds {len(row)} items; at most {items_per_row} allowed"
            )
        for index_in_row, item_id in enumerate(row):
            positions.append((item_id, row_index * items_per_row + index_in_row))
    return positions
