# portfolio/normalizers/pagination.py
from typing import Callable, Any, List, Dict

from portfolio.utils.pagination import CursorMeta


def normalize_pagination(
    items: List[Any],
    normalize_fn: Callable[[Any], Dict[str, Any]],
    *,
    cursor: CursorMeta,
) -> Dict[str, Any]:
    """Wrap a cursor-paginated page of rows as ``{items, pagination}``."""
    return {
        "items": [normalize_fn(item) for item in items],
        "pagination": {
            "hasMore": cursor["has_more"],
            "nextCursor": cursor["next_cursor"],
        },
    }
