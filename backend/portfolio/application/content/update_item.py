from typing import Any, Dict

from portfolio.application.content.categories import resolve_categories, set_project_categories
from portfolio.application.content.registry import EntitySpec
from portfolio.domain.exceptions import NotFoundError
from portfolio.domain.fields import check_image_pair
from portfolio.utils.audit import log_action
from portfolio.utils.media import release_asset
from portfolio.utils.optimistic_lock import enforce_optimistic_lock
from portfolio.utils.transaction import transactional


def update_item(spec: EntitySpec, item_id: str, data: Dict[str, Any]):
    """
    Apply a sparse patch to a content item.

    Rules:
    - Only fields declared by the family schema are written
    - An image URL and its public id change together
    - A replaced remote image is destroyed only after the new row is committed
    """
    values = spec.schema.parse(data)

    item = spec.model.query.filter_by(id=item_id).first()
    if not item:
        raise NotFoundError(f"{spec.label} with ID {item_id} not found.")

    enforce_optimistic_lock(item, spec.label)

    if spec.prepare:
        spec.prepare(values, item)

    image = spec.image
    old_public_id = getattr(item, image.public_id_column) if image else None
    check_image_pair(image, values, old_public_id)

    category_ids = values.pop("category_ids", None)
    categories = resolve_categories(category_ids) if category_ids is not None else None

    changed_fields: list[str] = []

    with transactional():
        for field, value in values.items():
            if getattr(item, field) != value:
                setattr(item, field, value)
                changed_fields.append(field)

        if categories is not None:
            membership = set_project_categories(item, categories)
            if membership["added"] or membership["removed"]:
                changed_fields.append("category_ids")

        log_action(
            action=f"{spec.entity_type}.update",
            entity_type=spec.entity_type,
            entity_id=item.id,
            payload={"fields": changed_fields},
        )

    new_public_id = getattr(item, image.public_id_column) if image else None
    if old_public_id and old_public_id != new_public_id:
        release_asset(old_public_id, entity_type=spec.entity_type, entity_id=item.id)

    return item
