from typing import Any, Dict

from portfolio.application.content.categories import resolve_categories, set_project_categories
from portfolio.application.content.registry import EntitySpec
from portfolio.domain.exceptions import InvariantViolation, NotFoundError
from portfolio.domain.fields import check_image_pair
from portfolio.extensions import db
from portfolio.utils.audit import log_action
from portfolio.utils.order import next_order
from portfolio.utils.transaction import transactional


def create_item(spec: EntitySpec, data: Dict[str, Any]):
    """
    Create a content item under its parent.

    Rules:
    - Required fields are checked before anything touches the database
    - The parent must exist, and for section-owned families must be a section
      of the right type
    - Without an explicit order the item is appended to its parent's scope
    """
    values = spec.schema.parse_create(data)

    parent_id = str(data[spec.parent.field])
    parent = spec.parent.model.query.filter_by(id=parent_id).first()
    if not parent:
        raise NotFoundError(f"{spec.parent.label} with ID {parent_id} not found")

    if spec.section_types and parent.type not in spec.section_types:
        raise InvariantViolation(
            f"{spec.label} can only be added to a section of type "
            f"{' or '.join(spec.section_types)}, not '{parent.type}'"
        )

    if spec.prepare:
        spec.prepare(values)

    check_image_pair(spec.image, values)

    category_ids = values.pop("category_ids", None)
    categories = resolve_categories(category_ids) if category_ids else []

    if values.get("order") is None:
        values["order"] = next_order(spec.model, **{spec.parent.column: parent.id})

    item = spec.model()
    setattr(item, spec.parent.column, parent.id)
    for column, value in values.items():
        setattr(item, column, value)

    with transactional():
        db.session.add(item)
        db.session.flush()

        if categories:
            set_project_categories(item, categories)

        log_action(
            action=f"{spec.entity_type}.create",
            entity_type=spec.entity_type,
            entity_id=item.id,
            payload={
                "parent_id": parent.id,
                "order": item.order,
            },
        )

    return item
