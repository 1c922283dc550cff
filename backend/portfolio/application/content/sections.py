import re
from typing import Any, Dict, List

from portfolio.domain.exceptions import ConflictError, NotFoundError, ValidationError
from portfolio.domain.fields import Field, PatchSchema, as_bool, as_int, as_object, one_of
from portfolio.extensions import db
from portfolio.models import SECTION_TYPES, Section
from portfolio.utils.audit import log_action
from portfolio.utils.optimistic_lock import enforce_optimistic_lock
from portfolio.utils.order import next_order
from portfolio.utils.transaction import transactional

SLUG_PATTERN = re.compile(r"^[a-z0-9]+(?:-[a-z0-9]+)*$")


def _slug(name, value):
    if not isinstance(value, str) or not SLUG_PATTERN.match(value):
        raise ValidationError(f"{name} must be lowercase letters, digits and hyphens")
    return value


def _title(name, value):
    if not isinstance(value, str) or not value.strip():
        raise ValidationError(f"{name} must be a non-empty string")
    return value.strip()


SECTION_SCHEMA = PatchSchema(
    label="Section",
    fields=(
        Field("slug", "slug", _slug),
        Field("title", "title", _title),
        Field("type", "type", one_of(SECTION_TYPES)),
        Field("visible", "visible", as_bool),
        Field("order", "order", as_int),
        Field("settings", "settings", as_object),
    ),
    required=("slug", "title", "type"),
    defaults={"visible": True},
)


def list_sections(include_hidden: bool = False) -> List[Section]:
    query = Section.query
    if not include_hidden:
        query = query.filter_by(visible=True)
    return query.order_by(Section.order.asc()).all()


def get_section(section_id: str) -> Section:
    section = Section.query.filter_by(id=section_id).first()
    if not section:
        raise NotFoundError(f"Section with ID {section_id} not found.")
    return section


def _slug_taken(slug: str, exclude_id: str = None) -> bool:
    query = Section.query.filter_by(slug=slug)
    if exclude_id:
        query = query.filter(Section.id != exclude_id)
    return db.session.query(query.exists()).scalar()


def create_section(data: Dict[str, Any]) -> Section:
    values = SECTION_SCHEMA.parse_create(data)

    if _slug_taken(values["slug"]):
        raise ConflictError(f"Section slug '{values['slug']}' already exists")

    if values.get("order") is None:
        values["order"] = next_order(Section)

    section = Section()
    for field, value in values.items():
        setattr(section, field, value)
    section.settings = values.get("settings") or {}

    with transactional():
        db.session.add(section)
        db.session.flush()

        log_action(
            action="section.create",
            entity_type="section",
            entity_id=section.id,
            payload={"slug": section.slug, "type": section.type},
        )

    return section


def update_section(section_id: str, data: Dict[str, Any]) -> Section:
    values = SECTION_SCHEMA.parse(data)
    section = get_section(section_id)

    enforce_optimistic_lock(section, "Section")

    if "type" in values and values["type"] != section.type:
        # Items are gated by section type; a retype would orphan them
        raise ValidationError("Section type cannot be changed")

    if "slug" in values and _slug_taken(values["slug"], exclude_id=section.id):
        raise ConflictError(f"Section slug '{values['slug']}' already exists")

    changed_fields: list[str] = []

    with transactional():
        for field, value in values.items():
            if getattr(section, field) != value:
                setattr(section, field, value)
                changed_fields.append(field)

        log_action(
            action="section.update",
            entity_type="section",
            entity_id=section.id,
            payload={"fields": changed_fields},
        )

    return section
