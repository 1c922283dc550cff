from typing import Any, Dict, List

from sqlalchemy import func

from portfolio.domain.exceptions import ConflictError, NotFoundError, ValidationError
from portfolio.domain.fields import Field, PatchSchema, as_int, as_string_list
from portfolio.extensions import db
from portfolio.models import Category, ProjectItem
from portfolio.utils.audit import log_action
from portfolio.utils.order import next_order
from portfolio.utils.transaction import transactional


def _category_name(name, value):
    if not isinstance(value, str) or not value.strip():
        raise ValidationError("Category name is required and must be a non-empty string.")
    return value.strip()


CATEGORY_SCHEMA = PatchSchema(
    label="Category",
    fields=(
        Field("name", "name", _category_name),
        Field("order", "order", as_int),
        Field("projectIds", "project_ids", as_string_list),
    ),
    required=("name",),
)


def list_categories() -> List[Category]:
    return Category.query.order_by(Category.name.asc()).all()


def resolve_categories(category_ids: List[str]) -> List[Category]:
    if not category_ids:
        return []

    found = Category.query.filter(Category.id.in_(category_ids)).all()
    by_id = {category.id: category for category in found}

    unknown = [category_id for category_id in category_ids if category_id not in by_id]
    if unknown:
        raise ValidationError(f"Unknown category ids: {', '.join(unknown)}")

    return [by_id[category_id] for category_id in category_ids]


def resolve_projects(project_ids: List[str]) -> List[ProjectItem]:
    if not project_ids:
        return []

    found = ProjectItem.query.filter(ProjectItem.id.in_(project_ids)).all()
    by_id = {project.id: project for project in found}

    unknown = [project_id for project_id in project_ids if project_id not in by_id]
    if unknown:
        raise ValidationError(f"Unknown project ids: {', '.join(unknown)}")

    return [by_id[project_id] for project_id in project_ids]


def set_project_categories(project: ProjectItem, categories: List[Category]) -> Dict[str, list]:
    """
    Replace a project's memberships. Both directions are rows of the same join
    table, so the category side follows automatically.
    """
    before = set(project.category_ids)
    project.categories = list(categories)
    after = {category.id for category in categories}

    return {
        "added": sorted(after - before),
        "removed": sorted(before - after),
    }


def detach_project(project: ProjectItem) -> List[str]:
    """Drop every membership of a project about to be deleted."""
    category_ids = project.category_ids
    project.categories = []
    db.session.flush()
    return category_ids


def _name_taken(name: str, exclude_id: str = None) -> bool:
    query = Category.query.filter(func.lower(Category.name) == name.lower())
    if exclude_id:
        query = query.filter(Category.id != exclude_id)
    return db.session.query(query.exists()).scalar()


def create_category(data: Dict[str, Any]) -> Category:
    values = CATEGORY_SCHEMA.parse_create(data)
    values.pop("project_ids", None)

    if _name_taken(values["name"]):
        raise ConflictError(f"Category '{values['name']}' already exists.")

    category = Category()
    category.name = values["name"]
    category.order = values.get("order", next_order(Category))

    with transactional():
        db.session.add(category)
        db.session.flush()

        log_action(
            action="category.create",
            entity_type="category",
            entity_id=category.id,
            payload={"name": category.name},
        )

    return category


def update_category(category_id: str, data: Dict[str, Any]) -> Category:
    values = CATEGORY_SCHEMA.parse(data)

    category = Category.query.filter_by(id=category_id).first()
    if not category:
        raise NotFoundError(f"Category with ID {category_id} not found.")

    if "name" in values and _name_taken(values["name"], exclude_id=category.id):
        raise ConflictError(f"Category '{values['name']}' already exists.")

    project_ids = values.pop("project_ids", None)

    with transactional():
        changed_fields = []
        for field, value in values.items():
            if getattr(category, field) != value:
                setattr(category, field, value)
                changed_fields.append(field)

        if project_ids is not None:
            category.projects = resolve_projects(project_ids)
            changed_fields.append("project_ids")

        log_action(
            action="category.update",
            entity_type="category",
            entity_id=category.id,
            payload={"fields": changed_fields},
        )

    return category


def delete_category(category_id: str) -> None:
    category = Category.query.filter_by(id=category_id).first()
    if not category:
        raise NotFoundError(f"Category with ID {category_id} not found.")

    with transactional():
        project_ids = category.project_ids
        category.projects = []
        db.session.delete(category)

        log_action(
            action="category.delete",
            entity_type="category",
            entity_id=category_id,
            payload={"project_ids": project_ids},
        )
