from flask import jsonify
from flask_jwt_extended import get_jwt, jwt_required

from portfolio.application.content.registry import ENTITIES, SECTION_PARENT
from portfolio.application.content.reorder import parse_positions, reorder_scope
from portfolio.application.content.sections import (
    create_section,
    get_section,
    list_sections,
    update_section,
)
from portfolio.domain.exceptions import NotFoundError, ValidationError
from portfolio.models import (
    EducationImage,
    EducationItem,
    ExperienceDetailImage,
    ExperienceItem,
    Section,
    SkillItem,
)
from portfolio.normalizers.section import normalize_section
from portfolio.utils.decorators import admin_required
from portfolio.utils.request import json_body
from . import api_bp


def _is_admin():
    return bool(get_jwt().get("is_admin"))


def _reorder_response(counts):
    return jsonify({"message": "Order updated successfully", **counts}), 200


# ------------------------
# Sections
# ------------------------

@api_bp.route("/sections", methods=["GET"])
@jwt_required(optional=True)
def list_all_sections():
    sections = list_sections(include_hidden=_is_admin())
    return jsonify([normalize_section(s, include_content=True) for s in sections])


@api_bp.route("/sections/<section_id>", methods=["GET"])
@jwt_required(optional=True)
def get_one_section(section_id):
    section = get_section(section_id)
    if not section.visible and not _is_admin():
        raise NotFoundError(f"Section with ID {section_id} not found.")
    return jsonify(normalize_section(section, include_content=True))


@api_bp.route("/sections", methods=["POST"])
@jwt_required()
@admin_required
def create_new_section():
    section = create_section(json_body())
    return jsonify(normalize_section(section, include_content=True)), 201


@api_bp.route("/sections/<section_id>", methods=["PUT"])
@jwt_required()
@admin_required
def update_existing_section(section_id):
    section = update_section(section_id, json_body())
    return jsonify(normalize_section(section)), 200


# ------------------------
# Reorder
# ------------------------

@api_bp.route("/sections/reorder", methods=["PUT"])
@jwt_required()
@admin_required
def reorder_sections():
    positions = parse_positions(json_body())
    return _reorder_response(reorder_scope(Section, positions, entity_type="section"))


@api_bp.route("/sections/<section_id>/<collection>/reorder", methods=["PUT"])
@jwt_required()
@admin_required
def reorder_section_collection(section_id, collection):
    spec = ENTITIES.get(collection)
    if spec is None or spec.parent != SECTION_PARENT:
        raise NotFoundError(f"Unknown collection '{collection}'")

    positions = parse_positions(json_body())
    get_section(section_id)

    counts = reorder_scope(
        spec.model,
        positions,
        entity_type=spec.entity_type,
        scope={"section_id": section_id},
    )
    return _reorder_response(counts)


@api_bp.route("/skills/reorder", methods=["PUT"])
@jwt_required()
@admin_required
def reorder_skills():
    data = json_body()
    positions = parse_positions(data)

    scope = {}
    section_id = data.get("sectionId")
    if section_id is not None:
        if not isinstance(section_id, str):
            raise ValidationError("sectionId must be a string")
        get_section(section_id)
        scope["section_id"] = section_id

    return _reorder_response(reorder_scope(SkillItem, positions, entity_type="skill", scope=scope))


@api_bp.route("/experience/<item_id>/images/reorder", methods=["PUT"])
@jwt_required()
@admin_required
def reorder_experience_images(item_id):
    positions = parse_positions(json_body())

    if not ExperienceItem.query.filter_by(id=item_id).first():
        raise NotFoundError(f"Experience item with ID {item_id} not found.")

    counts = reorder_scope(
        ExperienceDetailImage,
        positions,
        entity_type="experience_image",
        scope={"experience_item_id": item_id},
    )
    return _reorder_response(counts)


@api_bp.route("/education/<item_id>/images/reorder", methods=["PUT"])
@jwt_required()
@admin_required
def reorder_education_images(item_id):
    positions = parse_positions(json_body())

    if not EducationItem.query.filter_by(id=item_id).first():
        raise NotFoundError(f"Education item with ID {item_id} not found.")

    counts = reorder_scope(
        EducationImage,
        positions,
        entity_type="education_image",
        scope={"education_item_id": item_id},
    )
    return _reorder_response(counts)
