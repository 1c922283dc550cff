"""
Catalogue of editable content families.

Every family served under ``/api/<slug>`` is described once here: the model, the
patchable fields and how they are coerced, the parent scope that owns its
``order`` sequence, the remote image it may carry and the child images bound
to its lifecycle.
"""
from dataclasses import dataclass
from typing import Callable, Optional, Tuple

from portfolio.application.content.categories import detach_project
from portfolio.domain.fields import (
    Field,
    ImagePair,
    PatchSchema,
    as_int,
    as_number,
    as_optional_int,
    as_optional_string,
    as_string,
    as_string_list,
    bounded_number,
    one_of,
)
from portfolio.models import (
    CONTACT_TYPES,
    PROJECT_LAYOUTS,
    ContactInfoItem,
    CustomSectionContentBlock,
    EducationImage,
    EducationItem,
    ExperienceDetailImage,
    ExperienceItem,
    ImageBlock,
    ProjectItem,
    Section,
    SkillImage,
    SkillItem,
    TestimonialItem,
    TextBlock,
)
from portfolio.normalizers.items import (
    normalize_contact_info,
    normalize_custom_block,
    normalize_education,
    normalize_education_image,
    normalize_experience,
    normalize_experience_image,
    normalize_image_block,
    normalize_project,
    normalize_skill,
    normalize_skill_image,
    normalize_testimonial,
    normalize_text_block,
)

CUSTOM_BLOCK_TYPES = ("IMAGE", "TEXT", "TITLE")

ORDER = Field("order", "order", as_int)

# src/imagePublicId pair for models whose URL column is plain ``src``
SRC_IMAGE = ImagePair(src="src", public_id="imagePublicId",
                      src_column="src", public_id_column="image_public_id")
IMAGE = ImagePair()


@dataclass(frozen=True)
class ParentSpec:
    field: str
    column: str
    model: type
    label: str


@dataclass(frozen=True)
class EntitySpec:
    slug: str
    entity_type: str
    label: str
    model: type
    schema: PatchSchema
    parent: ParentSpec
    normalize: Callable
    section_types: Optional[Tuple[str, ...]] = None
    children: Optional[str] = None
    prepare: Optional[Callable] = None
    before_delete: Optional[Callable] = None

    @property
    def image(self):
        return self.schema.image


SECTION_PARENT = ParentSpec("sectionId", "section_id", Section, "Section")


def prepare_custom_block(values, block=None):
    """
    TEXT and TITLE blocks never keep an image; IMAGE blocks mirror their URL
    into ``content``.
    """
    block_type = values.get("type") or (block.type if block is not None else None)

    if "type" in values and block_type in ("TEXT", "TITLE"):
        values["image_src"] = None
        values["image_alt"] = None
        values["image_public_id"] = None
    elif block_type == "IMAGE" and values.get("image_src"):
        values["content"] = values["image_src"]


ENTITIES = {}


def register(spec):
    ENTITIES[spec.slug] = spec
    return spec


register(EntitySpec(
    slug="textblocks",
    entity_type="text_block",
    label="Text block",
    model=TextBlock,
    parent=SECTION_PARENT,
    normalize=normalize_text_block,
    schema=PatchSchema(
        label="Text block",
        fields=(
            Field("content", "content"),
            Field("fontSize", "font_size", as_optional_int),
            Field("fontFamily", "font_family", as_optional_string),
            ORDER,
        ),
        required=("sectionId", "content"),
    ),
))

register(EntitySpec(
    slug="imageblocks",
    entity_type="image_block",
    label="Image block",
    model=ImageBlock,
    parent=SECTION_PARENT,
    normalize=normalize_image_block,
    schema=PatchSchema(
        label="Image block",
        fields=(
            Field("src", "src"),
            Field("imagePublicId", "image_public_id", as_optional_string),
            Field("alt", "alt", as_optional_string),
            Field("caption", "caption", as_optional_string),
            Field("width", "width", as_optional_int),
            Field("height", "height", as_optional_int),
            ORDER,
        ),
        image=SRC_IMAGE,
        required=("sectionId", "src"),
    ),
))

register(EntitySpec(
    slug="projects",
    entity_type="project",
    label="Project item",
    model=ProjectItem,
    parent=SECTION_PARENT,
    section_types=("projects",),
    normalize=normalize_project,
    before_delete=detach_project,
    schema=PatchSchema(
        label="Project item",
        fields=(
            Field("projectNumber", "project_number", as_optional_string),
            Field("title", "title"),
            Field("companyName", "company_name", as_optional_string),
            Field("description1", "description1"),
            Field("description2", "description2", as_optional_string),
            Field("imageSrc", "image_src", as_optional_string),
            Field("imageAlt", "image_alt", as_optional_string),
            Field("imagePublicId", "image_public_id", as_optional_string),
            Field("liveLink", "live_link", as_optional_string),
            Field("sourceLink", "source_link", as_optional_string),
            Field("layout", "layout", one_of(PROJECT_LAYOUTS)),
            Field("categoryIds", "category_ids", as_string_list),
            ORDER,
        ),
        image=IMAGE,
        required=("sectionId", "title"),
        defaults={"description1": "", "layout": "layout1"},
    ),
))

register(EntitySpec(
    slug="skills",
    entity_type="skill",
    label="Skill item",
    model=SkillItem,
    parent=SECTION_PARENT,
    section_types=("skills",),
    normalize=normalize_skill,
    schema=PatchSchema(
        label="Skill item",
        fields=(
            Field("title", "title"),
            Field("description", "description"),
            Field("level", "level", as_number),
            ORDER,
        ),
        required=("sectionId", "title"),
        defaults={"description": "", "level": 0},
    ),
))

register(EntitySpec(
    slug="skill-images",
    entity_type="skill_image",
    label="Skill image",
    model=SkillImage,
    parent=SECTION_PARENT,
    section_types=("skills",),
    normalize=normalize_skill_image,
    schema=PatchSchema(
        label="Skill image",
        fields=(
            Field("src", "src"),
            Field("imagePublicId", "image_public_id", as_optional_string),
            Field("alt", "alt", as_optional_string),
            ORDER,
        ),
        image=SRC_IMAGE,
        required=("sectionId", "src"),
    ),
))

register(EntitySpec(
    slug="experience",
    entity_type="experience",
    label="Experience item",
    model=ExperienceItem,
    parent=SECTION_PARENT,
    section_types=("experience",),
    normalize=normalize_experience,
    children="detail_images",
    schema=PatchSchema(
        label="Experience item",
        fields=(
            Field("positionTitle", "position_title"),
            Field("companyName", "company_name"),
            Field("period", "period", as_optional_string),
            Field("summary", "summary", as_optional_string),
            Field("description", "description", as_optional_string),
            Field("imageSrc", "image_src", as_optional_string),
            Field("imagePublicId", "image_public_id", as_optional_string),
            ORDER,
        ),
        image=IMAGE,
        required=("sectionId", "positionTitle", "companyName"),
    ),
))

register(EntitySpec(
    slug="experience-images",
    entity_type="experience_image",
    label="Experience detail image",
    model=ExperienceDetailImage,
    parent=ParentSpec("experienceItemId", "experience_item_id", ExperienceItem, "Experience item"),
    normalize=normalize_experience_image,
    schema=PatchSchema(
        label="Experience detail image",
        fields=(
            Field("src", "src"),
            Field("imagePublicId", "image_public_id", as_optional_string),
            Field("alt", "alt", as_optional_string),
            Field("caption", "caption", as_optional_string),
            ORDER,
        ),
        image=SRC_IMAGE,
        required=("experienceItemId", "src"),
        defaults={"alt": "Experience detail image"},
    ),
))

register(EntitySpec(
    slug="education",
    entity_type="education",
    label="Education item",
    model=EducationItem,
    parent=SECTION_PARENT,
    section_types=("education",),
    normalize=normalize_education,
    children="images",
    schema=PatchSchema(
        label="Education item",
        fields=(
            Field("institution", "institution"),
            Field("degree", "degree"),
            Field("period", "period"),
            Field("description", "description"),
            ORDER,
        ),
        required=("sectionId", "institution", "period"),
        defaults={"degree": "", "description": ""},
    ),
))

register(EntitySpec(
    slug="education-images",
    entity_type="education_image",
    label="Education image",
    model=EducationImage,
    parent=ParentSpec("educationItemId", "education_item_id", EducationItem, "Education item"),
    normalize=normalize_education_image,
    schema=PatchSchema(
        label="Education image",
        fields=(
            Field("src", "src"),
            Field("imagePublicId", "image_public_id", as_optional_string),
            Field("alt", "alt", as_optional_string),
            ORDER,
        ),
        image=SRC_IMAGE,
        required=("educationItemId", "src"),
    ),
))

register(EntitySpec(
    slug="testimonials",
    entity_type="testimonial",
    label="Testimonial",
    model=TestimonialItem,
    parent=SECTION_PARENT,
    section_types=("testimonials",),
    normalize=normalize_testimonial,
    schema=PatchSchema(
        label="Testimonial",
        fields=(
            Field("clientName", "client_name"),
            Field("role", "role", as_optional_string),
            Field("company", "company", as_optional_string),
            Field("content", "content"),
            Field("rating", "rating", bounded_number(0, 5)),
            Field("imageSrc", "image_src", as_optional_string),
            Field("imagePublicId", "image_public_id", as_optional_string),
            ORDER,
        ),
        image=IMAGE,
        required=("sectionId", "clientName", "content"),
        defaults={"rating": 5},
    ),
))

register(EntitySpec(
    slug="contact-info",
    entity_type="contact_info",
    label="Contact info item",
    model=ContactInfoItem,
    parent=SECTION_PARENT,
    section_types=("contact",),
    normalize=normalize_contact_info,
    schema=PatchSchema(
        label="Contact info item",
        fields=(
            Field("type", "type", one_of(CONTACT_TYPES)),
            Field("value", "value"),
            Field("label", "label", as_optional_string),
            ORDER,
        ),
        required=("sectionId", "type", "value"),
    ),
))

register(EntitySpec(
    slug="custom-section-content-blocks",
    entity_type="custom_block",
    label="Content block",
    model=CustomSectionContentBlock,
    parent=SECTION_PARENT,
    section_types=("custom",),
    normalize=normalize_custom_block,
    prepare=prepare_custom_block,
    schema=PatchSchema(
        label="Content block",
        fields=(
            Field("type", "type", one_of(CUSTOM_BLOCK_TYPES)),
            Field("content", "content", as_optional_string),
            Field("imageSrc", "image_src", as_optional_string),
            Field("imageAlt", "image_alt", as_optional_string),
            Field("imagePublicId", "image_public_id", as_optional_string),
            Field("linkUrl", "link_url", as_optional_string),
            Field("fontSize", "font_size", as_optional_int),
            Field("fontWeight", "font_weight", as_optional_string),
            Field("fontStyle", "font_style", as_optional_string),
            Field("textAlign", "text_align", as_optional_string),
            ORDER,
        ),
        image=IMAGE,
        required=("sectionId", "type"),
    ),
))


def get_entity(slug):
    return ENTITIES[slug]
