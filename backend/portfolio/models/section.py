from portfolio.extensions import db
from .base import BaseModel

SECTION_TYPES = (
    "hero",
    "introduction",
    "education",
    "skills",
    "experience",
    "projects",
    "testimonials",
    "contact",
    "custom",
)


class Section(BaseModel):
    __tablename__ = "sections"

    slug = db.Column(db.String(120), unique=True, nullable=False, index=True)
    title = db.Column(db.String(200), nullable=False)
    type = db.Column(db.String(32), nullable=False)  # one of SECTION_TYPES
    order = db.Column(db.Integer, nullable=False, default=0)
    visible = db.Column(db.Boolean, nullable=False, default=True)
    settings = db.Column(db.JSON, default=dict)  # persisted layout toggles

    text_blocks = db.relationship(
        "TextBlock", back_populates="section", order_by="TextBlock.order",
        cascade="all, delete-orphan"
    )
    image_blocks = db.relationship(
        "ImageBlock", back_populates="section", order_by="ImageBlock.order",
        cascade="all, delete-orphan"
    )
    project_items = db.relationship(
        "ProjectItem", back_populates="section", order_by="ProjectItem.order",
        cascade="all, delete-orphan"
    )
    skill_items = db.relationship(
        "SkillItem", back_populates="section", order_by="SkillItem.order",
        cascade="all, delete-orphan"
    )
    skill_images = db.relationship(
        "SkillImage", back_populates="section", order_by="SkillImage.order",
        cascade="all, delete-orphan"
    )
    experience_items = db.relationship(
        "ExperienceItem", back_populates="section", order_by="ExperienceItem.order",
        cascade="all, delete-orphan"
    )
    education_items = db.relationship(
        "EducationItem", back_populates="section", order_by="EducationItem.order",
        cascade="all, delete-orphan"
    )
    testimonial_items = db.relationship(
        "TestimonialItem", back_populates="section", order_by="TestimonialItem.order",
        cascade="all, delete-orphan"
    )
    contact_info_items = db.relationship(
        "ContactInfoItem", back_populates="section", order_by="ContactInfoItem.order",
        cascade="all, delete-orphan"
    )
    custom_blocks = db.relationship(
        "CustomSectionContentBlock", back_populates="section",
        order_by="CustomSectionContentBlock.order", cascade="all, delete-orphan"
    )

    __table_args__ = (
        db.Index("idx_section_order", "order"),
    )
