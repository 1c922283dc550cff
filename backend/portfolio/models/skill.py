from portfolio.extensions import db
from .base import BaseModel


class SkillItem(BaseModel):
    __tablename__ = "skill_items"

    section_id = db.Column(db.String(36), db.ForeignKey("sections.id", ondelete="CASCADE"), nullable=False)
    title = db.Column(db.String(200), nullable=False)
    description = db.Column(db.Text, nullable=False, default="")
    level = db.Column(db.Float, nullable=False, default=0)
    order = db.Column(db.Integer, nullable=False, default=0)

    section = db.relationship("Section", back_populates="skill_items")

    __table_args__ = (
        db.Index("idx_skill_section_order", "section_id", "order"),
    )


class SkillImage(BaseModel):
    __tablename__ = "skill_images"

    section_id = db.Column(db.String(36), db.ForeignKey("sections.id", ondelete="CASCADE"), nullable=False)
    src = db.Column(db.String(1024), nullable=False)
    image_public_id = db.Column(db.String(255), nullable=True)
    alt = db.Column(db.String(255), nullable=True)
    order = db.Column(db.Integer, nullable=False, default=0)

    section = db.relationship("Section", back_populates="skill_images")
