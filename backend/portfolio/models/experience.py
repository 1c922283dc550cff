from portfolio.extensions import db
from .base import BaseModel


class ExperienceItem(BaseModel):
    __tablename__ = "experience_items"

    section_id = db.Column(db.String(36), db.ForeignKey("sections.id", ondelete="CASCADE"), nullable=False)
    position_title = db.Column(db.String(200), nullable=False)
    company_name = db.Column(db.String(200), nullable=False)
    period = db.Column(db.String(100), nullable=True)
    summary = db.Column(db.Text, nullable=True)
    description = db.Column(db.Text, nullable=True)
    image_src = db.Column(db.String(1024), nullable=True)
    image_public_id = db.Column(db.String(255), nullable=True)
    order = db.Column(db.Integer, nullable=False, default=0)

    section = db.relationship("Section", back_populates="experience_items")
    detail_images = db.relationship(
        "ExperienceDetailImage",
        back_populates="experience_item",
        order_by="ExperienceDetailImage.order",
        cascade="all, delete-orphan",
    )


class ExperienceDetailImage(BaseModel):
    __tablename__ = "experience_detail_images"

    experience_item_id = db.Column(
        db.String(36), db.ForeignKey("experience_items.id", ondelete="CASCADE"), nullable=False
    )
    src = db.Column(db.String(1024), nullable=False)
    image_public_id = db.Column(db.String(255), nullable=True)
    alt = db.Column(db.String(255), nullable=True)
    caption = db.Column(db.String(500), nullable=True)
    order = db.Column(db.Integer, nullable=False, default=0)

    experience_item = db.relationship("ExperienceItem", back_populates="detail_images")
