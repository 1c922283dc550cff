from portfolio.extensions import db
from .base import BaseModel


class EducationItem(BaseModel):
    __tablename__ = "education_items"

    section_id = db.Column(db.String(36), db.ForeignKey("sections.id", ondelete="CASCADE"), nullable=False)
    institution = db.Column(db.String(200), nullable=False)
    degree = db.Column(db.String(200), nullable=False, default="")
    period = db.Column(db.String(100), nullable=False)
    description = db.Column(db.Text, nullable=False, default="")
    order = db.Column(db.Integer, nullable=False, default=0)

    section = db.relationship("Section", back_populates="education_items")
    images = db.relationship(
        "EducationImage",
        back_populates="education_item",
        order_by="EducationImage.order",
        cascade="all, delete-orphan",
    )


class EducationImage(BaseModel):
    __tablename__ = "education_images"

    education_item_id = db.Column(
        db.String(36), db.ForeignKey("education_items.id", ondelete="CASCADE"), nullable=False
    )
    src = db.Column(db.String(1024), nullable=False)
    image_public_id = db.Column(db.String(255), nullable=True)
    alt = db.Column(db.String(255), nullable=True)
    order = db.Column(db.Integer, nullable=False, default=0)

    education_item = db.relationship("EducationItem", back_populates="images")
