from portfolio.extensions import db
from .base import BaseModel


class TestimonialItem(BaseModel):
    __tablename__ = "testimonial_items"

    section_id = db.Column(db.String(36), db.ForeignKey("sections.id", ondelete="CASCADE"), nullable=False)
    client_name = db.Column(db.String(200), nullable=False)
    role = db.Column(db.String(200), nullable=True)
    company = db.Column(db.String(200), nullable=True)
    content = db.Column(db.Text, nullable=False)
    rating = db.Column(db.Float, nullable=False, default=5)
    image_src = db.Column(db.String(1024), nullable=True)
    image_public_id = db.Column(db.String(255), nullable=True)
    order = db.Column(db.Integer, nullable=False, default=0)

    section = db.relationship("Section", back_populates="testimonial_items")
