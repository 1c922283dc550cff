from portfolio.extensions import db
from .base import BaseModel

CONTACT_TYPES = (
    "email",
    "phone",
    "linkedin",
    "github",
    "twitter",
    "facebook",
    "instagram",
    "website",
    "other",
)


class ContactInfoItem(BaseModel):
    __tablename__ = "contact_info_items"

    section_id = db.Column(db.String(36), db.ForeignKey("sections.id", ondelete="CASCADE"), nullable=False)
    type = db.Column(db.String(32), nullable=False)  # one of CONTACT_TYPES
    value = db.Column(db.String(500), nullable=False)
    label = db.Column(db.String(200), nullable=True)
    order = db.Column(db.Integer, nullable=False, default=0)

    section = db.relationship("Section", back_populates="contact_info_items")
