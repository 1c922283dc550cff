from portfolio.extensions import db
from .base import BaseModel


class TextBlock(BaseModel):
    __tablename__ = "text_blocks"

    section_id = db.Column(db.String(36), db.ForeignKey("sections.id", ondelete="CASCADE"), nullable=False)
    content = db.Column(db.Text, nullable=False, default="")
    order = db.Column(db.Integer, nullable=False, default=0)
    font_size = db.Column(db.Integer, nullable=True)
    font_family = db.Column(db.String(64), nullable=True)

    section = db.relationship("Section", back_populates="text_blocks")

    __table_args__ = (
        db.Index("idx_text_block_section_order", "section_id", "order"),
    )


class ImageBlock(BaseModel):
    __tablename__ = "image_blocks"

    section_id = db.Column(db.String(36), db.ForeignKey("sections.id", ondelete="CASCADE"), nullable=False)
    src = db.Column(db.String(1024), nullable=False)
    image_public_id = db.Column(db.String(255), nullable=True)  # always written with src
    alt = db.Column(db.String(255), nullable=True)
    caption = db.Column(db.String(500), nullable=True)
    width = db.Column(db.Integer, nullable=True)
    height = db.Column(db.Integer, nullable=True)
    order = db.Column(db.Integer, nullable=False, default=0)

    section = db.relationship("Section", back_populates="image_blocks")

    __table_args__ = (
        db.Index("idx_image_block_section_order", "section_id", "order"),
    )


class CustomSectionContentBlock(BaseModel):
    __tablename__ = "custom_section_content_blocks"

    section_id = db.Column(db.String(36), db.ForeignKey("sections.id", ondelete="CASCADE"), nullable=False)
    type = db.Column(db.String(16), nullable=False)  # IMAGE, TEXT, TITLE
    content = db.Column(db.Text, nullable=True)
    image_src = db.Column(db.String(1024), nullable=True)
    image_alt = db.Column(db.String(255), nullable=True)
    image_public_id = db.Column(db.String(255), nullable=True)
    link_url = db.Column(db.String(1024), nullable=True)
    font_size = db.Column(db.Integer, nullable=True)
    font_weight = db.Column(db.String(32), nullable=True)
    font_style = db.Column(db.String(32), nullable=True)
    text_align = db.Column(db.String(16), nullable=True)
    order = db.Column(db.Integer, nullable=False, default=0)

    section = db.relationship("Section", back_populates="custom_blocks")

    __table_args__ = (
        db.Index("idx_custom_block_section_order", "section_id", "order"),
    )
