from portfolio.extensions import db
from .base import BaseModel

DEFAULT_SETTINGS = {
    "theme": "dark",
    "site_title": "PORTFOLIO",
    "show_portrait": True,
    "resume_url": "/resume.pdf",
    "global_font_family": "font-sans",
}


class Setting(BaseModel):
    """Site-wide settings. A single row is expected."""

    __tablename__ = "settings"

    theme = db.Column(db.String(32), nullable=False, default="dark")
    site_title = db.Column(db.String(200), nullable=False, default="PORTFOLIO")
    show_portrait = db.Column(db.Boolean, nullable=False, default=True)
    resume_url = db.Column(db.String(1024), nullable=True)
    global_font_family = db.Column(db.String(64), nullable=False, default="font-sans")
