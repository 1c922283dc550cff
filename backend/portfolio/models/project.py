from portfolio.extensions import db
from .base import BaseModel

PROJECT_LAYOUTS = ("layout1", "layout2")

# Many-to-many between projects and categories; both sides are derived from it
project_categories = db.Table(
    "project_categories",
    db.Column(
        "project_id", db.String(36),
        db.ForeignKey("project_items.id", ondelete="CASCADE"), primary_key=True
    ),
    db.Column(
        "category_id", db.String(36),
        db.ForeignKey("categories.id", ondelete="CASCADE"), primary_key=True
    ),
)


class Category(BaseModel):
    __tablename__ = "categories"

    name = db.Column(db.String(120), unique=True, nullable=False)
    order = db.Column(db.Integer, nullable=False, default=0)

    projects = db.relationship(
        "ProjectItem",
        secondary=project_categories,
        back_populates="categories",
        order_by="ProjectItem.order",
    )

    @property
    def project_ids(self):
        return [project.id for project in self.projects]


class ProjectItem(BaseModel):
    __tablename__ = "project_items"

    section_id = db.Column(db.String(36), db.ForeignKey("sections.id", ondelete="CASCADE"), nullable=False)
    project_number = db.Column(db.String(16), nullable=True)
    title = db.Column(db.String(200), nullable=False)
    company_name = db.Column(db.String(200), nullable=True)
    description1 = db.Column(db.Text, nullable=False, default="")
    description2 = db.Column(db.Text, nullable=True)
    image_src = db.Column(db.String(1024), nullable=True)
    image_alt = db.Column(db.String(255), nullable=True)
    image_public_id = db.Column(db.String(255), nullable=True)
    live_link = db.Column(db.String(1024), nullable=True)
    source_link = db.Column(db.String(1024), nullable=True)
    layout = db.Column(db.String(16), nullable=False, default="layout1")
    order = db.Column(db.Integer, nullable=False, default=0)

    section = db.relationship("Section", back_populates="project_items")
    categories = db.relationship(
        "Category",
        secondary=project_categories,
        back_populates="projects",
        order_by="Category.name",
    )

    @property
    def category_ids(self):
        return [category.id for category in self.categories]

    __table_args__ = (
        db.Index("idx_project_section_order", "section_id", "order"),
    )
