from schoolpages.extensions import db
from .base import BaseModel


class CustomPage(BaseModel):
    __tablename__ = "custom_pages"

    title = db.Column(db.String(200), nullable=False)
    path = db.Column(db.String(200), nullable=False, unique=True, index=True)
    # NULL means the page is visible school-wide
    class_id = db.Column(db.String(36), nullable=True, index=True)
    config = db.Column(db.JSON, nullable=False, default=dict)  # layout, theme, colors, header image

    # Relationship to components (ordered, cascade deletes)
    components = db.relationship(
        "PageComponent",
        back_populates="page",
        order_by="[PageComponent.position, PageComponent.created_at, PageComponent.id]",
        cascade="all, delete-orphan",
        passive_deletes=True,
    )
