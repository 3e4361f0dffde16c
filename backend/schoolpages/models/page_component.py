from schoolpages.extensions import db
from .base import BaseModel


class PageComponent(BaseModel):
    __tablename__ = "page_components"

    page_id = db.Column(
        db.String(36),
        db.ForeignKey("custom_pages.id", ondelete="CASCADE"),
        nullable=False
    )
    component_type_id = db.Column(
        db.String(36),
        db.ForeignKey("component_types.id"),
        nullable=False
    )
    # Not unique: ties are allowed and fall back to insertion order
    position = db.Column(db.Integer, nullable=False, default=0)
    config = db.Column(db.JSON, nullable=False, default=dict)

    page = db.relationship("CustomPage", back_populates="components")
    component_type = db.relationship("ComponentType", lazy="joined")

    __table_args__ = (
        db.Index("idx_page_component_page_position", "page_id", "position"),
    )
