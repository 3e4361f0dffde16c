from schoolpages.extensions import db
from .base import BaseModel


class ComponentType(BaseModel):
    __tablename__ = "component_types"

    name = db.Column(db.String(50), unique=True, nullable=False, index=True)  # heading, image, card...
    description = db.Column(db.String(255), nullable=False, default="")
    icon = db.Column(db.String(100), nullable=False, default="")
