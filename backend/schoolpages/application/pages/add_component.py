from typing import Any, Dict
from schoolpages.extensions import db
from schoolpages.models.page_component import PageComponent
from schoolpages.utils.audit import log_action
from schoolpages.utils.results import returns_result
from schoolpages.utils.transaction import transactional


@returns_result("Failed to add component")
def add_page_component(
    page_id: str,
    component_type_id: str,
    position: int,
    config: Dict[str, Any],
) -> PageComponent:
    """
    Insert one component row.

    Positions are not checked for uniqueness: a duplicate position is
    stored as given and ties render in insertion order. The config is
    stored as-is; it is validated when the page is rendered.
    """
    component = PageComponent()
    component.page_id = page_id
    component.component_type_id = component_type_id
    component.position = position
    component.config = config or {}

    with transactional():
        db.session.add(component)
        db.session.flush()

        log_action(
            action="component.create",
            entity_type="component",
            entity_id=component.id,
            payload={
                "page_id": page_id,
                "component_type_id": component_type_id,
                "position": position,
            },
        )

    return component
