from typing import Any, Dict
from schoolpages.models.page_component import PageComponent
from schoolpages.domain.exceptions import NotFound, PersistenceFailure
from schoolpages.utils.audit import log_action
from schoolpages.utils.results import returns_result
from schoolpages.utils.transaction import transactional


ALLOWED_UPDATE_FIELDS = ("component_type_id", "position", "config")


@returns_result("Failed to update component")
def update_page_component(component_id: str, updates: Dict[str, Any]) -> PageComponent:
    component = PageComponent.query.filter_by(id=component_id).first()

    if not component:
        raise NotFound(f"Component not found: {component_id}")

    fields = [field for field in ALLOWED_UPDATE_FIELDS if field in updates]
    if not fields:
        raise PersistenceFailure("No valid fields provided for update")

    position = updates.get("position")
    if "position" in fields and (isinstance(position, bool) or not isinstance(position, int)):
        raise PersistenceFailure("Position must be an integer")
    if "config" in fields and not isinstance(updates["config"], dict):
        raise PersistenceFailure("Config must be an object")

    changed_fields = []

    with transactional():
        for field in fields:
            if getattr(component, field) != updates[field]:
                setattr(component, field, updates[field])
                changed_fields.append(field)

        if changed_fields:
            log_action(
                action="component.update",
                entity_type="component",
                entity_id=component.id,
                payload={"fields": changed_fields},
            )

    return component
