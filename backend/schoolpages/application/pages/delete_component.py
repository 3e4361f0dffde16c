from schoolpages.extensions import db
from schoolpages.models.page_component import PageComponent
from schoolpages.domain.exceptions import NotFound
from schoolpages.utils.audit import log_action
from schoolpages.utils.results import returns_result
from schoolpages.utils.transaction import transactional


@returns_result("Failed to delete component")
def delete_page_component(component_id: str) -> bool:
    component = PageComponent.query.filter_by(id=component_id).first()

    if not component:
        raise NotFound(f"Component not found: {component_id}")

    page_id = component.page_id

    with transactional():
        db.session.delete(component)

        log_action(
            action="component.delete",
            entity_type="component",
            entity_id=component_id,
            payload={"page_id": page_id},
        )

    return True
