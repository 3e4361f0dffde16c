from typing import Dict, List
from sqlalchemy.exc import SQLAlchemyError
from schoolpages.models.custom_page import CustomPage
from schoolpages.models.page_component import PageComponent
from schoolpages.domain.exceptions import NotFound, PartialReorderFailure
from schoolpages.utils.audit import log_action
from schoolpages.utils.results import returns_result
from schoolpages.utils.transaction import transactional


@returns_result("Failed to reorder components")
def reorder_components(page_id: str, component_ids: List[str]) -> Dict[str, int]:
    """
    Set each component's position to its index in ``component_ids``.

    Rows are updated and committed one at a time, in list order. There is
    no surrounding transaction: if a row fails (unknown id, id from another
    page, database error) the run stops with PartialReorderFailure and the
    rows before it keep their new positions.
    """
    if not CustomPage.query.filter_by(id=page_id).first():
        raise NotFound(f"Page not found: {page_id}")

    total = len(component_ids)

    for index, component_id in enumerate(component_ids):
        try:
            component = PageComponent.query.filter_by(id=component_id, page_id=page_id).first()
            if component:
                with transactional():
                    component.position = index
        except SQLAlchemyError as exc:
            raise PartialReorderFailure(
                f"Failed to move component {component_id}; "
                f"{index} of {total} positions were updated",
                applied=index,
                total=total,
            ) from exc

        if not component:
            raise PartialReorderFailure(
                f"Component {component_id} is not on page {page_id}; "
                f"{index} of {total} positions were updated",
                applied=index,
                total=total,
            )

    log_action(
        action="component.reorder",
        entity_type="page",
        entity_id=page_id,
        payload={"count": total},
    )

    return {"count": total}
