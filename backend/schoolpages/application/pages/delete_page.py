from schoolpages.extensions import db
from schoolpages.models.custom_page import CustomPage
from schoolpages.domain.exceptions import NotFound
from schoolpages.utils.audit import log_action
from schoolpages.utils.results import returns_result
from schoolpages.utils.transaction import transactional


@returns_result("Failed to delete page")
def delete_custom_page(page_id: str) -> bool:
    """
    Delete the page row. Its components go with it through the
    page_components foreign key (ON DELETE CASCADE), not through this layer.
    """
    page = CustomPage.query.filter_by(id=page_id).first()

    if not page:
        raise NotFound(f"Page not found: {page_id}")

    with transactional():
        db.session.delete(page)

        log_action(
            action="page.delete",
            entity_type="page",
            entity_id=page_id,
            payload={"path": page.path},
        )

    return True
