from typing import List, Optional
from schoolpages.extensions import db
from schoolpages.models.custom_page import CustomPage
from schoolpages.domain.exceptions import NotFound
from schoolpages.utils.results import returns_result


@returns_result("Failed to load custom pages")
def load_custom_pages(*, class_id: Optional[str] = None) -> List[CustomPage]:
    """
    All pages ordered by title.

    With ``class_id`` only that class's pages and the school-wide ones
    (no class) are returned.
    """
    query = CustomPage.query
    if class_id is not None:
        query = query.filter(
            db.or_(CustomPage.class_id == class_id, CustomPage.class_id.is_(None))
        )

    return query.order_by(CustomPage.title.asc()).all()


@returns_result("Failed to load page")
def load_page_by_path(path: str) -> CustomPage:
    """
    The page whose path matches exactly. Its ``components`` come back
    ordered by position, each with its component type loaded.
    """
    page = CustomPage.query.filter_by(path=path).first()

    if not page:
        raise NotFound(f"Page not found: {path}")

    return page
