from typing import Any, Dict, Optional
from flask import current_app
from schoolpages.extensions import db
from schoolpages.models.custom_page import CustomPage
from schoolpages.domain.invariants.page import (
    assert_page_config,
    assert_page_fields,
    normalize_path,
)
from schoolpages.utils.audit import log_action
from schoolpages.utils.results import returns_result
from schoolpages.utils.transaction import transactional


@returns_result("Failed to create page")
def create_custom_page(
    title: str,
    path: str,
    config: Optional[Dict[str, Any]] = None,
    *,
    class_id: Optional[str] = None,
) -> CustomPage:
    """
    Create a page at a normalized path.

    The given config is shallow-merged over the default page config, so
    keys it leaves out keep their defaults. A path already in use is
    rejected by the unique constraint and reported as a persistence failure.
    """
    assert_page_fields(title=title, path=path)

    merged = {**current_app.config["DEFAULT_PAGE_CONFIG"], **(config or {})}
    assert_page_config(merged)

    page = CustomPage()
    page.title = title
    page.path = normalize_path(path)
    page.class_id = class_id
    page.config = merged

    with transactional():
        db.session.add(page)
        db.session.flush()  # ensures page.id exists

        log_action(
            action="page.create",
            entity_type="page",
            entity_id=page.id,
            payload={
                "title": page.title,
                "path": page.path,
            },
        )

    return page
