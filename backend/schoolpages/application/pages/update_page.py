from typing import Any, Dict
from schoolpages.models.custom_page import CustomPage
from schoolpages.domain.exceptions import NotFound, PersistenceFailure
from schoolpages.domain.invariants.page import (
    assert_page_config,
    assert_page_fields,
    normalize_path,
)
from schoolpages.utils.audit import log_action
from schoolpages.utils.results import returns_result
from schoolpages.utils.transaction import transactional


ALLOWED_UPDATE_FIELDS = ("title", "path", "class_id", "config")


@returns_result("Failed to update page")
def update_custom_page(page_id: str, updates: Dict[str, Any]) -> CustomPage:
    """
    Apply a partial patch. Fields missing from ``updates`` are left alone;
    ``config`` is replaced as a whole when given.
    """
    page = CustomPage.query.filter_by(id=page_id).first()

    if not page:
        raise NotFound(f"Page not found: {page_id}")

    fields = [field for field in ALLOWED_UPDATE_FIELDS if field in updates]
    if not fields:
        raise PersistenceFailure("No valid fields provided for update")

    values = {field: updates[field] for field in fields}
    if "title" in values or "path" in values:
        assert_page_fields(
            title=values.get("title", page.title),
            path=values.get("path", page.path),
        )
    if "path" in values:
        values["path"] = normalize_path(values["path"])
    if "config" in values:
        assert_page_config(values["config"])

    changed_fields = []

    with transactional():
        for field, value in values.items():
            if getattr(page, field) != value:
                setattr(page, field, value)
                changed_fields.append(field)

        if changed_fields:
            log_action(
                action="page.update",
                entity_type="page",
                entity_id=page.id,
                payload={"fields": changed_fields},
            )

    return page
