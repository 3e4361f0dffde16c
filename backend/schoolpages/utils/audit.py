from flask import current_app
from typing import Optional

def log_action(
    *,
    action: str,
    entity_type: str,
    entity_id: Optional[str],
    payload: dict | None = None
):
    current_app.logger.info(
        "%s %s=%s %s",
        action,
        entity_type,
        entity_id,
        payload or {},
    )
