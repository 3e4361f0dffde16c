from .component import normalize_component

def normalize_page(page, include_components=False):
    data = {
        "id": page.id,
        "title": page.title,
        "path": page.path,
        "class_id": page.class_id,
        "config": page.config or {},
        "created_at": page.created_at.isoformat() if page.created_at else None,
        "updated_at": page.updated_at.isoformat() if page.updated_at else None,
    }

    if include_components:
        data["components"] = [
            normalize_component(c, include_type=True) for c in page.components
        ]

    return data
