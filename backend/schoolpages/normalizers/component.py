from .component_type import normalize_component_type

def normalize_component(component, include_type=False):
    data = {
        "id": component.id,
        "page_id": component.page_id,
        "component_type_id": component.component_type_id,
        "position": component.position,
        "config": component.config or {},
        "created_at": component.created_at.isoformat() if component.created_at else None,
        "updated_at": component.updated_at.isoformat() if component.updated_at else None,
    }

    if include_type:
        data["component_type"] = (
            normalize_component_type(component.component_type)
            if component.component_type else None
        )

    return data
