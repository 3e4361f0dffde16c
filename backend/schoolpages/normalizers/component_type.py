def normalize_component_type(component_type):
    return {
        "id": component_type.id,
        "name": component_type.name,
        "description": component_type.description,
        "icon": component_type.icon,
        "created_at": component_type.created_at.isoformat() if component_type.created_at else None,
        "updated_at": component_type.updated_at.isoformat() if component_type.updated_at else None,
    }
