from typing import List
from schoolpages.models.component_type import ComponentType
from schoolpages.utils.results import returns_result


@returns_result("Failed to load component types")
def load_component_types() -> List[ComponentType]:
    return ComponentType.query.order_by(ComponentType.name.asc()).all()
