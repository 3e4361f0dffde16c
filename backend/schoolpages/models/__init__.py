from .component_type import ComponentType
from .custom_page import CustomPage
from .page_component import PageComponent

__all__ = ["ComponentType", "CustomPage", "PageComponent"]
