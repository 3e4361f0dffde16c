from .load_pages import load_custom_pages, load_page_by_path
from .create_page import create_custom_page
from .update_page import update_custom_page
from .delete_page import delete_custom_page
from .component_types import load_component_types
from .add_component import add_page_component
from .update_component import update_page_component
from .delete_component import delete_page_component
from .reorder_components import reorder_components

__all__ = [
    "load_custom_pages",
    "load_page_by_path",
    "create_custom_page",
    "update_custom_page",
    "delete_custom_page",
    "load_component_types",
    "add_page_component",
    "update_page_component",
    "delete_page_component",
    "reorder_components",
]
