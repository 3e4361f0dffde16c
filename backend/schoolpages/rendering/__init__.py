from .page import PageLoader, render_page
from .registry import REGISTRY, render, render_component

__all__ = ["PageLoader", "REGISTRY", "render", "render_component", "render_page"]
