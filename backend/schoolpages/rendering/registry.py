"""
Component registry: one renderer per component type.

``render`` is the only place a stored config meets its renderer. It parses
the config against the type's variant first, so renderers only ever see
a well-formed config of their own kind.
"""
from typing import Any, Callable, Dict

from flask import current_app, has_app_context
from markupsafe import Markup
from pydantic import BaseModel

from schoolpages.domain.components import CONFIG_MODELS, parse_config
from schoolpages.domain.exceptions import (
    ConfigurationError,
    InvalidComponentConfig,
    UnsupportedComponent,
)
from .html import element
from .renderers import (
    render_button,
    render_card,
    render_divider,
    render_file,
    render_grid,
    render_heading,
    render_image,
    render_list,
    render_paragraph,
    render_quote,
    render_table,
    render_video,
)

Renderer = Callable[[Any], Markup]

REGISTRY: Dict[str, Renderer] = {
    "heading": render_heading,
    "paragraph": render_paragraph,
    "image": render_image,
    "card": render_card,
    "grid": render_grid,
    "divider": render_divider,
    "button": render_button,
    "list": render_list,
    "quote": render_quote,
    "video": render_video,
    "table": render_table,
    "file": render_file,
}

if set(REGISTRY) != set(CONFIG_MODELS):
    raise RuntimeError(
        f"Renderer registry out of sync with config models: "
        f"{sorted(set(REGISTRY) ^ set(CONFIG_MODELS))}"
    )


def render(component_type: str, config: Any) -> Markup:
    """
    Render one component.

    Raises UnsupportedComponent when no renderer is registered for
    ``component_type`` and InvalidComponentConfig when ``config`` is not a
    valid config of that type.
    """
    renderer = REGISTRY.get(component_type) if isinstance(component_type, str) else None
    if renderer is None:
        raise UnsupportedComponent(component_type)

    if isinstance(config, BaseModel):
        if not isinstance(config, CONFIG_MODELS[component_type]):
            raise InvalidComponentConfig(
                component_type, f"got a {type(config).__name__}"
            )
        parsed = config
    else:
        parsed = parse_config(component_type, config)

    return renderer(parsed)


def render_placeholder(error: ConfigurationError, *, component_id=None) -> Markup:
    """Visible stand-in for a component that cannot be rendered."""
    if isinstance(error, UnsupportedComponent):
        label, css = "Unsupported component", "sp-unsupported"
    else:
        label, css = "Invalid component", "sp-invalid"

    return element(
        "div",
        element("strong", label),
        element("span", str(error)),
        class_=f"sp-placeholder {css}",
        role="note",
        data_component_id=component_id,
        data_error=error.kind,
    )


def render_component(component) -> Markup:
    """
    Render a stored page component, turning configuration errors into a
    placeholder so one broken component does not take the page down.
    """
    component_type = component.component_type.name if component.component_type else None

    try:
        return render(component_type, component.config)
    except ConfigurationError as exc:
        if has_app_context():
            current_app.logger.warning(f"component {component.id}: {exc}")
        return render_placeholder(exc, component_id=component.id)
