"""
Page-level rendering: a stored page and its ordered components, laid out
according to the page config. Edit mode adds per-component controls for
the authoring UI.
"""
from typing import Optional

from markupsafe import Markup

from . import animation
from .html import classes, element, fragment, style
from .registry import render_component
from .renderers.media import IMAGE_SCRIPT, IMAGE_STYLES

LAYOUT_CLASSES = {
    "standard": "sp-layout-standard",
    "wide": "sp-layout-wide",
    "full": "sp-layout-full",
    "sidebar": "sp-layout-sidebar",
    "two-column": "sp-layout-two-column",
}

EDIT_ACTIONS = (
    ("move-up", "Move up"),
    ("move-down", "Move down"),
    ("edit", "Edit"),
    ("delete", "Delete"),
)


def page_stylesheet() -> str:
    """CSS a rendered page needs: animation presets and image load states."""
    return "\n".join([animation.stylesheet(), IMAGE_STYLES])


def page_script() -> str:
    """Client hooks a rendered page needs. Must load before the body."""
    return IMAGE_SCRIPT


def _edit_controls(component) -> Markup:
    return element(
        "div",
        fragment(
            *(
                element(
                    "button",
                    label,
                    type="button",
                    class_=f"sp-edit-{action}",
                    data_action=action,
                    data_component_id=component.id,
                )
                for action, label in EDIT_ACTIONS
            )
        ),
        class_="sp-edit-controls",
    )


def render_page(page, *, editable: bool = False) -> Markup:
    config = page.config or {}
    layout = config.get("layout", "standard")
    theme = config.get("theme", "default")

    header_image = None
    if config.get("headerImage"):
        header_image = element("img", src=config["headerImage"], alt="", class_="sp-page-header-image")

    blocks = []
    for component in page.components:
        blocks.append(
            element(
                "section",
                _edit_controls(component) if editable else None,
                render_component(component),
                class_=classes("sp-component", editable and "sp-component-editable"),
                data_component_id=component.id,
                data_position=str(component.position),
            )
        )

    if not blocks:
        blocks.append(element("p", "No content yet.", class_="sp-empty"))

    return element(
        "article",
        header_image,
        element("h1", page.title, class_="sp-page-title"),
        element("div", fragment(*blocks), class_="sp-page-body"),
        class_=classes(
            "sp-page",
            LAYOUT_CLASSES.get(layout, LAYOUT_CLASSES["standard"]),
            f"sp-theme-{theme}",
            editable and "sp-editing",
        ),
        style=style({"background-color": config.get("bgColor"), "color": config.get("textColor")}),
        data_page_id=page.id,
        data_path=page.path,
    )


def render_loading() -> Markup:
    return element("div", "Loading...", class_="sp-page-loading", aria_busy="true")


def render_load_error(message: str) -> Markup:
    return element("div", message, class_="sp-page-error", role="alert")


class PageLoader:
    """
    View state for loading one page at a time.

    ``begin`` starts a load and returns a ticket. ``resolve`` applies a
    result only if its ticket belongs to the most recent load; results for
    a page the viewer has since moved away from are dropped. While a load
    is outstanding ``render`` shows the loading placeholder, never an
    older or partial component list.
    """

    IDLE = "idle"
    LOADING = "loading"
    READY = "ready"
    FAILED = "failed"

    def __init__(self, *, editable: bool = False):
        self.editable = editable
        self.state = self.IDLE
        self.path: Optional[str] = None
        self.page = None
        self.error: Optional[str] = None
        self._ticket = 0

    def begin(self, path: str) -> int:
        self._ticket += 1
        self.state = self.LOADING
        self.path = path
        self.page = None
        self.error = None
        return self._ticket

    def resolve(self, ticket: int, result) -> bool:
        """Apply a load result. Returns False when the result was stale."""
        if ticket != self._ticket or self.state != self.LOADING:
            return False

        if result.ok:
            self.page = result.value
            self.state = self.READY
        else:
            self.error = result.error
            self.state = self.FAILED
        return True

    def render(self) -> Markup:
        if self.state == self.READY:
            return render_page(self.page, editable=self.editable)
        if self.state == self.FAILED:
            return render_load_error(self.error or "Failed to load page")
        return render_loading()
