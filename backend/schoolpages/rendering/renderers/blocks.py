from markupsafe import Markup

from schoolpages.domain.components import (
    ButtonConfig,
    CardConfig,
    DividerConfig,
    GridConfig,
    TableConfig,
)
from ..animation import animate
from ..html import classes, element, fragment, style
from .media import render_image

CARD_DURATION_MS = 400


def render_card(config: CardConfig) -> Markup:
    """
    Image first, then title, then content. Content is either plain text or
    a nested component config, which goes through the registry like any
    other component.
    """
    image = None
    if config.image is not None:
        nested_image = config.image.model_copy(update={"animation": "none"})
        image = element("div", render_image(nested_image), class_="sp-card-image")

    title = element("h3", config.title, class_="sp-card-title") if config.title else None

    if isinstance(config.content, dict):
        from ..registry import render

        nested = config.content
        content = render(nested.get("component", nested.get("type")), nested)
    else:
        content = element("p", config.content) if config.content else None

    card = element(
        "div",
        image,
        title,
        element("div", content, class_="sp-card-content"),
        class_=classes("sp-card", "sp-card-hover", config.class_name),
        style=style(config.custom_styles),
    )
    return animate(card, config.animation, duration_ms=CARD_DURATION_MS)


def render_grid(config: GridConfig) -> Markup:
    cells = [
        element(
            "div",
            item.content,
            class_=classes("sp-grid-item", item.class_name),
            style=style({"grid-column": f"span {min(item.span, config.columns)}"}),
            data_item_id=item.id or None,
        )
        for item in config.items
    ]

    grid = element(
        "div",
        fragment(*cells),
        class_=classes("sp-grid", config.class_name),
        style=style(
            {
                "display": "grid",
                "grid-template-columns": f"repeat({config.columns}, minmax(0, 1fr))",
                "gap": config.gap,
            },
            config.custom_styles,
        ),
    )
    return animate(grid, config.animation)


def render_divider(config: DividerConfig) -> Markup:
    divider = element(
        "hr",
        class_=classes("sp-divider", f"sp-divider-{config.variant}", config.class_name),
        style=style(
            {
                "border-top-style": config.variant,
                "border-top-width": f"{config.thickness}px",
                "border-top-color": config.color,
            },
            config.custom_styles,
        ),
    )
    return animate(divider, config.animation)


def render_button(config: ButtonConfig) -> Markup:
    label = []
    if config.loading:
        label.append(element("span", class_="sp-spinner", aria_hidden="true"))
    elif config.icon:
        label.append(element("span", class_=f"sp-icon sp-icon-{config.icon}", aria_hidden="true"))
    label.append(element("span", config.text))

    common = dict(
        class_=classes(
            "sp-button",
            f"sp-button-{config.variant}",
            config.loading and "sp-button-loading",
            config.class_name,
        ),
        style=style(config.custom_styles),
        aria_busy=config.loading and "true",
    )

    if config.href and not (config.disabled or config.loading):
        button = element("a", fragment(*label), href=config.href, role="button", **common)
    else:
        button = element(
            "button",
            fragment(*label),
            type=config.button_type,
            disabled=config.disabled or config.loading,
            **common,
        )
    return animate(button, config.animation)


def render_table(config: TableConfig) -> Markup:
    head = None
    if config.headers:
        head = element(
            "thead",
            element("tr", fragment(*(element("th", header, scope="col") for header in config.headers))),
        )

    body = element(
        "tbody",
        fragment(
            *(
                element("tr", fragment(*(element("td", cell) for cell in row)))
                for row in config.rows
            )
        ),
    )

    table = element(
        "table",
        head,
        body,
        class_=classes(
            "sp-table",
            config.striped and "sp-table-striped",
            config.bordered and "sp-table-bordered",
            config.class_name,
        ),
        style=style(config.custom_styles),
    )
    return animate(element("div", table, class_="sp-table-wrapper"), config.animation)
