from markupsafe import Markup

from schoolpages.domain.components import (
    HeadingConfig,
    ListConfig,
    ParagraphConfig,
    QuoteConfig,
)
from ..animation import STAGGER_MS, animate, animation_attributes, is_animated
from ..html import classes, element, fragment, style

HEADING_TAGS = {1: "h1", 2: "h2", 3: "h3", 4: "h4", 5: "h5", 6: "h6"}

# Stored paragraph text marks line breaks with a literal backslash-n
LINE_BREAK = "\\n"


def render_heading(config: HeadingConfig) -> Markup:
    tag = HEADING_TAGS.get(config.level, "h2")
    heading = element(
        tag,
        config.text,
        class_=classes("sp-heading", f"sp-heading-{tag}", f"sp-align-{config.alignment}", config.class_name),
        style=style(config.custom_styles),
    )
    return animate(heading, config.animation)


def render_paragraph(config: ParagraphConfig) -> Markup:
    lines = config.text.split(LINE_BREAK)
    body = []
    for index, line in enumerate(lines):
        body.append(line)
        if index < len(lines) - 1:
            body.append(element("br"))

    paragraph = element(
        "p",
        fragment(*body),
        class_=classes("sp-paragraph", f"sp-align-{config.alignment}", config.class_name),
        style=style(config.custom_styles),
    )
    return animate(paragraph, config.animation)


def render_list(config: ListConfig) -> Markup:
    """Items enter one after another, STAGGER_MS apart, in document order."""
    tag = "ol" if config.list_type == "ordered" else "ul"

    items = []
    for index, item in enumerate(config.items):
        attrs = {}
        if is_animated(config.animation):
            attrs = animation_attributes(config.animation, delay_ms=index * STAGGER_MS)
        items.append(element("li", item, **attrs))

    rendered = element(
        tag,
        fragment(*items),
        class_=classes("sp-list", f"sp-list-{config.list_type}", config.class_name),
        style=style(config.custom_styles),
    )
    return animate(rendered, config.animation)


def render_quote(config: QuoteConfig) -> Markup:
    citation = None
    if config.citation:
        citation = element("footer", element("cite", config.citation), class_="sp-quote-citation")

    quote = element(
        "blockquote",
        element("p", config.text),
        citation,
        class_=classes("sp-quote", f"sp-quote-{config.variant}", config.class_name),
        style=style(config.custom_styles),
    )
    return animate(quote, config.animation)
