from .blocks import render_button, render_card, render_divider, render_grid, render_table
from .media import ImageLoad, ImageState, render_file, render_image, render_video
from .text import render_heading, render_list, render_paragraph, render_quote

__all__ = [
    "ImageLoad",
    "ImageState",
    "render_button",
    "render_card",
    "render_divider",
    "render_file",
    "render_grid",
    "render_heading",
    "render_image",
    "render_list",
    "render_paragraph",
    "render_quote",
    "render_table",
    "render_video",
]
