from enum import Enum
from typing import Any

from markupsafe import Markup

from schoolpages.domain.components import FileConfig, ImageConfig, VideoConfig
from ..animation import animate
from ..html import classes, element, style


# Settles a figure rendered in the loading state, once, from its img's
# load or error event. Mirrors ImageLoad below.
IMAGE_SCRIPT = (
    "function spImageSettle(img,state){"
    "var figure=img.closest('.sp-figure');"
    "if(!figure||figure.dataset.state!=='loading')return;"
    "figure.dataset.state=state;"
    "var placeholder=figure.querySelector('.sp-image-placeholder');"
    "if(placeholder)placeholder.remove();"
    "if(state==='loaded'){img.classList.remove('sp-hidden');return;}"
    "var error=document.createElement('div');"
    "error.className='sp-image-error';"
    "error.setAttribute('role','alert');"
    "error.textContent='Failed to load image';"
    "img.replaceWith(error);}"
)

IMAGE_STYLES = "\n".join(
    [
        ".sp-hidden{display:none}",
        ".sp-image-placeholder{min-height:8rem;background:#e5e7eb;border-radius:4px}",
        ".sp-image-error{padding:1rem;color:#b91c1c;background:#fef2f2;border-radius:4px}",
    ]
)


class ImageState(str, Enum):
    LOADING = "loading"
    ERROR = "error"
    LOADED = "loaded"


class ImageLoad:
    """
    Load state of one image: starts ``loading`` and settles exactly once,
    on ``loaded`` or ``error``. Events after it has settled are ignored, so
    an image that failed never shows as loaded.
    """

    def __init__(self, src: str):
        self.src = src
        self.state = ImageState.LOADING

    @property
    def settled(self) -> bool:
        return self.state is not ImageState.LOADING

    def on_load(self) -> ImageState:
        if not self.settled:
            self.state = ImageState.LOADED
        return self.state

    def on_error(self) -> ImageState:
        if not self.settled:
            self.state = ImageState.ERROR
        return self.state


def _dimension(value: Any) -> str:
    if value is None or value == "":
        return "auto"
    if isinstance(value, int):
        return f"{value}px"
    return str(value)


def render_image(config: ImageConfig, state: ImageState = ImageState.LOADING) -> Markup:
    """
    Render an image in one of its three load states: a placeholder while
    loading (with the image present but hidden so it can finish loading),
    an inline error in place of the image, or the image itself.
    """
    state = ImageState(state)
    loading = state is ImageState.LOADING

    if state is ImageState.ERROR:
        body = element("div", "Failed to load image", class_="sp-image-error", role="alert")
    else:
        image = element(
            "img",
            src=config.src,
            alt=config.alt,
            class_=classes("sp-image", f"sp-align-{config.alignment}", loading and "sp-hidden"),
            style=style({"width": _dimension(config.width), "height": _dimension(config.height)}),
            onload=loading and "spImageSettle(this,'loaded')",
            onerror=loading and "spImageSettle(this,'error')",
        )
        placeholder = None
        if loading:
            placeholder = element("div", class_="sp-image-placeholder", aria_busy="true")
        body = Markup("").join([placeholder or Markup(""), image])

    caption = element("figcaption", config.caption, class_="sp-image-caption") if config.caption else None

    figure = element(
        "figure",
        body,
        caption,
        class_=classes("sp-figure", config.class_name),
        style=style(config.custom_styles),
        data_state=state.value,
    )
    return animate(figure, config.animation)


def render_video(config: VideoConfig) -> Markup:
    video = element(
        "video",
        element("a", "Download video", href=config.url),
        src=config.url,
        controls=config.controls,
        autoplay=config.autoplay,
        # browsers refuse to autoplay with sound
        muted=config.autoplay,
        playsinline=True,
        class_="sp-video-player",
        style=style({"width": _dimension(config.width or "100%"), "height": _dimension(config.height)}),
    )
    caption = element("figcaption", config.caption, class_="sp-video-caption") if config.caption else None

    figure = element(
        "figure",
        video,
        caption,
        class_=classes("sp-video", config.class_name),
        style=style(config.custom_styles),
    )
    return animate(figure, config.animation)


def render_file(config: FileConfig) -> Markup:
    details = " · ".join(part for part in (config.mime_type, config.size) if part)

    link = element(
        "a",
        element("span", class_=f"sp-icon sp-icon-{config.icon or 'file-text'}", aria_hidden="true"),
        element("span", config.name, class_="sp-file-name"),
        element("span", details, class_="sp-file-details") if details else None,
        href=config.url,
        download=config.name,
        class_="sp-file-link",
    )

    file_block = element(
        "div",
        link,
        class_=classes("sp-file", config.class_name),
        style=style(config.custom_styles),
    )
    return animate(file_block, config.animation)
