"""
Entrance animation presets.

A preset wraps rendered output in a container that plays a single
entrance transition (no repeat). ``none`` leaves the output untouched,
with no wrapper at all.
"""
from typing import Any, Dict, Optional

from markupsafe import Markup

from .html import classes, element

DEFAULT_DURATION_MS = 500
STAGGER_MS = 100

# Start and end states of each preset, used for the keyframes below
ANIMATION_PRESETS = {
    "fade": ({"opacity": "0"}, {"opacity": "1"}),
    "slide": (
        {"opacity": "0", "transform": "translateX(-50px)"},
        {"opacity": "1", "transform": "translateX(0)"},
    ),
    "zoom": (
        {"opacity": "0", "transform": "scale(0.9)"},
        {"opacity": "1", "transform": "scale(1)"},
    ),
}


def is_animated(animation: Optional[str]) -> bool:
    return animation in ANIMATION_PRESETS


def animation_attributes(
    animation: Optional[str],
    *,
    duration_ms: int = DEFAULT_DURATION_MS,
    delay_ms: int = 0,
    extra_class: Optional[str] = None,
) -> Dict[str, Any]:
    """
    Attributes that put one element under an entrance animation.
    Empty (apart from ``extra_class``) when the animation is off.
    """
    if not is_animated(animation):
        return {"class_": classes(extra_class)}

    return {
        "class_": classes("sp-animate", f"sp-animate-{animation}", extra_class),
        "data_animation": animation,
        "style": f"--sp-duration:{duration_ms}ms;--sp-delay:{delay_ms}ms",
    }


def animate(
    content: Markup,
    animation: Optional[str],
    *,
    duration_ms: int = DEFAULT_DURATION_MS,
    extra_class: Optional[str] = None,
) -> Markup:
    if not is_animated(animation):
        return content

    return element(
        "div",
        content,
        **animation_attributes(animation, duration_ms=duration_ms, extra_class=extra_class),
    )


def _declarations(state):
    return ";".join(f"{key}:{value}" for key, value in state.items())


def stylesheet() -> str:
    """Keyframes and classes backing the presets."""
    rules = [
        ".sp-animate{animation-duration:var(--sp-duration,500ms);"
        "animation-delay:var(--sp-delay,0ms);animation-iteration-count:1;"
        "animation-fill-mode:both;animation-timing-function:ease-out}"
    ]
    for name, (start, end) in ANIMATION_PRESETS.items():
        rules.append(
            f"@keyframes sp-{name}{{from{{{_declarations(start)}}}to{{{_declarations(end)}}}}}"
        )
        rules.append(f".sp-animate-{name}{{animation-name:sp-{name}}}")
    return "\n".join(rules)
