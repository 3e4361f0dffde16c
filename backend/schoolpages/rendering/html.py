"""
Small helpers for building escaped HTML fragments with markupsafe.

Attribute names are given as keyword arguments: a trailing underscore is
dropped (``class_``) and remaining underscores become hyphens
(``data_component_id``). ``None`` and ``False`` values are omitted and
``True`` renders a bare boolean attribute.
"""
import re
from typing import Any, Mapping

from markupsafe import Markup, escape

VOID_TAGS = {"br", "hr", "img", "input", "source"}

_CAMEL = re.compile(r"(?<!^)(?=[A-Z])")


def css_property(name: str) -> str:
    """``backgroundColor`` -> ``background-color``; kebab-case passes through."""
    if name.startswith("--") or "-" in name:
        return name
    return _CAMEL.sub("-", name).lower()


def style(*mappings: Mapping[str, Any]) -> str | None:
    merged = {}
    for mapping in mappings:
        for key, value in (mapping or {}).items():
            if value is None or value == "":
                continue
            merged[css_property(str(key))] = value

    if not merged:
        return None
    return ";".join(f"{key}:{value}" for key, value in merged.items())


def classes(*names: str | None) -> str | None:
    joined = " ".join(name for name in names if name)
    return joined or None


def attributes(**attrs: Any) -> Markup:
    parts = []
    for key, value in attrs.items():
        if value is None or value is False:
            continue
        name = key.rstrip("_").replace("_", "-")
        if value is True:
            parts.append(Markup(" {}").format(name))
        else:
            parts.append(Markup(' {}="{}"').format(name, value))
    return Markup("").join(parts)


def element(tag: str, *children: Any, **attrs: Any) -> Markup:
    """Render ``<tag attrs>children</tag>``. Plain strings are escaped."""
    opening = Markup("<{}{}>").format(tag, attributes(**attrs))
    if tag in VOID_TAGS:
        return opening
    body = Markup("").join(escape(child) for child in children if child is not None)
    return opening + body + Markup("</{}>").format(tag)


def fragment(*children: Any) -> Markup:
    return Markup("").join(escape(child) for child in children if child is not None)
