import re

from ..exceptions import PersistenceFailure

ALLOWED_LAYOUTS = {"standard", "wide", "full", "sidebar", "two-column"}

_WHITESPACE = re.compile(r"\s+")


def normalize_path(path: str) -> str:
    """Lowercase the path and collapse each run of whitespace to a hyphen."""
    return _WHITESPACE.sub("-", path.lower())


def assert_page_fields(*, title, path):
    if title is not None and not isinstance(title, str):
        raise PersistenceFailure("Page title must be a string")
    if not title or not title.strip():
        raise PersistenceFailure("Page title is required")

    if path is not None and not isinstance(path, str):
        raise PersistenceFailure("Page path must be a string")
    if not path or not normalize_path(path).strip("-"):
        raise PersistenceFailure("Page path is required")


def assert_page_config(config):
    if not isinstance(config, dict):
        raise PersistenceFailure("Page config must be an object")

    layout = config.get("layout")
    if layout is not None and layout not in ALLOWED_LAYOUTS:
        raise PersistenceFailure(
            f"Unknown page layout '{layout}'. Expected one of: {', '.join(sorted(ALLOWED_LAYOUTS))}"
        )
