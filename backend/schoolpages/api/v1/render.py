# schoolpages/api/v1/render.py
from flask import render_template, request
from schoolpages.application.pages import load_page_by_path
from schoolpages.errors import STATUS_BY_KIND
from schoolpages.rendering.page import (
    page_script,
    page_stylesheet,
    render_load_error,
    render_page,
)
from . import v1_bp


@v1_bp.route("/render/<path:path>", methods=["GET"])
def render_custom_page(path):
    """Resolve a page path and render it to HTML."""
    editable = request.args.get("edit") in ("1", "true")
    assets = {"css": page_stylesheet(), "script": page_script()}

    result = load_page_by_path(path)
    if not result.ok:
        body = render_load_error(result.error)
        status = STATUS_BY_KIND.get(result.kind, 500)
        return render_template("page.html", title="Page unavailable", body=body, **assets), status

    page = result.value
    return render_template(
        "page.html",
        title=page.title,
        body=render_page(page, editable=editable),
        **assets,
    )
