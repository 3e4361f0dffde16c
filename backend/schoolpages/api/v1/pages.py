# schoolpages/api/v1/pages.py
from flask import request, jsonify
from schoolpages.application.pages import (
    create_custom_page,
    delete_custom_page,
    load_custom_pages,
    load_page_by_path,
    update_custom_page,
)
from schoolpages.errors import error_response, result_error
from schoolpages.normalizers.page import normalize_page
from . import v1_bp


# ------------------------
# Pages
# ------------------------

@v1_bp.route("/pages", methods=["GET"])
def list_pages():
    result = load_custom_pages(class_id=request.args.get("class_id"))
    if not result.ok:
        return result_error(result)

    return jsonify({"items": [normalize_page(p) for p in result.value]})


@v1_bp.route("/pages", methods=["POST"])
def create_page():
    data = request.get_json(silent=True) or {}

    if not data.get("title") or not data.get("path"):
        return error_response("invalid_request", "Title and path are required")

    config = data.get("config")
    if config is not None and not isinstance(config, dict):
        return error_response("invalid_request", "Config must be an object")

    result = create_custom_page(
        data["title"],
        data["path"],
        config,
        class_id=data.get("class_id"),
    )
    if not result.ok:
        return result_error(result)

    return jsonify(normalize_page(result.value)), 201


@v1_bp.route("/pages/by-path/<path:path>", methods=["GET"])
def get_page_by_path(path):
    result = load_page_by_path(path)
    if not result.ok:
        return result_error(result)

    return jsonify(normalize_page(result.value, include_components=True))


@v1_bp.route("/pages/<page_id>", methods=["PATCH"])
def update_page(page_id):
    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        return error_response("invalid_request", "Invalid payload")

    result = update_custom_page(page_id, data)
    if not result.ok:
        return result_error(result)

    return jsonify(normalize_page(result.value)), 200


@v1_bp.route("/pages/<page_id>", methods=["DELETE"])
def delete_page(page_id):
    result = delete_custom_page(page_id)
    if not result.ok:
        return result_error(result)

    return jsonify({"message": "Page deleted successfully"}), 200
