# schoolpages/api/v1/components.py
from flask import request, jsonify
from schoolpages.application.pages import (
    add_page_component,
    delete_page_component,
    load_component_types,
    reorder_components,
    update_page_component,
)
from schoolpages.errors import error_response, result_error
from schoolpages.models.component_type import ComponentType
from schoolpages.normalizers.component import normalize_component
from schoolpages.normalizers.component_type import normalize_component_type
from schoolpages.utils.order import next_position
from . import v1_bp


# ------------------------
# Component types
# ------------------------

@v1_bp.route("/component-types", methods=["GET"])
def list_component_types():
    result = load_component_types()
    if not result.ok:
        return result_error(result)

    return jsonify({"items": [normalize_component_type(t) for t in result.value]})


# ------------------------
# Components
# ------------------------

@v1_bp.route("/pages/<page_id>/components", methods=["POST"])
def add_component(page_id):
    data = request.get_json(silent=True) or {}

    component_type_id = data.get("component_type_id")
    if not component_type_id and data.get("type"):
        # Convenience for authoring tools that only know the type name
        component_type = ComponentType.query.filter_by(name=data["type"]).first()
        if not component_type:
            return error_response("invalid_request", f"Unknown component type '{data['type']}'")
        component_type_id = component_type.id

    if not component_type_id:
        return error_response("invalid_request", "Component type is required")

    config = data.get("config", {})
    if not isinstance(config, dict):
        return error_response("invalid_request", "Config must be an object")

    position = data.get("position")
    if position is None:
        position = next_position(page_id)
    elif isinstance(position, bool) or not isinstance(position, int):
        return error_response("invalid_request", "Position must be an integer")

    result = add_page_component(page_id, component_type_id, position, config)
    if not result.ok:
        return result_error(result)

    return jsonify(normalize_component(result.value, include_type=True)), 201


@v1_bp.route("/pages/<page_id>/components/reorder", methods=["POST"])
def reorder_page_components(page_id):
    data = request.get_json(silent=True) or {}
    component_ids = data.get("component_ids")

    if not isinstance(component_ids, list) or not all(isinstance(i, str) for i in component_ids):
        return error_response("invalid_request", "component_ids must be a list of ids")

    result = reorder_components(page_id, component_ids)
    if not result.ok:
        return result_error(result)

    return jsonify({"message": "Components reordered", **result.value}), 200


@v1_bp.route("/components/<component_id>", methods=["PATCH"])
def update_component(component_id):
    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        return error_response("invalid_request", "Invalid payload")

    if "config" in data and not isinstance(data["config"], dict):
        return error_response("invalid_request", "Config must be an object")

    position = data.get("position")
    if "position" in data and (isinstance(position, bool) or not isinstance(position, int)):
        return error_response("invalid_request", "Position must be an integer")

    result = update_page_component(component_id, data)
    if not result.ok:
        return result_error(result)

    return jsonify(normalize_component(result.value, include_type=True)), 200


@v1_bp.route("/components/<component_id>", methods=["DELETE"])
def delete_component(component_id):
    result = delete_page_component(component_id)
    if not result.ok:
        return result_error(result)

    return jsonify({"message": "Component deleted successfully"}), 200
