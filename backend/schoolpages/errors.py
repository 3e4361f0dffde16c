from flask import jsonify
from schoolpages.domain.exceptions import DomainError

STATUS_BY_KIND = {
    "not_found": 404,
    "persistence_failure": 400,
    "partial_reorder_failure": 409,
    "configuration_error": 400,
    "unsupported_component": 400,
    "invalid_component_config": 400,
}


def error_response(kind, message, status=None, **extra):
    response = jsonify({
        "error": kind,
        "message": message,
        **extra
    })
    response.status_code = status or STATUS_BY_KIND.get(kind, 400)
    return response


def result_error(result):
    """JSON error response for a failed Result."""
    return error_response(result.kind, result.error, **result.details)


def register_error_handlers(app):
    @app.errorhandler(DomainError)
    def handle_domain_error(error):
        return error_response(error.kind, str(error))