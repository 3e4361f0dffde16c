import logging
import os
from flask import Flask, send_file, current_app
from .config import config_by_name
from .extensions import db, migrate
from .api.v1 import v1_bp
from .cli import seed_component_types_command
from .errors import register_error_handlers
from flask_swagger_ui import get_swaggerui_blueprint


def create_app(config_name: str = "development") -> Flask:
    app = Flask(__name__)
    app.config.from_object(config_by_name[config_name])
    app.logger.setLevel(getattr(logging, app.config["LOG_LEVEL"].upper(), logging.INFO))

    # -------------------------------------------------
    # Extensions
    # -------------------------------------------------
    db.init_app(app)
    migrate.init_app(app, db)

    # Register models with the metadata
    from . import models  # noqa: F401

    # -------------------------------------------------
    # CLI
    # -------------------------------------------------
    app.cli.add_command(seed_component_types_command)

    # -------------------------------------------------
    # API Blueprints
    # -------------------------------------------------
    app.register_blueprint(v1_bp, url_prefix="/api/v1")
    register_error_handlers(app)

    # -------------------------------------------------
    # Serve OpenAPI YAML
    # -------------------------------------------------
    @app.route("/openapi/pages.yaml", methods=["GET"], endpoint="openapi_pages")
    def serve_openapi():
        spec_path = os.path.join(
            current_app.root_path,
            "api",
            "v1",
            "pages_openapi.yaml",
        )

        if not os.path.exists(spec_path):
            raise FileNotFoundError("pages_openapi.yaml not found")

        return send_file(
            spec_path,
            mimetype="application/yaml",
            as_attachment=False,
        )

    # -------------------------------------------------
    # Swagger UI
    # -------------------------------------------------
    SWAGGER_URL = "/swagger"
    API_URL = "/openapi/pages.yaml"

    swaggerui_blueprint = get_swaggerui_blueprint(
        SWAGGER_URL,
        API_URL,
        config={
            "app_name": "School Pages API",
            "deepLinking": True,
        },
    )

    app.register_blueprint(swaggerui_blueprint, url_prefix=SWAGGER_URL)

    return app
