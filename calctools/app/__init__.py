"""Application factory and app-wide configuration."""

from typing import Optional

from flask import Flask, request
from flask_cors import CORS

from calctools.app.api.routes import api_bp
from calctools.config import Settings, get_settings
from calctools.logging_config import configure_logging, get_logger

logger = get_logger(__name__)


def create_app(settings: Optional[Settings] = None) -> Flask:
    """Build the Flask app instance."""
    settings = settings or get_settings()
    configure_logging(settings.LOG_LEVEL, json_logs=settings.LOG_JSON)

    app = Flask(__name__)
    app.config["SETTINGS"] = settings

    CORS(
        app,
        resources={rf"{settings.API_PREFIX}/*": {"origins": settings.CORS_ORIGINS}},
        supports_credentials=True,
    )

    app.register_blueprint(api_bp, url_prefix=settings.API_PREFIX)

    @app.after_request
    def log_request(response):
        logger.info(
            "request handled",
            method=request.method,
            path=request.path,
            status=response.status_code,
        )
        return response

    logger.info("app created", project=settings.PROJECT_NAME, api_prefix=settings.API_PREFIX)
    return app
