from flask import Flask
from werkzeug.exceptions import HTTPException

from app.extensions import db, migrate, cors
from app.routes import register_routes
from app.utils.enums import TrendsMode
from app.utils.errors import ServiceError
from app.utils.http import error
from app.utils.log import configure_logging
from app import models  # noqa: F401


def register_error_handlers(app):
    @app.errorhandler(ServiceError)
    def handle_service_error(e):
        db.session.rollback()
        return error(e.code, e.message, e.status)

    @app.errorhandler(HTTPException)
    def handle_http_error(e):
        code = (e.name or "HTTP_ERROR").upper().replace(" ", "_")
        return error(code, e.description or e.name, e.code or 500)

    @app.errorhandler(Exception)
    def handle_unexpected_error(e):
        db.session.rollback()
        app.logger.exception("Unhandled error: %s", e)
        return error("INTERNAL_ERROR", "Internal server error", 500)


def create_app(config_object="config.Config"):
    app = Flask(__name__)
    app.config.from_object(config_object)

    configure_logging(app.config.get("LOG_LEVEL", "INFO"))

    # Fail at startup on an unknown trends mode
    app.config["ATTENDANCE_TRENDS_MODE"] = TrendsMode(app.config.get("ATTENDANCE_TRENDS_MODE", TrendsMode.ACTUAL.value))

    # Initialize database; the engine and its pool live for the process
    db.init_app(app)

    # Initialize Flask-Migrate
    migrate.init_app(app, db)

    cors.init_app(app,
                  origins=app.config.get("CORS_ORIGINS", []),
                  supports_credentials=True,
                  allow_headers=["Content-Type", "Authorization"],
                  methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
                  expose_headers=["Content-Type", "Authorization"])

    register_routes(app)
    register_error_handlers(app)

    return app
