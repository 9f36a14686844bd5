from __future__ import annotations

import logging
from datetime import date

from flask import Flask, jsonify, render_template, request
from werkzeug.exceptions import HTTPException, InternalServerError

from fun4kidz.app import content
from fun4kidz.app.config import Config
from fun4kidz.app.extensions import cors, init_submitters
from fun4kidz.app.common.errors import ApiError, error_payload
from fun4kidz.app.common.request_context import RequestIdFilter, current_request_id, init_request_id
from fun4kidz.app.api.register import register_api_blueprints
from fun4kidz.app.cli import cli_bp
from fun4kidz.app.ui import ui_bp
from fun4kidz.registration.formatting import format_money


def _configure_logging(level: str) -> None:
    # No-op when the root logger already has handlers (e.g. under pytest).
    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter("%(asctime)s %(levelname)s %(name)s [%(request_id)s]: %(message)s"))
    handler.addFilter(RequestIdFilter())
    logging.basicConfig(level=level, handlers=[handler])


def create_app(config_object: type[Config] = Config) -> Flask:
    app = Flask(__name__, instance_relative_config=True)
    app.config.from_object(config_object)

    _configure_logging(app.config.get("LOG_LEVEL", "INFO"))

    # Extensions
    cors.init_app(app, resources={r"/api/*": {"origins": app.config.get("CORS_ORIGINS") or "*"}})
    init_submitters(app)

    # Request id
    @app.before_request
    def _before_request():
        init_request_id()

    @app.after_request
    def _after_request(response):
        rid = current_request_id()
        if rid:
            response.headers["X-Request-ID"] = rid
        return response

    @app.get("/health")
    def health():
        return {"status": "ok"}, 200

    register_api_blueprints(app)
    app.register_blueprint(ui_bp)
    app.register_blueprint(cli_bp)

    app.add_template_filter(format_money, "money")

    @app.context_processor
    def inject_layout():
        """Header/footer data shared by every page."""
        return {
            "current_year": date.today().year,
            "business_name": content.BUSINESS_NAME,
            "tagline": content.TAGLINE,
            "nav_links": content.NAV_LINKS,
            "contact_info": content.CONTACT_INFO,
            "footer_programs": [p.title for p in content.HOME_PROGRAMS],
        }

    # Error handlers
    @app.errorhandler(ApiError)
    def handle_api_error(err: ApiError):
        return jsonify(err.to_dict(current_request_id())), err.status_code

    @app.errorhandler(HTTPException)
    def handle_http_exception(err: HTTPException):
        if not request.path.startswith("/api"):
            return render_template("pages/error.html", error=err), err.code or 500

        payload = error_payload("http_error", err.description, {"name": err.name}, current_request_id())
        return jsonify(payload), err.code or 500

    @app.errorhandler(Exception)
    def handle_unexpected(err: Exception):
        app.logger.exception("Unhandled exception")
        if not request.path.startswith("/api"):
            return render_template("pages/error.html", error=InternalServerError()), 500

        payload = error_payload("internal_error", "Internal server error", request_id=current_request_id())
        return jsonify(payload), 500

    return app
