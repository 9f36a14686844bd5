from flask import Flask

from fun4kidz.modules.catalog.routes import bp as catalog_bp
from fun4kidz.modules.interest.routes import bp as interest_bp
from fun4kidz.modules.registration.routes import bp as registration_bp


def register_api_blueprints(app: Flask) -> None:
    app.register_blueprint(catalog_bp, url_prefix="/api")
    app.register_blueprint(registration_bp, url_prefix="/api")
    app.register_blueprint(interest_bp, url_prefix="/api")

    # Root API document
    @app.get("/api")
    def api_index():
        return {
            "name": "Fun4KidZ API",
            "version": "0.1.0",
            "endpoints": {
                "catalog": ["/programs", "/programs/<id>", "/fees", "/states", "/card-types"],
                "registration": [
                    "/registration/quote",
                    "/registration/validate",
                    "/registration/format",
                    "/registrations",
                ],
                "interest": ["/interest"],
            },
        }, 200
