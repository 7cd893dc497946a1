# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from flask import Flask, Response
from flask_cors import CORS

from groupfund.infrastructure.container import Container, container
from groupfund.infrastructure.db import init_db
from groupfund.shared.config import load_config
from groupfund.shared.logging import logger, setup_logging
from groupfund.shared.middleware.error_handler import configure_error_handling
from groupfund.shared.middleware.request_logger import configure_request_logging

_config = load_config()


def create_app(app_container: Container | None = None) -> Flask:
    setup_logging("DEBUG" if _config.debug_logging else None)
    init_db()

    app_container = app_container or container

    app = Flask(__name__)
    configure_error_handling(app)
    configure_request_logging(app)

    cors_kwargs: dict[str, object] = {"origins": _config.security.allowed_origins}
    CORS(app, **cors_kwargs)

    app.register_blueprint(app_container.misc_controller.as_blueprint())
    app.register_blueprint(app_container.auth_controller.as_blueprint())
    app.register_blueprint(app_container.groups_controller.as_blueprint())

    @app.after_request
    def _add_security_headers(resp: Response) -> Response:
        resp.headers.setdefault("X-Frame-Options", "DENY")
        resp.headers.setdefault("Referrer-Policy", "no-referrer")
        resp.headers.setdefault("X-Content-Type-Options", "nosniff")
        resp.headers.setdefault("Cache-Control", "no-store")

        if _config.security.enable_hsts:
            resp.headers.setdefault(
                "Strict-Transport-Security",
                "max-age=31536000; includeSubDomains",
            )

        return resp

    logger.info("Flask app initialized")
    return app


if __name__ == "__main__":
    create_app().run(host="0.0.0.0", port=3000, debug=True)
