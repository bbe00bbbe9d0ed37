# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from flask import Flask
from flask_cors import CORS

from sessionauth.container import Container
from sessionauth.shared.config import AppConfig, load_config
from sessionauth.shared.logging import logger, setup_logging
from sessionauth.shared.middleware.error_handler import configure_error_handling
from sessionauth.shared.middleware.request_logger import configure_request_logging
from sessionauth.shared.middleware.security_headers import configure_security_headers


def create_app(config: AppConfig | None = None, container: Container | None = None) -> Flask:
    config = config or load_config()
    container = container or Container(config)
    setup_logging(config.log_level, config.log_file)

    app = Flask(__name__)
    app.config.update(SECRET_KEY=config.jwt_secret)
    app.extensions["sessionauth.container"] = container

    configure_error_handling(app, debug_mode=config.debug_logging)
    configure_request_logging(app, debug_mode=config.debug_logging)
    configure_security_headers(app, enable_hsts=config.security.enable_hsts)

    cors_kwargs: dict[str, object] = {
        "origins": config.security.allowed_origins,
        "methods": ["GET", "POST", "OPTIONS"],
        "allow_headers": ["Content-Type", "Authorization"],
    }
    if any(o != "*" for o in config.security.allowed_origins):
        cors_kwargs["supports_credentials"] = True
    CORS(app, **cors_kwargs)

    app.register_blueprint(container.pages_controller.as_blueprint())
    app.register_blueprint(container.auth_controller.as_blueprint())
    app.register_blueprint(container.misc_controller.as_blueprint())

    logger.info(
        f"Flask app initialized env={config.app_env} store={config.storage.users_path}"
    )
    return app


def main() -> None:
    config = load_config()
    app = create_app(config)
    logger.info(f"Server listening on http://{config.host}:{config.port}")
    app.run(host=config.host, port=config.port, debug=False)


if __name__ == "__main__":
    main()
