"""
Quart showcase application.

create_app() builds the demonstration app; the module-level app instance is
what Hypercorn workers import via "showcase.app:app".
"""

import logging
from typing import Any, Dict, Optional

from quart import Quart
from quart_rate_limiter import RateLimiter
from quart_schema import QuartSchema

from common.config import config
from common.config.logging_setup import configure_logging
from common.middleware import register_request_logging
from showcase.process import process_role
from showcase.routes import (
    ROUTE_GROUPS,
    basics_bp,
    create_group_blueprint,
    files_bp,
    forms_bp,
    users_bp,
    views_bp,
)
from showcase.routes.common.error_handlers import register_error_handlers

configure_logging(config.LOG_LEVEL, config.APP_LOG_FILE)

logger = logging.getLogger(__name__)

STATIC_URL_PATH = "/public"


def create_app(test_config: Optional[Dict[str, Any]] = None) -> Quart:
    """
    Create and configure the showcase application.

    Args:
        test_config: Config values applied on top of the environment
            defaults, e.g. {"TESTING": True, "UPLOAD_DIR": tmp_path}

    Returns:
        Configured Quart application
    """
    app = Quart(
        __name__,
        static_folder=str(config.SAMPLE_DIR),
        static_url_path=STATIC_URL_PATH,
    )

    app.config.update(
        UPLOAD_DIR=config.UPLOAD_DIR,
        SAMPLE_DIR=config.SAMPLE_DIR,
        SAMPLE_FILE_NAME=config.SAMPLE_FILE_NAME,
        # RESPONSE_TIMEOUT bounds sending the response, BODY_TIMEOUT reading the body
        RESPONSE_TIMEOUT=config.APP_WRITE_TIMEOUT,
        BODY_TIMEOUT=config.APP_READ_TIMEOUT,
    )
    if test_config:
        app.config.update(test_config)

    RateLimiter(app)

    QuartSchema(
        app,
        info={"title": "Quart Showcase", "version": "1.0.0"},
        tags=[
            {"name": "Basics", "description": "Query, header, cookie and path access"},
            {"name": "Forms", "description": "Form values and file uploads"},
            {"name": "Users", "description": "JSON and form body binding"},
        ],
    )

    register_request_logging(app)
    register_error_handlers(app)

    app.register_blueprint(basics_bp)
    app.register_blueprint(forms_bp)
    app.register_blueprint(users_bp)
    app.register_blueprint(files_bp)
    app.register_blueprint(views_bp)
    for group in ROUTE_GROUPS:
        app.register_blueprint(create_group_blueprint(group))

    @app.before_serving
    async def announce_process_role() -> None:
        logger.info(f"This is {process_role()} process")

    return app


app = create_app()
