"""
Request logging middleware.

Logs one line per request and reports the handling time in a header.
"""

import logging
import time

from quart import Quart, Response, g, request

logger = logging.getLogger(__name__)

RESPONSE_TIME_HEADER = "X-Response-Time"


def register_request_logging(app: Quart) -> None:
    """Register the before/after request hooks on the application."""

    @app.before_request
    async def start_timer() -> None:
        g.request_started = time.perf_counter()

    @app.after_request
    async def log_request(response: Response) -> Response:
        started = g.get("request_started")
        if started is None:
            return response

        elapsed_ms = (time.perf_counter() - started) * 1000
        response.headers[RESPONSE_TIME_HEADER] = f"{elapsed_ms:.2f}ms"
        logger.info(
            f"{request.method} {request.path} -> {response.status_code} ({elapsed_ms:.2f}ms)"
        )
        return response
