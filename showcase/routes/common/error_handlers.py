"""
Centralized error handling.

Every error leaving a route handler is turned into a plain-text
"Error : <message>" response by the handlers registered here.
"""

import logging
from typing import List

from pydantic import ValidationError
from quart import Quart
from werkzeug.exceptions import HTTPException

from showcase.routes.common.response import TextResponse

logger = logging.getLogger(__name__)


def describe_validation_error(error: ValidationError) -> str:
    """Flatten pydantic errors into "field -> message" pairs."""
    parts: List[str] = []
    for err in error.errors():
        field = " -> ".join(str(loc) for loc in err["loc"])
        parts.append(f"{field} -> {err['msg']}" if field else err["msg"])
    return "Validation failed: " + "; ".join(parts)


def register_error_handlers(app: Quart) -> None:
    """
    Register centralized error handlers for the application.

    Handles:
    - ValidationError (Pydantic) → 500 Internal Server Error
    - HTTPException (Werkzeug) → the exception's own status; these come
      from the framework itself (unknown route, wrong method, rate limit)
    - Exception (Generic) → 500 Internal Server Error

    Errors raised by route handlers always end up as 500.

    Args:
        app: Quart application instance

    Example:
        >>> from quart import Quart
        >>> app = Quart(__name__)
        >>> register_error_handlers(app)
    """

    @app.errorhandler(ValidationError)
    async def handle_validation_error(error: ValidationError):
        """
        Handle Pydantic validation errors raised while binding a body.

        Returns 500 Internal Server Error.
        """
        message = describe_validation_error(error)
        logger.warning(message)
        return TextResponse.error(message, 500)

    @app.errorhandler(HTTPException)
    async def handle_http_exception(error: HTTPException):
        """
        Handle Werkzeug HTTP exceptions.

        Preserves the original HTTP status code.
        """
        logger.info(f"HTTP exception: {error.code} - {error.description}")
        return TextResponse.error(error.description or error.name, error.code or 500)

    @app.errorhandler(Exception)
    async def handle_generic_exception(error: Exception):
        """
        Handle everything else a route handler raises.

        Returns 500 Internal Server Error and logs the stack trace.
        """
        logger.exception(f"Unhandled exception: {error}")
        return TextResponse.error(str(error), 500)
