"""
Body binding utilities for route handlers.

Decodes the request body into a Pydantic model, picking the decoder from the
request Content-Type the same way for every route.
"""

import logging
from functools import wraps
from typing import Type, TypeVar

from pydantic import BaseModel
from quart import request

logger = logging.getLogger(__name__)

T = TypeVar("T", bound=BaseModel)

JSON_MIMETYPE = "application/json"
FORM_MIMETYPES = ("application/x-www-form-urlencoded", "multipart/form-data")


class UnsupportedContentTypeError(ValueError):
    """The request body has a Content-Type no model can be bound from."""


async def parse_body(model: Type[T]) -> T:
    """
    Bind the current request body to a Pydantic model.

    Supported content types:
    - application/json: the raw body is decoded as JSON
    - application/x-www-form-urlencoded, multipart/form-data: form fields

    Args:
        model: Pydantic model class to bind to

    Returns:
        Validated model instance

    Raises:
        UnsupportedContentTypeError: If the Content-Type is not supported
        ValidationError: If the body is malformed or a field has the wrong type
    """
    mimetype = request.mimetype

    if mimetype == JSON_MIMETYPE:
        body = await request.get_data()
        return model.model_validate_json(body)

    if mimetype in FORM_MIMETYPES:
        form = await request.form
        return model.model_validate(form.to_dict())

    logger.warning(f"Cannot bind {model.__name__} from content type {mimetype!r}")
    raise UnsupportedContentTypeError(f"Unsupported content type {mimetype or 'none'!r}")


def bind_body(model: Type[T]):
    """
    Decorator to bind the request body to a Pydantic model.

    The bound model is available via request.validated_data. Binding errors
    propagate to the application error handlers.

    Args:
        model: Pydantic model class for binding

    Example:
        >>> @bind_body(RegisterRequest)
        >>> async def register():
        >>>     data: RegisterRequest = request.validated_data
        >>>     return TextResponse.send(f"Register Success {data.username}")
    """

    def decorator(func):
        @wraps(func)
        async def wrapper(*args, **kwargs):
            request.validated_data = await parse_body(model)
            return await func(*args, **kwargs)

        return wrapper

    return decorator
