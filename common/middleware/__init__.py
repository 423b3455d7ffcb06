"""Middleware package for request logging and route groups."""

from common.middleware.group_middleware import apply_group_middleware
from common.middleware.request_logging import register_request_logging

__all__ = ["apply_group_middleware", "register_request_logging"]
