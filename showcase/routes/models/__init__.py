"""
Request/Response Models for API endpoints.

Provides Pydantic models for body binding and response serialization.
"""

from .user_models import LoginRequest, RegisterRequest, UserResponse

__all__ = [
    "LoginRequest",
    "RegisterRequest",
    "UserResponse",
]
