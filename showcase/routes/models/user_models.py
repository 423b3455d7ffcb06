"""
Request/Response models for the user routes.

Short-lived per-request payloads bound from JSON or form bodies. Absent
request fields bind as empty strings.
"""

from pydantic import BaseModel, Field


class LoginRequest(BaseModel):
    """
    Request model for login.

    Decoded directly from the raw JSON body.
    """

    username: str = Field(default="", description="Account username", examples=["Eric"])

    password: str = Field(default="", description="Account password")


class RegisterRequest(BaseModel):
    """
    Request model for registration.

    Bound from JSON, urlencoded or multipart bodies.
    """

    username: str = Field(default="", description="Account username", examples=["Eric"])

    password: str = Field(default="", description="Account password")

    name: str = Field(default="", description="Display name", examples=["Eric Kunthady"])


class UserResponse(BaseModel):
    """Response model for the current user."""

    username: str = Field(..., description="Account username")

    name: str = Field(..., description="Display name")
