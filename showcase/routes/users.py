"""
User routes.

Demonstrates the two ways of reading a body into a model:
- decoding the raw body by hand (/login)
- content-type driven binding (/register)
and serializing a response as JSON (/user).
"""

import logging

from quart import Blueprint, request

from showcase.routes.common.binding import bind_body
from showcase.routes.common.response import TextResponse
from showcase.routes.models import LoginRequest, RegisterRequest, UserResponse

logger = logging.getLogger(__name__)

users_bp = Blueprint("users", __name__)


@users_bp.route("/login", methods=["POST"])
async def login():
    """
    Log a user in from a raw JSON body.

    Request body:
        {
            "username": "Eric",
            "password": "rahasia"
        }

    Returns:
        200: "Hi <username>"
        500: Malformed JSON
    """
    body = await request.get_data()
    credentials = LoginRequest.model_validate_json(body)
    logger.info(f"Login attempt for {credentials.username}")
    return TextResponse.send(f"Hi {credentials.username}")


@users_bp.route("/register", methods=["POST"])
@bind_body(RegisterRequest)
async def register():
    """
    Register a user from a JSON or form body.

    Request body (JSON, urlencoded or multipart):
        username, password, name

    Returns:
        200: "Register Success <username>"
        500: Malformed body or unsupported content type
    """
    data: RegisterRequest = request.validated_data
    logger.info(f"Registered {data.username} ({data.name})")
    return TextResponse.send(f"Register Success {data.username}")


@users_bp.route("/user", methods=["GET"])
async def current_user():
    """Return the demo user as JSON."""
    user = UserResponse(username="khan", name="Eko Khan")
    return TextResponse.json(user.model_dump())
