"""
Basic routes.

Shows how a handler reads the pieces of a request:
- query string values with defaults
- request headers and cookies
- path parameters
"""

import logging

from quart import Blueprint, request

from showcase.routes.common.response import TextResponse

logger = logging.getLogger(__name__)

basics_bp = Blueprint("basics", __name__)


@basics_bp.route("/", methods=["GET"])
async def hello_world():
    """Return a fixed greeting."""
    return TextResponse.send("Hello World")


@basics_bp.route("/hello", methods=["GET"])
async def hello():
    """
    Greet the caller by the name query parameter.

    Query parameters:
        name: Name to greet (default: "Guest")
    """
    name = request.args.get("name", "Guest")
    return TextResponse.send(f"Hello {name}")


@basics_bp.route("/req", methods=["GET"])
async def hello_from_request():
    """
    Greet the caller using a header and a cookie.

    Request headers:
        firstname: First name
    Cookies:
        lastname: Last name
    """
    first = request.headers.get("firstname", "")
    last = request.cookies.get("lastname", "")
    return TextResponse.send(f"Hello {first} {last}")


@basics_bp.route("/users/<user_id>/orders/<order_id>", methods=["GET"])
async def user_order(user_id: str, order_id: str):
    """Describe an order using both path parameters."""
    return TextResponse.send(f"Order {order_id} from {user_id}")


@basics_bp.route("/err", methods=["GET"])
async def fail():
    """Always fail; the application error handler renders the response."""
    raise RuntimeError("duar")
