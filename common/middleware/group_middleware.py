"""
Route group middleware for Quart blueprints.

Runs around every handler registered on a blueprint, so it applies to the
whole path prefix the blueprint is mounted under.
"""

import logging

from quart import Blueprint, Response, g, request

logger = logging.getLogger(__name__)

ROUTE_GROUP_HEADER = "X-Route-Group"


def apply_group_middleware(blueprint: Blueprint, group: str) -> Blueprint:
    """
    Attach group middleware to a blueprint.

    Before the handler, the group name is stored on g.route_group. After
    it, the response is tagged with an X-Route-Group header.

    Usage:
        api_bp = Blueprint("api", __name__, url_prefix="/api")
        apply_group_middleware(api_bp, "api")
    """

    @blueprint.before_request
    async def enter_group() -> None:
        g.route_group = group
        logger.debug(f"[{group}] {request.method} {request.path}")

    @blueprint.after_request
    async def tag_group(response: Response) -> Response:
        response.headers[ROUTE_GROUP_HEADER] = group
        return response

    return blueprint
