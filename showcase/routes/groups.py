"""
Grouped routes.

The same handlers are mounted under several path prefixes. Each group gets
its own blueprint so group middleware only runs for that prefix.
"""

from quart import Blueprint

from common.middleware import apply_group_middleware
from showcase.routes.common.response import TextResponse

ROUTE_GROUPS = ("api", "web")


async def hello_world():
    """Greeting shared by every group."""
    return TextResponse.send("Hello World")


def create_group_blueprint(group: str) -> Blueprint:
    """
    Build the blueprint for one route group.

    Registers GET /hello and GET /world under /<group>.
    """
    blueprint = Blueprint(group, __name__, url_prefix=f"/{group}")
    blueprint.add_url_rule("/hello", "hello", hello_world, methods=["GET"])
    blueprint.add_url_rule("/world", "world", hello_world, methods=["GET"])
    return apply_group_middleware(blueprint, group)
