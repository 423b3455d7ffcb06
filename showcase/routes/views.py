"""Template rendering route."""

from quart import Blueprint, render_template

views_bp = Blueprint("views", __name__)


@views_bp.route("/view", methods=["GET"])
async def view():
    """Render index.html with a fixed title, header and content."""
    return await render_template(
        "index.html",
        title="Hello Title",
        header="Hello Header",
        content="Hello Content",
    )
