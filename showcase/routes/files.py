"""File download route. Static files under /public are served by the app itself."""

import logging
from pathlib import Path

from quart import Blueprint, current_app

from showcase.routes.common.response import TextResponse

logger = logging.getLogger(__name__)

files_bp = Blueprint("files", __name__)


@files_bp.route("/download", methods=["GET"])
async def download():
    """Send the sample file as an attachment."""
    filename = current_app.config["SAMPLE_FILE_NAME"]
    path = Path(current_app.config["SAMPLE_DIR"]) / filename
    logger.debug(f"Sending {path} as attachment")
    return await TextResponse.attachment(path, filename)
