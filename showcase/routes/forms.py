"""
Form routes.

Handles urlencoded form values and multipart file uploads. Uploaded files
are written to the UPLOAD_DIR configured on the application.
"""

import logging
from datetime import timedelta
from pathlib import Path

from quart import Blueprint, current_app, request
from quart_rate_limiter import rate_limit
from werkzeug.utils import secure_filename

from common.config.config import UPLOAD_RATE_LIMIT
from showcase.routes.common.rate_limiting import upload_rate_limit_key
from showcase.routes.common.response import TextResponse

logger = logging.getLogger(__name__)

forms_bp = Blueprint("forms", __name__)

MISSING_UPLOAD_MESSAGE = "there is no uploaded file associated with the given key"


class MissingUploadError(LookupError):
    """No file was uploaded under the expected form key."""


@forms_bp.route("/hi", methods=["POST"])
async def hi():
    """
    Greet the name posted in a form.

    Form fields:
        name: Name to greet (missing means empty)
    """
    form = await request.form
    name = form.get("name", "")
    return TextResponse.send(f"Hi {name}")


@forms_bp.route("/upload", methods=["POST"])
@rate_limit(UPLOAD_RATE_LIMIT, timedelta(minutes=1), key_function=upload_rate_limit_key)
async def upload():
    """
    Save a multipart upload.

    Form fields:
        file: The uploaded file; stored under its sanitized filename

    Returns:
        200: "Upload Success"
        429: Upload rate limit exceeded
        500: No file under the "file" key, or an unusable filename
    """
    files = await request.files
    uploaded = files.get("file")
    if uploaded is None:
        raise MissingUploadError(MISSING_UPLOAD_MESSAGE)

    filename = secure_filename(uploaded.filename or "")
    if not filename:
        raise ValueError(f"invalid upload filename {uploaded.filename!r}")

    upload_dir = Path(current_app.config["UPLOAD_DIR"])
    upload_dir.mkdir(parents=True, exist_ok=True)
    destination = upload_dir / filename

    await uploaded.save(destination)
    logger.info(f"Saved upload {filename} to {destination}")

    return TextResponse.send("Upload Success")
