"""
Response utilities for the showcase routes.

Provides consistent plain-text, JSON and attachment responses.
"""

from pathlib import Path
from typing import Any, Union

from quart import Response, current_app, send_file

ERROR_PREFIX = "Error : "


class TextResponse:
    """
    Standardized response helper.

    Handlers answer with plain text unless they explicitly ask for JSON or a
    file download.
    """

    @staticmethod
    def send(text: str, status: int = 200) -> Response:
        """
        Create a plain-text response.

        Args:
            text: Response body
            status: HTTP status code (default: 200)

        Returns:
            Response with a text/plain body

        Example:
            >>> return TextResponse.send("Hello World")
        """
        return Response(text, status=status, mimetype="text/plain")

    @staticmethod
    def error(message: str, status: int = 500) -> Response:
        """
        Create an error response in the "Error : <message>" format.

        Args:
            message: Error message
            status: HTTP status code (default: 500)

        Returns:
            Response with a text/plain body

        Example:
            >>> return TextResponse.error("duar")
            >>> return TextResponse.error("Not Found", 404)
        """
        return TextResponse.send(f"{ERROR_PREFIX}{message}", status)

    @staticmethod
    def json(data: Any, status: int = 200) -> Response:
        """
        Create a compact JSON response through the application's JSON provider.

        Keys are sorted and the body carries no trailing newline.
        """
        body = current_app.json.dumps(data, separators=(",", ":"))
        return Response(body, status=status, mimetype="application/json")

    @staticmethod
    async def attachment(path: Union[str, Path], filename: str) -> Response:
        """
        Send a file as a download.

        Args:
            path: Location of the file on disk
            filename: Name the client should save the file as

        Returns:
            File response with a quoted Content-Disposition filename

        Raises:
            FileNotFoundError: If the file does not exist
        """
        path = Path(path)
        if not path.is_file():
            raise FileNotFoundError(f"{path.name} does not exist")

        response = await send_file(path)
        response.headers["Content-Disposition"] = f'attachment; filename="{filename}"'
        return response
