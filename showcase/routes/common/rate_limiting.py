"""
Rate limiting utilities for route handlers.

Uploads write to disk, so POST /upload is limited per client.
"""

from quart import request


async def upload_rate_limit_key() -> str:
    """
    Key uploads by the client address.

    Every upload from the same address counts against one budget of
    UPLOAD_RATE_LIMIT requests per minute; clients without an address
    share the "unknown" budget.

    Returns:
        str: Client IP address or "unknown" if not available

    Example:
        >>> @rate_limit(UPLOAD_RATE_LIMIT, timedelta(minutes=1), key_function=upload_rate_limit_key)
        >>> async def upload():
        >>>     pass
    """
    return request.remote_addr or "unknown"
