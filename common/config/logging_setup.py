"""Root logging configuration shared by the server entry point and the app."""

import logging
import sys
from typing import List, Optional

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def configure_logging(level: str = "INFO", log_file: Optional[str] = None) -> None:
    """
    Configure root logging to stdout and, optionally, a file.

    Safe to call more than once: later calls only adjust the level, so every
    spawned worker process can call it on import without duplicating handlers.

    Args:
        level: Root log level name (e.g. "INFO", "DEBUG")
        log_file: Optional path of a file to append log records to
    """
    root = logging.getLogger()
    if root.handlers:
        root.setLevel(level)
        return

    handlers: List[logging.Handler] = [logging.StreamHandler(sys.stdout)]
    if log_file:
        handlers.append(logging.FileHandler(log_file, mode="a"))

    logging.basicConfig(level=level, format=LOG_FORMAT, handlers=handlers)
