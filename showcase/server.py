"""
Server entry point for the showcase application.

Serves the app with Hypercorn using fixed idle/read/write timeouts. With
prefork enabled the parent process binds the listening socket and spawns
worker processes that share it; each worker imports "showcase.app:app".
"""

import asyncio
import logging
import os
from typing import Optional

from hypercorn.asyncio import serve
from hypercorn.config import Config
from hypercorn.run import run

from common.config import config as settings
from common.config.logging_setup import configure_logging

logger = logging.getLogger(__name__)

APPLICATION_PATH = "showcase.app:app"


def resolve_workers(prefork: bool, workers: int) -> int:
    """
    Number of worker processes to spawn.

    Prefork with workers <= 0 means one worker per CPU. Without prefork the
    app is served in the current process and no workers are spawned.
    """
    if not prefork:
        return 0
    if workers > 0:
        return workers
    return os.cpu_count() or 1


def build_server_config(
    host: str = settings.APP_HOST,
    port: int = settings.APP_PORT,
    prefork: bool = settings.APP_PREFORK,
    workers: int = settings.APP_WORKERS,
    idle_timeout: int = settings.APP_IDLE_TIMEOUT,
    read_timeout: int = settings.APP_READ_TIMEOUT,
    debug: bool = settings.APP_DEBUG,
) -> Config:
    """
    Build the Hypercorn configuration.

    The write timeout is not a Hypercorn setting; the app applies it as
    Quart's RESPONSE_TIMEOUT.
    """
    config = Config()
    config.bind = [f"{host}:{port}"]
    config.application_path = APPLICATION_PATH
    config.worker_class = "asyncio"
    config.workers = resolve_workers(prefork, workers)

    config.keep_alive_timeout = idle_timeout
    config.read_timeout = read_timeout
    config.graceful_timeout = idle_timeout

    if debug:
        config.loglevel = "DEBUG"
        config.accesslog = "-"
        config.errorlog = "-"

    return config


def main(config: Optional[Config] = None) -> int:
    """
    Start the server and block until it stops.

    Returns:
        Process exit code
    """
    configure_logging("DEBUG" if settings.APP_DEBUG else settings.LOG_LEVEL, settings.APP_LOG_FILE)
    config = config or build_server_config()

    logger.info(f"Starting Quart Showcase on {', '.join(config.bind)}")
    logger.info(f"  - workers: {config.workers or 'in-process'}")
    logger.info(f"  - keep_alive_timeout: {config.keep_alive_timeout}s")
    logger.info(f"  - read_timeout: {config.read_timeout}s")
    logger.info(f"  - write_timeout: {settings.APP_WRITE_TIMEOUT}s")

    if config.workers > 0:
        logger.info("This is parent process")
        return run(config) or 0

    from showcase.app import app

    asyncio.run(serve(app, config))
    return 0
