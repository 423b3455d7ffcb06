#!/usr/bin/env python3
"""
Entry point script to run the Quart Showcase server.

This script should be run from the project root directory:
    python run.py

Environment variables:
    APP_HOST: Host to bind to (default: localhost)
    APP_PORT: Port to bind to (default: 3000)
    APP_PREFORK: Spawn worker processes sharing the socket (default: true)
    APP_WORKERS: Worker count in prefork mode, 0 = CPU count (default: 0)
    APP_IDLE_TIMEOUT / APP_READ_TIMEOUT / APP_WRITE_TIMEOUT: seconds (default: 5)
    APP_DEBUG: Enable debug logging and the access log (default: false)
"""
import sys

if __name__ == "__main__":
    from showcase.server import main

    sys.exit(main())
