"""
Booking API entry point.

Serves the repair booking API with uvicorn, or starts the console booking
client for development.

Usage:
    API server:   python main.py
    Console mode: python main.py console
"""

import logging
import sys

from storefront.config import settings

logger = logging.getLogger(__name__)


def _run_server() -> None:
    """Serve the booking API on the configured host and port."""
    import uvicorn

    from storefront.api import create_app

    app = create_app()
    logger.info(
        "Starting %s booking API on %s:%d",
        settings.business.name, settings.server.host, settings.server.port,
    )
    uvicorn.run(app, host=settings.server.host, port=settings.server.port)


def _run_console_mode() -> None:
    """Start the console booking client against the configured API."""
    from console_booking import main as console_main

    sys.argv = [sys.argv[0], *sys.argv[2:]]
    console_main()


if __name__ == "__main__":
    if len(sys.argv) > 1 and sys.argv[1] == "console":
        _run_console_mode()
    else:
        _run_server()
