"""
Process entry point - runs the API under uvicorn and fails fast.

Any asynchronous failure that reaches the event loop's exception handler
(including a failed startup connectivity check) stops the server and exits
the process with status 1. There is no restart.
"""

import asyncio
import logging
import sys
from typing import Any

import uvicorn

from src.api.main import app
from src.config.settings import get_settings

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s - %(message)s"


def setup_logging(level: str = "INFO") -> None:
    """Configure the root logger with a single human-readable handler."""
    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    logging.root.addHandler(handler)
    logging.root.setLevel(getattr(logging, level.upper(), logging.INFO))


class FailFast:
    """Event loop exception handler that shuts the server down."""

    def __init__(self, server: uvicorn.Server) -> None:
        self.server = server
        self.failed = False

    def __call__(self, loop: asyncio.AbstractEventLoop, context: dict[str, Any]) -> None:
        exc = context.get("exception")
        logger.critical(f"Unhandled asynchronous failure: {context.get('message')}", exc_info=exc)
        self.failed = True
        self.server.should_exit = True


async def serve(server: uvicorn.Server) -> int:
    """
    Run the server until it exits.

    Returns:
        Process exit status: 0 after a clean shutdown, 1 after a failure
    """
    fail_fast = FailFast(server)
    asyncio.get_running_loop().set_exception_handler(fail_fast)

    await server.serve()

    if fail_fast.failed or not server.started:
        return 1
    return 0


def main() -> None:
    """Start the inscriptions API."""
    settings = get_settings()
    setup_logging(settings.log_level)

    config = uvicorn.Config(app, host=settings.host, port=settings.port, log_config=None)
    server = uvicorn.Server(config)

    logger.info(f"Listening on http://{settings.host}:{settings.port}")
    sys.exit(asyncio.run(serve(server)))


if __name__ == "__main__":
    main()
