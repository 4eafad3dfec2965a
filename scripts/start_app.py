#!/usr/bin/env python3
"""Start the board API with Logfire error tracking for startup errors."""

import sys
import logfire
import uvicorn

from board.config import Settings
from board.util.logging import setup_logging
from board.util.observability import configure_logfire


def main() -> int:
    """Start the application and log any startup errors to Logfire."""
    settings = Settings()

    # Configure early so import-time failures of the app are reported
    configure_logfire(settings)
    setup_logging(settings)

    try:
        logfire.info(
            "Starting board API",
            host=settings.host,
            port=settings.port,
            git_sha=settings.git_sha,
        )

        uvicorn.run(
            "board.interface.api.app:app",
            host=settings.host,
            port=settings.port,
            log_level="debug" if settings.debug else "info",
        )

        return 0

    except Exception as e:
        logfire.error(
            "Application startup failed",
            error=str(e),
            error_type=type(e).__name__,
            _exc_info=sys.exc_info(),
        )
        raise


if __name__ == "__main__":
    sys.exit(main())
