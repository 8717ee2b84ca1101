#!/usr/bin/env python3
"""
DayBoard Server.

Runs the REST API with uvicorn.

Environment Variables:
    See dayboard.settings (all prefixed with DAYBOARD_).
"""

from __future__ import annotations

import logging

import uvicorn

from dayboard.api import create_app
from dayboard.settings import get_settings

logger = logging.getLogger(__name__)


# =============================================================================
# Main Entry Point
# =============================================================================


def main() -> None:
    """Main entry point for the DayBoard server."""
    settings = get_settings()

    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
    logger.info("Serving DayBoard on %s:%d", settings.host, settings.port)

    uvicorn.run(
        create_app(settings),
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()
