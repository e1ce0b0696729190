"""fal.ai Image MCP Server - Main Entry Point
Exposes a single ``generate-image`` tool over the Model Context Protocol on
stdio. This process is meant to be launched by an MCP client; it is not an
HTTP server or an interactive CLI.

Environment:
    - FAL_KEY - fal.ai API key (server starts without it, calls fail)
    - FAL_IMAGES_OUTPUT_DIR - base directory for saved images (``<dir>/fal_ai``)
    - FAL_MCP_LOG_LEVEL / FAL_MCP_LOG_DIR - logging (always stderr, optional file)
"""

from __future__ import annotations

import asyncio
import logging

from dotenv import load_dotenv

from core.logging import setup_logging
from features.image.server import serve

logger = logging.getLogger(__name__)


def main() -> None:
    """Load configuration, configure logging and serve until stdin closes."""

    load_dotenv()
    setup_logging()
    try:
        asyncio.run(serve())
    except KeyboardInterrupt:  # pragma: no cover - manual execution helper
        logger.info("Server interrupted, shutting down")


if __name__ == "__main__":  # pragma: no cover - manual execution helper
    main()
