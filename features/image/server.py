"""MCP server exposing the generate-image tool over stdio."""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional

import mcp.types as types
from mcp.server.lowlevel import Server
from mcp.server.stdio import stdio_server

from config.image.models import describe_supported_models
from core.config import Settings, load_settings
from core.providers.image.fal import FalQueueClient
from features.image.output_paths import resolve_output_dir
from features.image.service import ImageGenerationService
from features.image.storage import LocalImageStorage
from features.image.tools import ImageToolHandler, list_tools

logger = logging.getLogger(__name__)

SERVER_NAME = "image-generator"
SERVER_VERSION = "1.0.0"


def build_tool_handler(settings: Settings) -> ImageToolHandler:
    """Wire the provider client, storage and service for ``settings``."""

    client = FalQueueClient(
        api_key=settings.fal_api_key,
        base_url=settings.fal_queue_base_url,
        timeout=settings.request_timeout_seconds,
        poll_interval=settings.poll_interval_seconds,
    )
    output_dir = resolve_output_dir(settings.images_output_dir)
    storage = LocalImageStorage(output_dir, timeout=settings.download_timeout_seconds)
    logger.info("Generated images will be saved to %s", output_dir)
    return ImageToolHandler(ImageGenerationService(client, storage))


def create_server(handler: ImageToolHandler) -> Server:
    """Create the MCP server and register the tool handlers."""

    server: Server = Server(SERVER_NAME, version=SERVER_VERSION)

    @server.list_tools()
    async def handle_list_tools() -> List[types.Tool]:
        return [types.Tool(**definition) for definition in list_tools()]

    # Argument checking happens in the handler so callers get guided messages.
    @server.call_tool(validate_input=False)
    async def handle_call_tool(name: str, arguments: Optional[Dict[str, Any]]) -> types.CallToolResult:
        response = await handler.handle(name, arguments)
        return types.CallToolResult(
            content=[types.TextContent(type="text", text=block.text) for block in response.content],
            isError=response.is_error,
        )

    return server


async def serve(settings: Optional[Settings] = None) -> None:
    """Run the MCP server on stdin/stdout until the client disconnects."""

    settings = settings or load_settings()
    if not settings.has_fal_credentials:
        logger.warning("Warning: FAL_KEY environment variable is not set. API calls will fail.")

    server = create_server(build_tool_handler(settings))

    async with stdio_server() as (read_stream, write_stream):
        logger.info("Text-to-Image MCP Server running on stdio")
        logger.info("Supported models: %s", describe_supported_models())
        await server.run(read_stream, write_stream, server.create_initialization_options())


__all__ = ["SERVER_NAME", "SERVER_VERSION", "build_tool_handler", "create_server", "serve"]
