"""Tests for MCP server wiring."""

from __future__ import annotations

import mcp.types as types
import pytest

from core.config import Settings
from core.providers.image.fal import FalQueueClient
from features.image.server import build_tool_handler, create_server
from features.image.service import ImageGenerationService
from features.image.tools import ImageToolHandler
from tests.helpers.fakes import FakeJobClient, FakeStorage, provider_result


def test_build_tool_handler_wires_settings(tmp_path):
    settings = Settings(
        fal_api_key="secret",
        images_output_dir=str(tmp_path),
        fal_queue_base_url="https://queue.example",
        poll_interval_seconds=0.5,
        request_timeout_seconds=10.0,
        download_timeout_seconds=20.0,
    )

    handler = build_tool_handler(settings)

    service = handler._service
    assert isinstance(service._client, FalQueueClient)
    assert service._client.api_key == "secret"
    assert service._client.base_url == "https://queue.example"
    assert service._client.poll_interval == 0.5
    assert service._storage.output_dir == (tmp_path / "fal_ai").resolve()
    assert not service._storage.output_dir.exists()


@pytest.mark.asyncio
async def test_server_lists_and_calls_the_tool():
    handler = ImageToolHandler(
        ImageGenerationService(FakeJobClient(result=provider_result(1)), FakeStorage())
    )
    server = create_server(handler)

    listed = await server.request_handlers[types.ListToolsRequest](
        types.ListToolsRequest(method="tools/list")
    )
    assert [tool.name for tool in listed.root.tools] == ["generate-image"]

    called = await server.request_handlers[types.CallToolRequest](
        types.CallToolRequest(
            method="tools/call",
            params=types.CallToolRequestParams(name="generate-image", arguments={"prompt": ""}),
        )
    )
    assert called.root.isError is True
    assert "Example:" in called.root.content[0].text
