"""Tests for the MCP adapter: model conversion and request handlers."""

from __future__ import annotations

import os
from typing import TYPE_CHECKING

import pytest
from mcp import types

from deepl_mcp.ext.mcp import MCPServer, StdinLines, to_mcp_result, to_mcp_tool
from deepl_mcp.foundation.core import TextContent, ToolResponse
from deepl_mcp.foundation.errors import ErrorCode, ToolError

if TYPE_CHECKING:
    from conftest import StubDeepL

    from deepl_mcp.foundation.registry import ToolRegistry


def test_to_mcp_tool(registry: ToolRegistry) -> None:
    tool = to_mcp_tool(registry.list_tools()[0])
    assert tool.name == "translate_text"
    assert tool.inputSchema["required"] == ["text", "target_lang"]


def test_to_mcp_result_success_keeps_mime_type() -> None:
    result = to_mcp_result(ToolResponse.ok(TextContent.from_json_value([{"a": 1}])))
    dumped = result.model_dump(by_alias=True, exclude_none=True)

    assert result.isError is False
    assert dumped["content"][0]["type"] == "text"
    assert dumped["content"][0]["mimeType"] == "application/json"
    assert "errorCode" not in dumped


def test_to_mcp_result_error_keeps_code() -> None:
    response = ToolError.create(ErrorCode.INVALID_REQUEST, "DeepL API Error (403): Forbidden").to_response()
    result = to_mcp_result(response)
    dumped = result.model_dump(by_alias=True, exclude_none=True)

    assert result.isError is True
    assert dumped["errorCode"] == -32600
    assert dumped["content"][0]["text"] == "Error: DeepL API Error (403): Forbidden"


@pytest.mark.asyncio
async def test_list_tools_handler(registry: ToolRegistry) -> None:
    server = MCPServer("deepl-mcp-server", registry, version="0.1.0")
    handler = server.server.request_handlers[types.ListToolsRequest]

    result = await handler(types.ListToolsRequest(method="tools/list"))

    assert [t.name for t in result.root.tools] == ["translate_text", "list_languages"]


@pytest.mark.asyncio
async def test_call_tool_handler_unknown_tool(registry: ToolRegistry, upstream: StubDeepL) -> None:
    server = MCPServer("deepl-mcp-server", registry, version="0.1.0")
    handler = server.server.request_handlers[types.CallToolRequest]

    result = await handler(types.CallToolRequest(
        method="tools/call",
        params=types.CallToolRequestParams(name="nope", arguments={}),
    ))

    assert result.root.isError is True
    assert result.root.model_dump(by_alias=True)["errorCode"] == ErrorCode.METHOD_NOT_FOUND
    assert upstream.requests == []


@pytest.mark.asyncio
async def test_call_tool_handler_skips_schema_validation(registry: ToolRegistry, upstream: StubDeepL) -> None:
    server = MCPServer("deepl-mcp-server", registry, version="0.1.0")
    handler = server.server.request_handlers[types.CallToolRequest]

    result = await handler(types.CallToolRequest(
        method="tools/call",
        params=types.CallToolRequestParams(name="translate_text", arguments={"text": []}),
    ))

    # Argument errors come from the registry, with its errorCode and details
    assert result.root.isError is True
    assert result.root.model_dump(by_alias=True)["errorCode"] == ErrorCode.INVALID_PARAMS
    assert result.root.content[0].text.startswith("Error: Input validation failed")
    assert upstream.requests == []


@pytest.mark.asyncio
async def test_stdin_lines_splits_chunks_and_stops_at_eof() -> None:
    read_fd, write_fd = os.pipe()
    os.write(write_fd, b'{"id": 1}\n\n{"id"')
    os.write(write_fd, ': 2}\n{"id": 3}'.encode())
    os.close(write_fd)

    try:
        lines = [line async for line in StdinLines(read_fd)]
    finally:
        os.close(read_fd)

    assert lines == ['{"id": 1}', '{"id": 2}', '{"id": 3}']
