"""Tests for the registry: catalog, dispatch and the error boundary."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, ClassVar

import httpx
import pytest
from pydantic import BaseModel

from deepl_mcp.foundation.core import BaseTool, TextContent, ToolMetadata, ToolResponse
from deepl_mcp.foundation.errors import ErrorCode
from deepl_mcp.foundation.registry import ToolRegistry
from deepl_mcp.tools import DeepLClient, TranslateTextTool, create_registry

if TYPE_CHECKING:
    from conftest import StubDeepL

    from deepl_mcp.foundation.config import DeepLSettings


class EmptyParams(BaseModel):
    pass


class ExplodingTool(BaseTool[EmptyParams]):
    """Tool whose body fails with an unexpected local fault."""

    metadata = ToolMetadata(name="explode", description="Always raises a local fault")
    params_schema = EmptyParams
    input_schema: ClassVar[dict[str, Any]] = {"type": "object", "properties": {}}

    async def _arun(self, params: EmptyParams) -> ToolResponse:
        raise KeyError("missing")


class EchoTool(BaseTool[EmptyParams]):
    metadata = ToolMetadata(name="echo", description="Returns a fixed text block")
    params_schema = EmptyParams
    input_schema: ClassVar[dict[str, Any]] = {"type": "object", "properties": {}}

    async def _arun(self, params: EmptyParams) -> ToolResponse:
        return ToolResponse.ok(TextContent(text="ok"))


# ─────────────────────────────────────────────────────────────────────────────
# Catalog
# ─────────────────────────────────────────────────────────────────────────────


def test_list_tools_fixed_order(registry: ToolRegistry) -> None:
    tools = registry.list_tools()
    assert [t.name for t in tools] == ["translate_text", "list_languages"]


def test_list_tools_schemas(registry: ToolRegistry) -> None:
    translate, languages = registry.list_tools()

    assert translate.description == "Translates one or more text strings using the DeepL API."
    assert translate.input_schema["required"] == ["text", "target_lang"]
    assert translate.input_schema["properties"]["text"]["items"] == {"type": "string"}
    assert set(translate.input_schema["properties"]) == {"text", "target_lang", "source_lang"}

    assert languages.description == "Retrieves the list of languages supported by the DeepL API."
    assert languages.input_schema["required"] == []
    assert languages.input_schema["properties"]["type"]["enum"] == ["source", "target"]


def test_descriptor_wire_form(registry: ToolRegistry) -> None:
    dumped = registry.list_tools()[1].model_dump(by_alias=True)
    assert set(dumped) == {"name", "description", "inputSchema"}


def test_list_tools_is_stable(registry: ToolRegistry) -> None:
    assert registry.list_tools() == registry.list_tools()


def test_register_duplicate_rejected(client: DeepLClient) -> None:
    registry = create_registry(client)
    with pytest.raises(ValueError, match="already registered"):
        registry.register(TranslateTextTool(client))


def test_registry_container_protocol(registry: ToolRegistry) -> None:
    assert len(registry) == 2
    assert "translate_text" in registry
    assert registry.get("nope") is None
    assert registry["list_languages"].name == "list_languages"
    assert registry.unregister("list_languages")
    assert not registry.unregister("list_languages")
    assert [t.name for t in registry] == ["translate_text"]


# ─────────────────────────────────────────────────────────────────────────────
# Dispatch errors
# ─────────────────────────────────────────────────────────────────────────────


@pytest.mark.asyncio
async def test_unknown_tool_is_method_not_found(registry: ToolRegistry, upstream: StubDeepL) -> None:
    response = await registry.call_tool("translate_everything", {"text": ["Hi"], "target_lang": "DE"})

    assert response.is_error
    assert response.error_code == ErrorCode.METHOD_NOT_FOUND
    assert response.content[0].text == "Error: Tool 'translate_everything' not found."
    assert upstream.requests == []


@pytest.mark.parametrize(
    ("status", "expected"),
    [
        (400, ErrorCode.INVALID_PARAMS),
        (403, ErrorCode.INVALID_REQUEST),
        (456, ErrorCode.INVALID_REQUEST),
        (500, ErrorCode.INTERNAL_ERROR),
    ],
)
@pytest.mark.asyncio
async def test_upstream_status_mapping(
    registry: ToolRegistry, upstream: StubDeepL, status: int, expected: ErrorCode
) -> None:
    upstream.respond("POST", "/v2/translate", status=status, json_body={"message": "upstream says no"})

    response = await registry.call_tool("translate_text", {"text": ["Hi"], "target_lang": "DE"})

    assert response.is_error
    assert response.error_code == expected
    assert response.content[0].text == (
        f'Error: DeepL API Error ({status}): upstream says no\nDetails: {{"message":"upstream says no"}}'
    )
    assert len(upstream.requests) == 1


@pytest.mark.asyncio
async def test_upstream_error_without_body_message(registry: ToolRegistry, upstream: StubDeepL) -> None:
    upstream.route("GET", "/v2/languages", lambda _req: httpx.Response(503))

    response = await registry.call_tool("list_languages", {})

    assert response.error_code == ErrorCode.INTERNAL_ERROR
    text = response.content[0].text
    assert text.startswith("Error: DeepL API Error (503): ")
    assert "503" in text.split(": ", 2)[2]
    assert "Details" not in text


@pytest.mark.asyncio
async def test_network_failure_is_internal_error(settings: DeepLSettings) -> None:
    def refuse(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("connection refused", request=request)

    registry = create_registry(DeepLClient(settings, transport=httpx.MockTransport(refuse)))

    response = await registry.call_tool("list_languages", {"type": "target"})

    assert response.error_code == ErrorCode.INTERNAL_ERROR
    assert response.content[0].text == "Error: DeepL API Error (no response): connection refused"


@pytest.mark.asyncio
async def test_unexpected_fault_is_internal_error() -> None:
    registry = ToolRegistry()
    registry.register(ExplodingTool())

    response = await registry.call_tool("explode", {})

    assert response.is_error
    assert response.error_code == ErrorCode.INTERNAL_ERROR
    assert response.content[0].text == "Error: An unexpected error occurred: 'missing'"


@pytest.mark.asyncio
async def test_success_response_has_no_error_fields() -> None:
    registry = ToolRegistry()
    registry.register(EchoTool())

    response = await registry.call_tool("echo")

    assert response.to_wire() == {"content": [{"type": "text", "text": "ok"}], "isError": False}
