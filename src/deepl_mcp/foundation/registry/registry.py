"""Central registry for tool discovery and dispatch.

The registry provides:
- Tool registration and lookup by name
- The static tool catalog advertised to clients
- Dispatch of a named call to its tool, with every failure converted into an
  error ToolResponse at this boundary
"""

from __future__ import annotations

from collections.abc import Iterator, Mapping

from pydantic import BaseModel, ValidationError

from deepl_mcp.foundation.core import BaseTool, ToolDescriptor, ToolResponse
from deepl_mcp.foundation.errors import ErrorCode, ToolException, UpstreamError, normalize_error, to_tool_error
from deepl_mcp.runtime.observability import get_logger, log_context

log = get_logger("deepl_mcp.registry")


class ToolRegistry:
    """Registry of callable tools, in registration order.

    Example:
        >>> registry = ToolRegistry()
        >>> registry.register(TranslateTextTool(client))
        >>> response = await registry.call_tool("translate_text", {"text": ["Hi"], "target_lang": "DE"})
    """

    __slots__ = ("_tools",)

    def __init__(self) -> None:
        self._tools: dict[str, BaseTool[BaseModel]] = {}

    def register(self, tool: BaseTool[BaseModel]) -> None:
        """Register a tool instance. Names are unique."""
        name = tool.metadata.name
        if name in self._tools:
            raise ValueError(f"Tool '{name}' already registered. Use unregister() first.")
        self._tools[name] = tool

    def unregister(self, name: str) -> bool:
        """Remove a tool by name. Returns True if found."""
        return self._tools.pop(name, None) is not None

    def get(self, name: str) -> BaseTool[BaseModel] | None:
        """Get tool by name."""
        return self._tools.get(name)

    def __getitem__(self, name: str) -> BaseTool[BaseModel]:
        return self._tools[name]

    def __contains__(self, name: str) -> bool:
        return name in self._tools

    def __len__(self) -> int:
        return len(self._tools)

    def __iter__(self) -> Iterator[BaseTool[BaseModel]]:
        return iter(self._tools.values())

    # ─────────────────────────────────────────────────────────────────
    # Dispatch
    # ─────────────────────────────────────────────────────────────────

    def list_tools(self) -> list[ToolDescriptor]:
        """Catalog of registered tools with their input schemas."""
        return [tool.descriptor() for tool in self._tools.values()]

    async def call_tool(self, name: str, arguments: Mapping[str, object] | None = None) -> ToolResponse:
        """Invoke a tool by name.

        Never raises: unknown names, invalid arguments, upstream failures and
        unexpected faults all come back as a ToolResponse with isError=True.
        """
        with log_context(tool=name):
            try:
                tool = self._tools.get(name)
                if tool is None:
                    raise ToolException.create(ErrorCode.METHOD_NOT_FOUND, f"Tool '{name}' not found.")
                log.debug("tool call")
                response = await tool(arguments)
            except (ToolException, ValidationError, UpstreamError) as e:
                error = to_tool_error(e)
                log.warning("tool call failed", code=error.code.name, message=error.message)
                return error.to_response()
            except Exception as e:
                log.exception("unexpected error calling tool", error=str(e))
                return normalize_error(e)
            log.debug("tool call completed")
            return response
