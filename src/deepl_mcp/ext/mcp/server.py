"""MCP server adapter for the tool registry.

Binds a ToolRegistry to the low-level server of the `mcp` SDK and serves it
over stdio. The registry already produces the full response envelope
(content, isError, errorCode), so the adapter only converts models: it does
not validate arguments against the advertised schema, and it never raises
from a tool call.

Example:
    >>> from deepl_mcp.ext.mcp import MCPServer
    >>> server = MCPServer("deepl-mcp-server", registry, version="0.1.0")
    >>> await server.serve_stdio()
"""

from __future__ import annotations

import asyncio
import os
import sys
import threading
from typing import TYPE_CHECKING, Any

from mcp import types
from mcp.server.lowlevel import Server
from mcp.server.stdio import stdio_server

from deepl_mcp.runtime.observability import get_logger

if TYPE_CHECKING:
    from collections.abc import AsyncIterator

    from deepl_mcp.foundation.core import ToolDescriptor, ToolResponse
    from deepl_mcp.foundation.registry import ToolRegistry

log = get_logger("deepl_mcp.server")

_READ_CHUNK = 65536


def to_mcp_tool(descriptor: ToolDescriptor) -> types.Tool:
    """Convert a catalog entry to an MCP Tool."""
    return types.Tool(
        name=descriptor.name,
        description=descriptor.description,
        inputSchema=descriptor.input_schema,
    )


def to_mcp_result(response: ToolResponse) -> types.CallToolResult:
    """Convert a ToolResponse to an MCP CallToolResult.

    `mimeType` on content blocks and `errorCode` on the result are carried
    as extra fields.
    """
    return types.CallToolResult.model_validate(response.to_wire())


class StdinLines:
    """Async iterator over the lines of a file descriptor, read on a daemon thread.

    The SDK's default stdin reader blocks in a non-daemon worker thread, so a
    pending read holds the process open after the server is cancelled. Here a
    pending read is simply dropped at exit. Reads go straight to the fd so no
    buffered-IO lock is held while blocked.
    """

    __slots__ = ("_fd",)

    def __init__(self, fd: int | None = None) -> None:
        self._fd = sys.stdin.fileno() if fd is None else fd

    def __aiter__(self) -> AsyncIterator[str]:
        return self._lines()

    async def _lines(self) -> AsyncIterator[str]:
        loop = asyncio.get_running_loop()
        queue: asyncio.Queue[str | None] = asyncio.Queue()
        threading.Thread(target=self._pump, args=(loop, queue), name="stdin-reader", daemon=True).start()
        while (line := await queue.get()) is not None:
            yield line

    def _pump(self, loop: asyncio.AbstractEventLoop, queue: asyncio.Queue[str | None]) -> None:
        pending = b""
        try:
            try:
                while chunk := os.read(self._fd, _READ_CHUNK):
                    *lines, pending = (pending + chunk).split(b"\n")
                    for raw in lines:
                        if raw.strip():
                            loop.call_soon_threadsafe(queue.put_nowait, raw.decode("utf-8", errors="replace"))
            except OSError as e:
                log.warning("stdin read failed", error=str(e))
            if pending.strip():
                loop.call_soon_threadsafe(queue.put_nowait, pending.decode("utf-8", errors="replace"))
            loop.call_soon_threadsafe(queue.put_nowait, None)
        except RuntimeError:
            # Event loop already closed; nobody is left to read.
            return


class MCPServer:
    """Low-level MCP server exposing a registry's tools.

    Handles `tools/list` and `tools/call`; everything else (initialization,
    ping, framing) is handled by the SDK.
    """

    __slots__ = ("_name", "_registry", "_server")

    def __init__(self, name: str, registry: ToolRegistry, *, version: str | None = None) -> None:
        self._name = name
        self._registry = registry
        self._server = self._create_server(version)

    @property
    def name(self) -> str:
        return self._name

    @property
    def registry(self) -> ToolRegistry:
        return self._registry

    @property
    def server(self) -> Server[Any, Any]:
        """Access underlying low-level server."""
        return self._server

    def _create_server(self, version: str | None) -> Server[Any, Any]:
        server: Server[Any, Any] = Server(self._name, version=version)

        @server.list_tools()
        async def list_tools() -> list[types.Tool]:
            return [to_mcp_tool(d) for d in self._registry.list_tools()]

        @server.call_tool(validate_input=False)
        async def call_tool(name: str, arguments: dict[str, Any] | None) -> types.CallToolResult:
            return to_mcp_result(await self._registry.call_tool(name, arguments))

        return server

    async def serve_stdio(self, stdin: StdinLines | None = None) -> None:
        """Serve over stdin/stdout until the client disconnects or the task is cancelled."""
        lines = stdin if stdin is not None else StdinLines()
        async with stdio_server(stdin=lines) as (read_stream, write_stream):  # type: ignore[arg-type]
            log.info("DeepL MCP Server started and listening via stdio.", server=self._name)
            await self._server.run(read_stream, write_stream, self._server.create_initialization_options())
