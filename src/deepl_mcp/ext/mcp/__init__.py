"""MCP (Model Context Protocol) integration."""

from .server import MCPServer, StdinLines, to_mcp_result, to_mcp_tool

__all__ = ["MCPServer", "StdinLines", "to_mcp_result", "to_mcp_tool"]
