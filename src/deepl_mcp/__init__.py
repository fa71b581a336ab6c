"""deepl-mcp - DeepL translation tools over the Model Context Protocol.

Exposes two DeepL API operations as MCP tools served over stdio:

- ``translate_text``: translate one or more strings
- ``list_languages``: list supported source or target languages

Each call validates its arguments, makes exactly one request to DeepL and
returns a JSON content block. Every failure comes back as an error response
(``isError`` with a JSON-RPC ``errorCode``), never as a raised exception.

Quick Start:
    $ export DEEPL_API_KEY=...
    $ deepl-mcp-server

Programmatic use:
    >>> from deepl_mcp import DeepLClient, DeepLSettings, create_registry
    >>> client = DeepLClient(DeepLSettings(api_key="..."))
    >>> registry = create_registry(client)
    >>> response = await registry.call_tool("translate_text", {"text": ["Hello"], "target_lang": "DE"})
"""

from __future__ import annotations

__version__ = "0.1.0"

from .foundation.config import DeepLSettings, get_settings
from .foundation.core import BaseTool, TextContent, ToolDescriptor, ToolMetadata, ToolResponse
from .foundation.errors import ErrorCode, ToolError, ToolException, UpstreamError, classify_status, normalize_error
from .foundation.registry import ToolRegistry
from .tools import DeepLClient, ListLanguagesTool, TranslateTextTool, create_registry

__all__ = [
    "__version__",
    # Config
    "DeepLSettings", "get_settings",
    # Core
    "BaseTool", "TextContent", "ToolDescriptor", "ToolMetadata", "ToolResponse",
    # Errors
    "ErrorCode", "ToolError", "ToolException", "UpstreamError", "classify_status", "normalize_error",
    # Registry & tools
    "ToolRegistry", "DeepLClient", "TranslateTextTool", "ListLanguagesTool", "create_registry",
]
