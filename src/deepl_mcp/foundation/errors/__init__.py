"""Unified error handling for tool calls.

- ErrorCode: JSON-RPC error codes surfaced to callers
- ToolError/ToolException: Structured errors and exceptions
- UpstreamError: Failed DeepL API call, independent of the HTTP client
- classify_status/normalize_error: Status decision table and error normalizer
"""

from .errors import (
    ErrorCode,
    ToolError,
    ToolException,
    UpstreamError,
    classify_status,
    format_validation_error,
    normalize_error,
    to_tool_error,
)
from .types import JsonDict, JsonPrimitive, JsonValue

__all__ = [
    # Core errors
    "ErrorCode", "ToolError", "ToolException", "UpstreamError",
    # Classification
    "classify_status", "format_validation_error", "normalize_error", "to_tool_error",
    # JSON aliases
    "JsonDict", "JsonPrimitive", "JsonValue",
]
