"""Standardized error handling for tool calls.

Every failure raised while serving a tool call ends up here: protocol errors,
argument validation failures, upstream HTTP failures and unexpected faults are
classified into a small set of JSON-RPC error codes and rendered as an error
`ToolResponse` the caller can read.
"""

from __future__ import annotations

from enum import IntEnum
from typing import Self

import orjson
from pydantic import BaseModel, ConfigDict, ValidationError

from deepl_mcp.foundation.core.models import TextContent, ToolResponse

from .types import JsonValue


class ErrorCode(IntEnum):
    """JSON-RPC error codes surfaced in `ToolResponse.errorCode`.

    Values match the MCP SDK so clients can pattern-match on them.
    """
    INVALID_REQUEST = -32600
    METHOD_NOT_FOUND = -32601
    INVALID_PARAMS = -32602
    INTERNAL_ERROR = -32603


def classify_status(status: int | None) -> ErrorCode:
    """Map an upstream HTTP status to an error code.

    400 is a bad argument, the rest of 4xx (auth, quota, not found) is a bad
    request, everything else including a missing status is internal.
    """
    match status:
        case 400:
            return ErrorCode.INVALID_PARAMS
        case int() if 401 <= status < 500:
            return ErrorCode.INVALID_REQUEST
        case _:
            return ErrorCode.INTERNAL_ERROR


class ToolError(BaseModel):
    """Structured error for a failed tool call.

    Example:
        >>> error = ToolError.create(ErrorCode.METHOD_NOT_FOUND, "Tool 'x' not found.")
        >>> error.render()
        "Error: Tool 'x' not found."
    """

    model_config = ConfigDict(frozen=True)

    code: ErrorCode
    message: str
    details: JsonValue | None = None

    @classmethod
    def create(cls, code: ErrorCode, message: str, *, details: JsonValue | None = None) -> Self:
        """Factory method for construction."""
        return cls(code=code, message=message, details=details)

    def render(self) -> str:
        """Format error text: message line plus compact JSON details when present."""
        text = f"Error: {self.message}"
        if self.details is not None:
            text += f"\nDetails: {orjson.dumps(self.details, default=str).decode()}"
        return text

    __str__ = render

    def to_response(self) -> ToolResponse:
        return ToolResponse(
            content=[TextContent(text=self.render())],
            is_error=True,
            error_code=int(self.code),
        )


class ToolException(Exception):
    """Exception wrapping a ToolError for raising."""

    __slots__ = ("error",)

    def __init__(self, error: ToolError) -> None:
        self.error = error
        super().__init__(error.message)

    @classmethod
    def create(cls, code: ErrorCode, message: str, *, details: JsonValue | None = None) -> Self:
        """Create tool exception."""
        return cls(ToolError.create(code, message, details=details))


class UpstreamError(Exception):
    """Failed call to the DeepL API.

    Carries what the normalizer needs without tying it to an HTTP client:
    the status code (None when no response arrived), the decoded body and the
    transport's own message.
    """

    __slots__ = ("status", "body", "transport_message")

    def __init__(self, status: int | None, body: JsonValue | None, transport_message: str) -> None:
        self.status = status
        self.body = body
        self.transport_message = transport_message
        super().__init__(transport_message)

    @property
    def message(self) -> str:
        """Upstream-provided message, falling back to the transport message."""
        if isinstance(self.body, dict) and (msg := self.body.get("message")):
            return str(msg)
        return self.transport_message

    def to_error(self) -> ToolError:
        status = self.status if self.status is not None else "no response"
        return ToolError.create(
            classify_status(self.status),
            f"DeepL API Error ({status}): {self.message}",
            details=self.body,
        )


def format_validation_error(exc: ValidationError) -> list[JsonValue]:
    """Per-field issues as plain JSON values (documentation URLs dropped)."""
    return orjson.loads(exc.json(include_url=False))


def to_tool_error(exc: BaseException) -> ToolError:
    """Classify any exception raised during a tool call.

    Order matters: protocol errors pass through, then argument validation,
    then upstream failures, then everything else.
    """
    match exc:
        case ToolException():
            return exc.error
        case ValidationError():
            return ToolError.create(
                ErrorCode.INVALID_PARAMS, "Input validation failed", details=format_validation_error(exc)
            )
        case UpstreamError():
            return exc.to_error()
        case _:
            return ToolError.create(ErrorCode.INTERNAL_ERROR, f"An unexpected error occurred: {exc}")


def normalize_error(exc: BaseException) -> ToolResponse:
    """Convert an exception into an error `ToolResponse` (isError=True)."""
    return to_tool_error(exc).to_response()
