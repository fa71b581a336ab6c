"""Value objects exchanged with the caller.

All models are frozen: a response is built once per call and never mutated
after it is returned. Field aliases give the wire names (`isError`,
`mimeType`, `inputSchema`) while Python code uses snake_case.
"""

from __future__ import annotations

from typing import Any, Literal

import orjson
from pydantic import BaseModel, ConfigDict, Field

JSON_MIME_TYPE = "application/json"


class ToolMetadata(BaseModel):
    """Metadata describing a tool.

    Attributes:
        name: Unique identifier (snake_case, e.g., "translate_text")
        description: What the tool does (shown to the client for selection)
    """

    model_config = ConfigDict(frozen=True)

    name: str = Field(..., pattern=r"^[a-z][a-z0-9_]*$")
    description: str = Field(..., min_length=10)


class ToolDescriptor(BaseModel):
    """Entry returned by tool discovery: name, description, input schema."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    name: str
    description: str
    input_schema: dict[str, Any] = Field(alias="inputSchema")


class TextContent(BaseModel):
    """Text content block, optionally tagged with a mime type."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    type: Literal["text"] = "text"
    text: str
    mime_type: str | None = Field(default=None, alias="mimeType")

    @classmethod
    def from_json_value(cls, value: object) -> TextContent:
        """Pretty-printed JSON block (2-space indent) tagged application/json."""
        return cls(text=orjson.dumps(value, option=orjson.OPT_INDENT_2).decode(), mime_type=JSON_MIME_TYPE)


class ToolResponse(BaseModel):
    """Envelope returned for every tool call."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    content: list[TextContent]
    is_error: bool = Field(default=False, alias="isError")
    error_code: int | None = Field(default=None, alias="errorCode")

    @classmethod
    def ok(cls, *blocks: TextContent) -> ToolResponse:
        return cls(content=list(blocks))

    def to_wire(self) -> dict[str, Any]:
        """Wire form: aliases, unset optionals omitted."""
        return self.model_dump(by_alias=True, exclude_none=True)
