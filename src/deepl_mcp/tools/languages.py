"""list_languages - languages supported by DeepL."""

from __future__ import annotations

from typing import Any, ClassVar, Literal

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter, ValidationError, field_validator

from deepl_mcp.foundation.core import BaseTool, TextContent, ToolMetadata, ToolResponse
from deepl_mcp.foundation.errors import ErrorCode, ToolException

from .client import DeepLClient

LanguageType = Literal["source", "target"]


class ListLanguagesParams(BaseModel):
    """Arguments for list_languages. No filter when `type` is absent."""

    model_config = ConfigDict(strict=True, extra="forbid", frozen=True)

    type: LanguageType | None = Field(default=None, description="Filter by 'source' or 'target' languages")

    @field_validator("type", mode="before")
    @classmethod
    def _reject_null(cls, v: object) -> object:
        if v is None:
            raise ValueError("type must be 'source' or 'target' when provided")
        return v


class LanguageDescriptor(BaseModel):
    """A supported language. DeepL only reports formality support for target languages."""

    model_config = ConfigDict(strict=True, extra="allow", frozen=True)

    language: str
    name: str
    supports_formality: bool | None = None


_languages_adapter: TypeAdapter[list[LanguageDescriptor]] = TypeAdapter(list[LanguageDescriptor])


class ListLanguagesTool(BaseTool[ListLanguagesParams]):
    """List languages via GET /v2/languages, in the order DeepL returns them."""

    metadata: ClassVar[ToolMetadata] = ToolMetadata(
        name="list_languages",
        description="Retrieves the list of languages supported by the DeepL API.",
    )
    params_schema: ClassVar[type[ListLanguagesParams]] = ListLanguagesParams
    input_schema: ClassVar[dict[str, Any]] = {
        "type": "object",
        "properties": {
            "type": {
                "type": "string",
                "enum": ["source", "target"],
                "description": "Filter by 'source' or 'target' languages",
            },
        },
        "required": [],
    }

    __slots__ = ("_client",)

    def __init__(self, client: DeepLClient) -> None:
        self._client = client

    async def _arun(self, params: ListLanguagesParams) -> ToolResponse:
        data = await self._client.languages(params.type)
        try:
            languages = _languages_adapter.validate_python(data)
        except ValidationError as e:
            raise ToolException.create(
                ErrorCode.INTERNAL_ERROR, f"Unexpected DeepL API response: {e.error_count()} validation error(s)",
                details=data,
            ) from e
        return ToolResponse.ok(
            TextContent.from_json_value([lang.model_dump(exclude_unset=True) for lang in languages])
        )
