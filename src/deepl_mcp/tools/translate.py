"""translate_text - translate one or more strings with DeepL."""

from __future__ import annotations

from typing import Annotated, Any, ClassVar

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter, ValidationError, field_validator

from deepl_mcp.foundation.core import BaseTool, TextContent, ToolMetadata, ToolResponse
from deepl_mcp.foundation.errors import ErrorCode, ToolException

from .client import DeepLClient


class TranslateTextParams(BaseModel):
    """Arguments for translate_text.

    Attributes:
        text: Strings to translate, at least one
        target_lang: Target language code (e.g., DE, FR)
        source_lang: Source language code; DeepL auto-detects when absent
    """

    model_config = ConfigDict(strict=True, extra="forbid", frozen=True)

    text: Annotated[list[str], Field(min_length=1, description="Text(s) to translate")]
    target_lang: str = Field(..., description="Target language code (e.g., DE, FR)")
    source_lang: str | None = Field(default=None, description="Source language code; auto-detected if omitted")

    @field_validator("source_lang", mode="before")
    @classmethod
    def _reject_null(cls, v: object) -> object:
        # Absent means auto-detect; an explicit null is a mistyped value.
        if v is None:
            raise ValueError("source_lang must be a string when provided")
        return v


class TranslationResult(BaseModel):
    """One translated string, in input order. Extra DeepL fields are kept."""

    model_config = ConfigDict(strict=True, extra="allow", frozen=True)

    detected_source_language: str
    text: str


class _TranslateResponse(BaseModel):
    model_config = ConfigDict(strict=True, extra="allow")

    translations: list[TranslationResult]


_response_adapter: TypeAdapter[_TranslateResponse] = TypeAdapter(_TranslateResponse)


class TranslateTextTool(BaseTool[TranslateTextParams]):
    """Translate strings via POST /v2/translate.

    Returns a single JSON content block holding the `translations` array,
    one entry per input string in the same order.
    """

    metadata: ClassVar[ToolMetadata] = ToolMetadata(
        name="translate_text",
        description="Translates one or more text strings using the DeepL API.",
    )
    params_schema: ClassVar[type[TranslateTextParams]] = TranslateTextParams
    input_schema: ClassVar[dict[str, Any]] = {
        "type": "object",
        "properties": {
            "text": {
                "type": "array",
                "items": {"type": "string"},
                "description": "Text(s) to translate",
            },
            "target_lang": {
                "type": "string",
                "description": "Target language code (e.g., DE, FR)",
            },
            "source_lang": {
                "type": "string",
                "description": "Source language code; auto-detected if omitted",
            },
        },
        "required": ["text", "target_lang"],
    }

    __slots__ = ("_client",)

    def __init__(self, client: DeepLClient) -> None:
        self._client = client

    async def _arun(self, params: TranslateTextParams) -> ToolResponse:
        data = await self._client.translate(params.text, params.target_lang, params.source_lang)
        try:
            parsed = _response_adapter.validate_python(data)
        except ValidationError as e:
            raise ToolException.create(
                ErrorCode.INTERNAL_ERROR, f"Unexpected DeepL API response: {e.error_count()} validation error(s)",
                details=data,
            ) from e
        return ToolResponse.ok(TextContent.from_json_value([t.model_dump() for t in parsed.translations]))
