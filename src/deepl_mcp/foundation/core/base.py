"""Base class for tools exposed by the server.

A tool declares its metadata, a pydantic model for its arguments and a static
JSON input schema advertised to clients. Calling the tool validates the raw
argument mapping and runs `_arun` with the typed parameters.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Mapping
from typing import Any, ClassVar, Generic, TypeVar

from pydantic import BaseModel

from .models import ToolDescriptor, ToolMetadata, ToolResponse

TParams = TypeVar("TParams", bound=BaseModel)


class BaseTool(ABC, Generic[TParams]):
    """Abstract base class for all tools.

    Subclasses must:
    - Define `metadata` class variable with ToolMetadata
    - Define `params_schema` class variable with the Pydantic model type
    - Define `input_schema` class variable with the advertised JSON schema
    - Implement `_arun(params)` returning a ToolResponse

    Validation errors and upstream failures are raised, not returned; the
    registry turns them into error responses.

    Example:
        >>> class EchoParams(BaseModel):
        ...     text: str
        ...
        >>> class EchoTool(BaseTool[EchoParams]):
        ...     metadata = ToolMetadata(name="echo", description="Echo text back")
        ...     params_schema = EchoParams
        ...     input_schema = {"type": "object", "properties": {"text": {"type": "string"}}}
        ...
        ...     async def _arun(self, params: EchoParams) -> ToolResponse:
        ...         return ToolResponse.ok(TextContent(text=params.text))
    """

    metadata: ClassVar[ToolMetadata]
    params_schema: ClassVar[type[BaseModel]]
    input_schema: ClassVar[dict[str, Any]]

    @property
    def name(self) -> str:
        return self.metadata.name

    def descriptor(self) -> ToolDescriptor:
        """Discovery entry for this tool."""
        return ToolDescriptor(
            name=self.metadata.name,
            description=self.metadata.description,
            input_schema=self.input_schema,
        )

    def validate(self, arguments: Mapping[str, object] | None) -> TParams:
        """Validate raw arguments. Missing arguments are an empty mapping.

        Raises:
            pydantic.ValidationError: arguments do not match `params_schema`
        """
        return self.params_schema.model_validate({} if arguments is None else arguments)  # type: ignore[return-value]

    async def __call__(self, arguments: Mapping[str, object] | None) -> ToolResponse:
        return await self._arun(self.validate(arguments))

    @abstractmethod
    async def _arun(self, params: TParams) -> ToolResponse:
        """Execute the tool with validated parameters."""
        ...
