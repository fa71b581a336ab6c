"""Core tool abstractions: metadata, base class, response models."""

from .base import BaseTool
from .models import JSON_MIME_TYPE, TextContent, ToolDescriptor, ToolMetadata, ToolResponse

__all__ = ["BaseTool", "JSON_MIME_TYPE", "TextContent", "ToolDescriptor", "ToolMetadata", "ToolResponse"]
