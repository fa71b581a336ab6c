"""DeepL tools and the registry factory that wires them to one client.

Example:
    >>> from deepl_mcp.tools import DeepLClient, create_registry
    >>> registry = create_registry(DeepLClient(settings))
    >>> [d.name for d in registry.list_tools()]
    ['translate_text', 'list_languages']
"""

from deepl_mcp.foundation.registry import ToolRegistry

from .client import DeepLClient
from .languages import LanguageDescriptor, ListLanguagesParams, ListLanguagesTool
from .translate import TranslateTextParams, TranslateTextTool, TranslationResult


def create_registry(client: DeepLClient) -> ToolRegistry:
    """Registry with the catalog in its fixed order: translate_text, list_languages."""
    registry = ToolRegistry()
    registry.register(TranslateTextTool(client))
    registry.register(ListLanguagesTool(client))
    return registry


__all__ = [
    "DeepLClient", "create_registry",
    "TranslateTextTool", "TranslateTextParams", "TranslationResult",
    "ListLanguagesTool", "ListLanguagesParams", "LanguageDescriptor",
]
