"""Async client for the DeepL REST API.

One `httpx.AsyncClient` per process, bound to the DeepL base URL with the
Authorization header set once. Each method issues exactly one request; there
are no retries. Any failure is raised as `UpstreamError` so error
classification never depends on httpx.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

import httpx

from deepl_mcp.foundation.errors import UpstreamError
from deepl_mcp.runtime.observability import get_logger

if TYPE_CHECKING:
    from deepl_mcp.foundation.config import DeepLSettings

log = get_logger("deepl_mcp.client")


def _decode_body(response: httpx.Response) -> Any:
    """JSON body if it parses, raw text otherwise, None when empty."""
    if not response.content:
        return None
    try:
        return response.json()
    except ValueError:
        return response.text


class DeepLClient:
    """Thin wrapper over httpx for the two DeepL endpoints in use.

    Example:
        >>> client = DeepLClient(settings)
        >>> data = await client.translate(["Hello"], "DE")
        >>> await client.aclose()
    """

    __slots__ = ("_client",)

    def __init__(self, settings: DeepLSettings, *, transport: httpx.AsyncBaseTransport | None = None) -> None:
        options: dict[str, Any] = {}
        if settings.timeout is not None:
            options["timeout"] = settings.timeout
        self._client = httpx.AsyncClient(
            base_url=settings.base_url,
            headers={
                "Authorization": settings.authorization.get_secret_value(),
                "Content-Type": "application/json",
                "User-Agent": f"{settings.server_name}/{settings.server_version}",
            },
            transport=transport,
            **options,
        )

    async def aclose(self) -> None:
        await self._client.aclose()

    async def __aenter__(self) -> DeepLClient:
        return self

    async def __aexit__(self, *_: object) -> None:
        await self.aclose()

    # ─────────────────────────────────────────────────────────────────
    # Endpoints
    # ─────────────────────────────────────────────────────────────────

    async def translate(self, text: list[str], target_lang: str, source_lang: str | None = None) -> Any:
        """POST /v2/translate. `source_lang` is omitted from the body when not given."""
        body: dict[str, Any] = {"text": text, "target_lang": target_lang}
        if source_lang:
            body["source_lang"] = source_lang
        return await self._request("POST", "/v2/translate", json=body)

    async def languages(self, type: str | None = None) -> Any:  # noqa: A002 - DeepL parameter name
        """GET /v2/languages. `type` is sent as a query parameter only when given."""
        params = {"type": type} if type else None
        return await self._request("GET", "/v2/languages", params=params)

    async def _request(self, method: str, path: str, **kwargs: Any) -> Any:
        try:
            response = await self._client.request(method, path, **kwargs)
            response.raise_for_status()
        except httpx.HTTPStatusError as e:
            log.warning("upstream error", method=method, path=path, status=e.response.status_code)
            raise UpstreamError(e.response.status_code, _decode_body(e.response), str(e).splitlines()[0]) from e
        except httpx.HTTPError as e:
            log.warning("upstream request failed", method=method, path=path, error=type(e).__name__)
            raise UpstreamError(None, None, str(e) or type(e).__name__) from e
        log.debug("upstream response", method=method, path=path, status=response.status_code)
        return _decode_body(response)
