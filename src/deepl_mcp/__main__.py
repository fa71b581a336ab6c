"""Entry point: `python -m deepl_mcp` or the `deepl-mcp-server` script.

Startup order: settings (DEEPL_API_KEY is required, exit 1 without it),
logging, HTTP client, registry, stdio transport. SIGINT closes the transport
and the HTTP client and exits 0.
"""

from __future__ import annotations

import asyncio
import contextlib
import signal
import sys

from pydantic import ValidationError

from deepl_mcp.ext.mcp import MCPServer
from deepl_mcp.foundation.config import API_KEY_ENV, DeepLSettings, get_settings
from deepl_mcp.runtime.observability import configure_logging, get_logger
from deepl_mcp.tools import DeepLClient, create_registry

log = get_logger("deepl_mcp")


async def serve(settings: DeepLSettings) -> None:
    """Build the server from settings and serve over stdio until EOF or SIGINT."""
    loop = asyncio.get_running_loop()
    interrupted = asyncio.Event()
    # Unix only; elsewhere SIGINT surfaces as KeyboardInterrupt in main()
    with contextlib.suppress(NotImplementedError):
        loop.add_signal_handler(signal.SIGINT, interrupted.set)

    async with DeepLClient(settings) as client:
        server = MCPServer(settings.server_name, create_registry(client), version=settings.server_version)
        serving = asyncio.create_task(server.serve_stdio())
        waiting = asyncio.create_task(interrupted.wait())
        try:
            await asyncio.wait({serving, waiting}, return_when=asyncio.FIRST_COMPLETED)
            if interrupted.is_set():
                log.info("Received SIGINT, shutting down server...")
        finally:
            waiting.cancel()
            serving.cancel()
            with contextlib.suppress(NotImplementedError):
                loop.remove_signal_handler(signal.SIGINT)
            with contextlib.suppress(asyncio.CancelledError):
                await serving


def main() -> int:
    try:
        settings = get_settings()
    except ValidationError as e:
        missing = any(err["loc"] == ("api_key",) for err in e.errors())
        log.error(f"{API_KEY_ENV} environment variable is not set." if missing else "Invalid configuration",
                  errors=e.error_count())
        return 1

    configure_logging(format=settings.logging.format, level=settings.logging.level)

    try:
        asyncio.run(serve(settings))
    except KeyboardInterrupt:
        log.info("Received SIGINT, shutting down server...")
    except Exception as e:
        log.exception("Failed to start DeepL MCP Server", error=str(e))
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
