"""Client lifespan middleware - releases the shared store client on shutdown."""

import logging
from typing import Any

from restate.infrastructure.appwrite.client import AppwriteClient

logger = logging.getLogger(__name__)


class ClientLifespanMiddleware:
    """Logs the store endpoint on startup and closes the HTTP client on shutdown."""

    def __init__(self, client: AppwriteClient) -> None:
        self._client = client

    async def process_startup(
        self, scope: dict[str, Any], event: dict[str, Any]
    ) -> None:
        logger.info(
            "Using Appwrite at %s (project %s)",
            self._client.endpoint,
            self._client.project_id,
        )

    async def process_shutdown(
        self, scope: dict[str, Any], event: dict[str, Any]
    ) -> None:
        await self._client.aclose()
