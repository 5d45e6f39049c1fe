"""Memory graph client: push JSON documents to a user's Zep knowledge graph."""

import json
import logging
import time
from typing import TYPE_CHECKING, Any

import httpx

from journalup.core.config import get_settings
from journalup.core.errors import AppError, ErrorCode

if TYPE_CHECKING:
    from journalup.core.config import Settings

logger = logging.getLogger(__name__)


class MemoryServiceError(AppError):
    """Raised when the memory graph rejects or cannot receive data."""

    def __init__(self, message: str, cause: Exception | None = None) -> None:
        super().__init__(500, ErrorCode.AI_SERVICE_ERROR, message, cause=cause)


class MemoryGraphClient:
    def __init__(self, settings: "Settings") -> None:
        if settings.ZEP_API_KEY is None:
            raise ValueError("ZEP_API_KEY is required for MemoryGraphClient")
        self.settings = settings
        self.url = f"{settings.ZEP_API_URL}/api/v2/graph"

    async def add(self, user_id: str, data: dict[str, Any]) -> None:
        """Add one JSON document to the user's graph. Raises MemoryServiceError on failure."""
        payload = {"user_id": user_id, "type": "json", "data": json.dumps(data, default=str)}
        headers = {"Authorization": f"Api-Key {self.settings.ZEP_API_KEY.get_secret_value()}"}
        timeout = httpx.Timeout(self.settings.ZEP_REQUEST_TIMEOUT_SEC)
        start = time.perf_counter()
        try:
            async with httpx.AsyncClient(timeout=timeout) as client:
                response = await client.post(self.url, json=payload, headers=headers)
        except httpx.HTTPError as e:
            raise MemoryServiceError("Failed to add data to graph", cause=e) from e

        elapsed = time.perf_counter() - start
        if response.status_code >= 300:
            logger.info(
                "Memory graph request failed",
                extra={"latency_seconds": elapsed, "status_code": response.status_code},
            )
            raise MemoryServiceError(
                f"Memory graph returned status {response.status_code}"
            )
        logger.info("Memory graph document added", extra={"latency_seconds": elapsed})


def get_memory_client() -> MemoryGraphClient | None:
    """Dependency: the configured memory graph client, or None when ZEP_API_KEY is unset."""
    settings = get_settings()
    if not settings.memory_enabled:
        return None
    return MemoryGraphClient(settings)
