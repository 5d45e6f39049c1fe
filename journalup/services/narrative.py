"""Narrative service: send prompts to the Anthropic Messages API and return plain text."""

import json
import logging
import time
from typing import TYPE_CHECKING, Protocol

import httpx

from journalup.core.config import get_settings
from journalup.core.errors import AppError, ErrorCode
from journalup.services.prompts import COACH_SYSTEM_PROMPT

if TYPE_CHECKING:
    from journalup.core.config import Settings

logger = logging.getLogger(__name__)


class NarrativeServiceError(AppError):
    """Raised when the LLM cannot produce text (unreachable, timeout, bad status or body)."""

    def __init__(self, message: str, cause: Exception | None = None) -> None:
        super().__init__(500, ErrorCode.AI_SERVICE_ERROR, message, cause=cause)


class NarrativeClient(Protocol):
    """Narrow interface over the hosted LLM. One call per method, no retries."""

    async def generate(self, prompt: str) -> str: ...

    async def chat(self, message: str, context: str | None = None) -> str: ...


class AnthropicNarrativeClient:
    """NarrativeClient backed by POST /v1/messages."""

    def __init__(self, settings: "Settings") -> None:
        if settings.ANTHROPIC_API_KEY is None:
            raise ValueError("ANTHROPIC_API_KEY is required for AnthropicNarrativeClient")
        self.settings = settings
        self.url = f"{settings.ANTHROPIC_BASE_URL}/v1/messages"

    async def generate(self, prompt: str) -> str:
        return await self._create_message(prompt, system=None)

    async def chat(self, message: str, context: str | None = None) -> str:
        system = COACH_SYSTEM_PROMPT
        if context:
            system = f"{system}\n\nHere is some context about the user: {context}"
        return await self._create_message(message, system=system)

    async def _create_message(self, content: str, system: str | None) -> str:
        settings = self.settings
        payload: dict[str, object] = {
            "model": settings.ANTHROPIC_MODEL,
            "max_tokens": settings.ANTHROPIC_MAX_TOKENS,
            "messages": [{"role": "user", "content": content}],
        }
        if system:
            payload["system"] = system
        headers = {
            "x-api-key": settings.ANTHROPIC_API_KEY.get_secret_value(),
            "anthropic-version": settings.ANTHROPIC_VERSION,
            "content-type": "application/json",
        }
        timeout = httpx.Timeout(settings.AI_REQUEST_TIMEOUT_SEC)
        start = time.perf_counter()

        try:
            async with httpx.AsyncClient(timeout=timeout) as client:
                response = await client.post(self.url, json=payload, headers=headers)
            elapsed = time.perf_counter() - start
        except httpx.ConnectError as e:
            self._log_failure(start)
            raise NarrativeServiceError("AI service is unreachable.", cause=e) from e
        except httpx.TimeoutException as e:
            self._log_failure(start)
            raise NarrativeServiceError(
                "AI service request timed out. Try increasing AI_REQUEST_TIMEOUT_SEC.",
                cause=e,
            ) from e
        except httpx.HTTPError as e:
            self._log_failure(start)
            raise NarrativeServiceError("AI service request failed.", cause=e) from e

        if response.status_code != 200:
            logger.info(
                "LLM request failed",
                extra={
                    "llm_latency_seconds": elapsed,
                    "model": settings.ANTHROPIC_MODEL,
                    "status_code": response.status_code,
                    "status": "error",
                },
            )
            raise NarrativeServiceError(
                f"AI service returned status {response.status_code}."
            )

        try:
            body = response.json()
        except json.JSONDecodeError as e:
            raise NarrativeServiceError(
                "AI service response body is not valid JSON.",
                cause=e,
            ) from e
        if not isinstance(body, dict):
            raise NarrativeServiceError("AI service response body is not a JSON object.")

        logger.info(
            "LLM request completed",
            extra={
                "llm_latency_seconds": elapsed,
                "model": settings.ANTHROPIC_MODEL,
                "input_tokens": (body.get("usage") or {}).get("input_tokens"),
                "output_tokens": (body.get("usage") or {}).get("output_tokens"),
            },
        )

        blocks = body.get("content")
        if not isinstance(blocks, list):
            raise NarrativeServiceError("AI service response missing 'content' field.")
        text = "".join(
            block.get("text", "")
            for block in blocks
            if isinstance(block, dict) and block.get("type") == "text"
        )
        return text

    def _log_failure(self, start: float) -> None:
        logger.info(
            "LLM request failed",
            extra={
                "llm_latency_seconds": time.perf_counter() - start,
                "model": self.settings.ANTHROPIC_MODEL,
                "status": "error",
            },
        )


def get_narrative_client() -> NarrativeClient | None:
    """Dependency: the configured LLM client, or None when no API key is set."""
    settings = get_settings()
    if not settings.ai_enabled:
        return None
    return AnthropicNarrativeClient(settings)
