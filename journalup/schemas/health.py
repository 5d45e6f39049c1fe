"""Health payload: liveness plus which backing services Journal Up can reach or use."""

from typing import Literal

from pydantic import Field

from journalup.schemas.base import CamelModel


class HealthResponse(CamelModel):
    status: Literal["ok"] = "ok"
    environment: Literal["dev", "prod"]
    database: Literal["connected", "disconnected"]
    ai_enabled: bool = Field(..., description="An LLM key is configured for analysis and chat")
    memory_enabled: bool = Field(..., description="Journal entries are mirrored to the memory graph")
