"""AI endpoints: entry analysis, coaching chat, and memory graph ingestion."""

from fastapi import APIRouter

from journalup.api.deps import MemoryDep, NarrativeDep
from journalup.api.v1.auth import CurrentUserDep
from journalup.core.errors import AppError, ErrorCode
from journalup.schemas.ai import (
    AnalyzeRequest,
    ChatRequest,
    ChatResponse,
    EntryAnalysis,
    GraphRequest,
    GraphResponse,
)
from journalup.services.entry_analysis import analyze_entry_content

router = APIRouter()


@router.post("/analyze", response_model=EntryAnalysis)
def analyze(body: AnalyzeRequest, _user: CurrentUserDep) -> EntryAnalysis:
    """Sentiment and growth indicators for a piece of journal text."""
    return analyze_entry_content(body.content)


@router.post("/chat", response_model=ChatResponse)
async def chat(body: ChatRequest, _user: CurrentUserDep, narrative: NarrativeDep) -> ChatResponse:
    """One coaching reply from the LLM. No retries; failures return 500 AI_SERVICE_ERROR."""
    if narrative is None:
        raise AppError(500, ErrorCode.AI_SERVICE_ERROR, "AI service is not configured")
    message = await narrative.chat(body.message, body.context)
    return ChatResponse(message=message)


@router.post("/graph", response_model=GraphResponse)
async def add_to_graph(body: GraphRequest, user: CurrentUserDep, memory: MemoryDep) -> GraphResponse:
    """Add a JSON document to the caller's memory graph."""
    if memory is None:
        raise AppError(500, ErrorCode.AI_SERVICE_ERROR, "Memory graph is not configured")
    await memory.add(str(user.id), body.data)
    return GraphResponse(success=True, message="Data successfully added to graph")
