"""Pydantic request/response schemas."""

from journalup.schemas.ai import (
    AnalyzeRequest,
    ChatRequest,
    ChatResponse,
    EntryAnalysis,
    GraphRequest,
    GraphResponse,
    GrowthIndicator,
    SentimentAnalysis,
)
from journalup.schemas.auth import (
    AuthResponse,
    CurrentUser,
    LoginRequest,
    SignupRequest,
    SuccessResponse,
    UserOut,
)
from journalup.schemas.errors import ErrorBody, ErrorResponse
from journalup.schemas.health import HealthResponse
from journalup.schemas.journals import EntryCreate, EntryOut, JournalCreate, JournalOut
from journalup.schemas.metrics import (
    METRIC_TYPES,
    DateRange,
    GrowthArea,
    MetricCreate,
    MetricOut,
    MetricTrend,
    MetricType,
    ProgressAnalysis,
)
from journalup.schemas.settings import SettingsOut, SettingsUpdate
from journalup.schemas.user_info import UserInfoCreate, UserInfoOut, UserInfoUpdate

__all__ = [
    "AnalyzeRequest",
    "AuthResponse",
    "ChatRequest",
    "ChatResponse",
    "CurrentUser",
    "DateRange",
    "EntryAnalysis",
    "EntryCreate",
    "EntryOut",
    "ErrorBody",
    "ErrorResponse",
    "GraphRequest",
    "GraphResponse",
    "GrowthArea",
    "GrowthIndicator",
    "HealthResponse",
    "JournalCreate",
    "JournalOut",
    "LoginRequest",
    "METRIC_TYPES",
    "MetricCreate",
    "MetricOut",
    "MetricTrend",
    "MetricType",
    "ProgressAnalysis",
    "SentimentAnalysis",
    "SettingsOut",
    "SettingsUpdate",
    "SignupRequest",
    "SuccessResponse",
    "UserInfoCreate",
    "UserInfoOut",
    "UserInfoUpdate",
    "UserOut",
]
