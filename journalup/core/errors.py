"""Typed application errors. Each carries the HTTP status and a machine-readable code."""

from enum import Enum


class ErrorCode(str, Enum):
    """Closed set of error codes returned as error.code in API responses."""

    VALIDATION_ERROR = "VALIDATION_ERROR"
    AUTHENTICATION_ERROR = "AUTHENTICATION_ERROR"
    AUTHORIZATION_ERROR = "AUTHORIZATION_ERROR"
    NOT_FOUND = "NOT_FOUND"
    CONFLICT = "CONFLICT"
    INTERNAL_ERROR = "INTERNAL_ERROR"
    AI_SERVICE_ERROR = "AI_SERVICE_ERROR"
    METRICS_ERROR = "METRICS_ERROR"
    METRIC_RECORD_ERROR = "METRIC_RECORD_ERROR"
    METRICS_FETCH_ERROR = "METRICS_FETCH_ERROR"


class AppError(Exception):
    """Base error; used directly for unexpected service failures (500)."""

    def __init__(
        self,
        status_code: int = 500,
        code: ErrorCode = ErrorCode.INTERNAL_ERROR,
        message: str = "Internal Server Error",
        cause: Exception | None = None,
    ) -> None:
        self.status_code = status_code
        self.code = code
        self.message = message
        self.cause = cause
        super().__init__(message)


class ValidationError(AppError):
    def __init__(self, message: str) -> None:
        super().__init__(400, ErrorCode.VALIDATION_ERROR, message)


class AuthenticationError(AppError):
    def __init__(self, message: str = "Authentication failed") -> None:
        super().__init__(401, ErrorCode.AUTHENTICATION_ERROR, message)


class AuthorizationError(AppError):
    def __init__(self, message: str = "Not authorized") -> None:
        super().__init__(403, ErrorCode.AUTHORIZATION_ERROR, message)


class NotFoundError(AppError):
    """Raised with the resource name; message reads '<resource> not found'."""

    def __init__(self, resource: str) -> None:
        self.resource = resource
        super().__init__(404, ErrorCode.NOT_FOUND, f"{resource} not found")


class ConflictError(AppError):
    def __init__(self, message: str) -> None:
        super().__init__(409, ErrorCode.CONFLICT, message)
