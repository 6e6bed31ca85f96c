"""
Shared error handling for the Bank Auth service.
"""

from typing import Dict, Any, Optional

from fastapi.responses import JSONResponse, PlainTextResponse, Response
from pydantic import BaseModel


class ErrorResponse(BaseModel):
    """Standard error response format."""

    error: str


class AccessLayerException(Exception):
    """Base exception for service errors.

    Subclasses pick an HTTP status and whether the body is the legacy
    plain-text message or the ``{"error": ...}`` JSON envelope.
    """

    status_code: int = 400
    plain_text: bool = False

    def __init__(self, code: str, message: str, details: Optional[Dict[str, Any]] = None):
        self.code = code
        self.message = message
        self.details = details or {}
        super().__init__(message)

    def to_response(self) -> ErrorResponse:
        """Convert to error response."""
        return ErrorResponse(error=self.message)

    def to_http_response(self) -> Response:
        """Render as the HTTP response clients see."""
        if self.plain_text:
            return PlainTextResponse(self.message, status_code=self.status_code)
        return JSONResponse(
            status_code=self.status_code,
            content=self.to_response().model_dump(),
        )


class AuthenticationError(AccessLayerException):
    """Authentication-related errors."""

    status_code = 401
    plain_text = True

    def __init__(self, message: str = "Authentication failed", details: Optional[Dict[str, Any]] = None,
                 code: str = "AUTHENTICATION_ERROR"):
        super().__init__(code, message, details)


class ValidationError(AccessLayerException):
    """Validation-related errors."""

    status_code = 400

    def __init__(self, message: str = "Validation failed", details: Optional[Dict[str, Any]] = None,
                 code: str = "VALIDATION_ERROR"):
        super().__init__(code, message, details)


class ConflictError(AccessLayerException):
    """Request conflicts with existing state."""

    status_code = 409

    def __init__(self, message: str = "Conflict", details: Optional[Dict[str, Any]] = None,
                 code: str = "CONFLICT"):
        super().__init__(code, message, details)


class ExternalServiceError(AccessLayerException):
    """External service errors."""

    status_code = 503

    def __init__(self, service: str, message: str = "External service error",
                 details: Optional[Dict[str, Any]] = None, code: str = "EXTERNAL_SERVICE_ERROR"):
        self.service = service
        super().__init__(code, f"{service}: {message}", details)
