"""Custom exception hierarchy for markpreview."""

from enum import Enum
from typing import Optional, Dict, Any


class ErrorCode(str, Enum):
    """Standardized error codes for API responses."""

    # Input errors
    VALIDATION_ERROR = "VALIDATION_ERROR"
    INPUT_TOO_LARGE = "INPUT_TOO_LARGE"

    # Rendering errors
    UNSUPPORTED_FORMAT = "UNSUPPORTED_FORMAT"
    RENDERER_UNAVAILABLE = "RENDERER_UNAVAILABLE"
    RENDER_FAILED = "RENDER_FAILED"

    # Generic errors
    INTERNAL_ERROR = "INTERNAL_ERROR"


class MarkupException(Exception):
    """
    Base exception for all markpreview errors.

    Provides structured error responses with:
    - Human-readable message
    - Machine-readable error code
    - HTTP status code
    - Optional additional details
    """

    def __init__(
        self,
        message: str,
        error_code: ErrorCode,
        status_code: int = 500,
        details: Optional[Dict[str, Any]] = None
    ):
        super().__init__(message)
        self.message = message
        self.error_code = error_code
        self.status_code = status_code
        self.details = details or {}

    def to_dict(self) -> Dict[str, Any]:
        """
        Convert exception to dictionary for JSON response.

        Returns:
            Dictionary with error, message, and details fields
        """
        return {
            "error": self.error_code.value,
            "message": self.message,
            "details": self.details
        }


class ValidationError(MarkupException):
    """Validation failed for caller input."""

    def __init__(self, message: str, field: Optional[str] = None):
        details = {"field": field} if field else {}
        super().__init__(
            message,
            ErrorCode.VALIDATION_ERROR,
            status_code=400,
            details=details
        )


class InputTooLargeError(MarkupException):
    """Text or HTML exceeds the configured input limit."""

    def __init__(self, field: str, length: int, limit: int):
        super().__init__(
            f"{field} is {length} characters long, limit is {limit}",
            ErrorCode.INPUT_TOO_LARGE,
            status_code=413,
            details={"field": field, "length": length, "limit": limit}
        )


class UnsupportedFormatError(MarkupException):
    """Content format has neither a renderer nor pre-formatted content."""

    def __init__(self, content_format: str):
        super().__init__(
            f"Unsupported content format: {content_format}",
            ErrorCode.UNSUPPORTED_FORMAT,
            status_code=400,
            details={"format": content_format}
        )


class RendererUnavailableError(MarkupException):
    """The renderer for a known format is not configured."""

    def __init__(self, content_format: str):
        super().__init__(
            f"No renderer configured for format: {content_format}",
            ErrorCode.RENDERER_UNAVAILABLE,
            status_code=501,
            details={"format": content_format}
        )


class RenderError(MarkupException):
    """An external renderer raised while converting text to HTML."""

    def __init__(self, content_format: str, original_error: Optional[Exception] = None):
        details: Dict[str, Any] = {"format": content_format}
        if original_error:
            details["original_error"] = str(original_error)

        super().__init__(
            f"Rendering {content_format} content failed",
            ErrorCode.RENDER_FAILED,
            status_code=500,
            details=details
        )
