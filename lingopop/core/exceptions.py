"""
Custom exceptions for the LingoPop backend.
Covers the generative-backend failure taxonomy and local collaborator errors.
"""

from typing import Optional, Dict, Any
from enum import Enum


class ErrorCode(str, Enum):
    """Standardized error codes for the application."""

    # Generative backend errors
    EMPTY_RESPONSE = "EMPTY_RESPONSE"
    BACKEND_ERROR = "BACKEND_ERROR"
    RESPONSE_PARSE_FAILED = "RESPONSE_PARSE_FAILED"

    # Local collaborators
    CONFIG_STORE_FAILED = "CONFIG_STORE_FAILED"

    # Generic errors
    VALIDATION_ERROR = "VALIDATION_ERROR"
    NOT_FOUND = "NOT_FOUND"
    INTERNAL_SERVER_ERROR = "INTERNAL_SERVER_ERROR"


class LingoPopException(Exception):
    """Base exception for the LingoPop backend."""

    def __init__(
        self,
        message: str,
        error_code: ErrorCode,
        details: Optional[Dict[str, Any]] = None,
        status_code: int = 500
    ):
        super().__init__(message)
        self.message = message
        self.error_code = error_code
        self.details = details or {}
        self.status_code = status_code


class EmptyResponseError(LingoPopException):
    """Raised when the backend returned no text where text was required."""

    def __init__(self, operation: str, model: Optional[str] = None):
        details = {"operation": operation}
        if model:
            details["model"] = model
        super().__init__(
            message="Empty response from Gemini",
            error_code=ErrorCode.EMPTY_RESPONSE,
            details=details,
            status_code=502
        )


class BackendError(LingoPopException):
    """Raised when the generative service call fails; keeps the original message."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(
            message=message or "Generative backend request failed",
            error_code=ErrorCode.BACKEND_ERROR,
            details=details,
            status_code=502
        )


class ResponseParseError(LingoPopException):
    """Raised when the backend text is not valid JSON or has the wrong shape."""

    def __init__(self, message: str = "Backend response could not be parsed", details: Optional[Dict[str, Any]] = None):
        super().__init__(
            message=message,
            error_code=ErrorCode.RESPONSE_PARSE_FAILED,
            details=details,
            status_code=502
        )


class ConfigStoreError(LingoPopException):
    """Raised when the app state cannot be written."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(
            message=message,
            error_code=ErrorCode.CONFIG_STORE_FAILED,
            details=details,
            status_code=500
        )


class InvalidInputError(LingoPopException):
    """Raised when user input cannot be sent to the backend."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(
            message=message,
            error_code=ErrorCode.VALIDATION_ERROR,
            details=details,
            status_code=400
        )
