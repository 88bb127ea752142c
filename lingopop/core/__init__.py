"""
Core infrastructure for the LingoPop backend: errors, logging, metrics and
dependency wiring.
"""

from .exceptions import (
    ErrorCode,
    LingoPopException,
    EmptyResponseError,
    BackendError,
    ResponseParseError,
    ConfigStoreError,
    InvalidInputError,
)

__all__ = [
    "ErrorCode",
    "LingoPopException",
    "EmptyResponseError",
    "BackendError",
    "ResponseParseError",
    "ConfigStoreError",
    "InvalidInputError",
]
