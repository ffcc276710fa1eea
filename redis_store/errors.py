"""
redis-store — Core Error Types

Defines the exception hierarchy for the redis-store package.
All exceptions inherit from StoreError for consistent error handling.
"""

from enum import Enum
from typing import Any


class ErrorCode(str, Enum):
    """Standard error codes attached to structured error details."""

    # Configuration errors
    INVALID_CONFIG = "INVALID_CONFIG"

    # Cache errors
    CACHE_UNAVAILABLE = "CACHE_UNAVAILABLE"
    CACHE_FAILURE = "CACHE_FAILURE"
    TYPE_MISMATCH = "TYPE_MISMATCH"

    # Internal errors
    INTERNAL_ERROR = "INTERNAL_ERROR"


class StoreError(Exception):
    """Base exception for all redis-store errors."""

    def __init__(
        self,
        message: str,
        details: dict[str, Any] | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def to_dict(self) -> dict[str, Any]:
        """Convert exception to a dictionary (for logs and API responses)."""
        return {
            "error": self.__class__.__name__,
            "message": self.message,
            "details": self.details,
        }


class ConfigurationError(StoreError):
    """Raised when configuration is invalid or missing."""


class CacheError(StoreError):
    """Base exception for cache-related errors."""


class CacheConnectionError(CacheError):
    """Raised when the Redis server cannot be reached at construction time."""

    def __init__(self, address: str, details: dict[str, Any] | None = None):
        message = f"Failed to connect to Redis at {address}"
        error_details = dict(details or {})
        error_details.setdefault("address", address)
        error_details.setdefault("error_code", ErrorCode.CACHE_UNAVAILABLE)
        super().__init__(message, error_details)
        self.address = address


class CacheOperationError(CacheError):
    """Raised when a cache operation fails unexpectedly."""

    pass


class TypeMismatchError(CacheError, TypeError):
    """
    Raised by the typed accessors when a value cannot be read as the requested type.

    This is a programming-contract fault: the caller supplied a default of the
    wrong type for what is actually stored, or stored a value of another type.
    """

    def __init__(self, key: str, expected: str, value: Any):
        message = f"Cache value for key '{key}' is not a {expected}: {type(value).__name__}"
        super().__init__(
            message,
            {
                "key": key,
                "expected": expected,
                "actual": type(value).__name__,
                "error_code": ErrorCode.TYPE_MISMATCH,
            },
        )
        self.key = key
        self.expected = expected
        self.value = value


def extract_error_code(error: Exception) -> ErrorCode:
    """
    Extract the appropriate ErrorCode from an exception.

    Args:
        error: Exception to categorize

    Returns:
        Appropriate ErrorCode for the exception
    """
    if isinstance(error, TypeMismatchError):
        return ErrorCode.TYPE_MISMATCH

    if isinstance(error, CacheConnectionError):
        return ErrorCode.CACHE_UNAVAILABLE

    if isinstance(error, CacheError):
        return ErrorCode.CACHE_FAILURE

    if isinstance(error, ConfigurationError):
        return ErrorCode.INVALID_CONFIG

    return ErrorCode.INTERNAL_ERROR
