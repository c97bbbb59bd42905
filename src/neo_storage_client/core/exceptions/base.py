"""Base exception for the storage client.

Client errors are raised before a request leaves the process (validation,
missing session) and are turned into view feedback by the action that hit
them. ``message`` is always safe to show to the user.
"""

from typing import Any, Dict, Optional


class StorageClientError(Exception):
    """Base exception for all storage client errors."""

    def __init__(self, message: str, error_code: Optional[str] = None, details: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.message = message
        self.error_code = error_code or self.__class__.__name__
        self.details = details or {}

    def __str__(self) -> str:
        return self.message


def describe_error(exception: StorageClientError) -> Dict[str, Any]:
    """Structured form of a client error for log lines."""
    return {
        "code": exception.error_code,
        "message": exception.message,
        "details": exception.details,
    }
