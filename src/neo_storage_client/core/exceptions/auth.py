"""Authentication-specific exceptions for the storage client."""

from .base import StorageClientError


class AuthenticationError(StorageClientError):
    """Base exception for authentication errors."""
    pass


class NotAuthenticatedError(AuthenticationError):
    """Raised when an action needs a session and none is active."""
    pass
