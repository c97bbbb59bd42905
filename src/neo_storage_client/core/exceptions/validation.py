"""Client-side validation exceptions.

These are raised before any network call is made and are converted into
inline feedback by the action that triggered them.
"""

from typing import Optional

from .base import StorageClientError


class ClientValidationError(StorageClientError):
    """Base exception for input rejected before reaching the service."""
    pass


class MissingCredentialsError(ClientValidationError):
    """Raised when email or password is blank."""

    def __init__(self, message: str = "Email and password are required."):
        super().__init__(message)


class NoFileSelectedError(ClientValidationError):
    """Raised when an upload is requested without a file."""

    def __init__(self, message: str = "Choose a file first."):
        super().__init__(message)


class FileTooLargeError(ClientValidationError):
    """Raised when a file exceeds the configured upload maximum."""

    def __init__(self, size: int, max_size: int, max_size_label: str, filename: Optional[str] = None):
        super().__init__(
            f"File is too large. Max size is {max_size_label}.",
            details={"size": size, "max_size": max_size, "filename": filename},
        )
        self.size = size
        self.max_size = max_size


class InvalidPageQueryError(ClientValidationError):
    """Raised when pagination or sort parameters are out of range."""
    pass
