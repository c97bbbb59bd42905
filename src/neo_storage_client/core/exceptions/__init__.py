"""Exception hierarchy for the storage client."""

from .base import StorageClientError, describe_error
from .auth import AuthenticationError, NotAuthenticatedError
from .validation import (
    ClientValidationError,
    MissingCredentialsError,
    NoFileSelectedError,
    FileTooLargeError,
    InvalidPageQueryError,
)

__all__ = [
    "StorageClientError",
    "describe_error",
    "AuthenticationError",
    "NotAuthenticatedError",
    "ClientValidationError",
    "MissingCredentialsError",
    "NoFileSelectedError",
    "FileTooLargeError",
    "InvalidPageQueryError",
]
