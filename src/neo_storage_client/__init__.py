"""Neo Storage Client - session-aware client for the file storage service.

Provides authentication, paginated listing, uploads with progress, and
thumbnail/preview handle management behind a single ``StorageClient``.
"""

# Initialize logging configuration on import
from .config.logging_config import setup_logging
setup_logging()

from .__version__ import __version__

from .config import ClientSettings, get_settings

from .core.exceptions import (
    StorageClientError,
    AuthenticationError,
    NotAuthenticatedError,
    ClientValidationError,
    MissingCredentialsError,
    NoFileSelectedError,
    FileTooLargeError,
    InvalidPageQueryError,
)

from .commands import (
    SignupCommand,
    LoginCommand,
    LogoutCommand,
    RefreshCommand,
    UploadCommand,
    SetLimitCommand,
    SetSortCommand,
    NextPageCommand,
    PrevPageCommand,
    SelectFileCommand,
    RenameFileCommand,
    DeleteFileCommand,
    DownloadFileCommand,
)

from .platform.files.core import FileRecord, FilePage, LocalFile, PageQuery, SortOrder
from .platform.session.core import Session
from .platform.session.infrastructure import FileTokenStorage, MemoryTokenStorage
from .ui import ClientView, MemoryView, Panel, ThumbnailSlot
from .utils import format_error, human_size

from .client import StorageClient

__all__ = [
    "__version__",
    "ClientSettings",
    "get_settings",
    "StorageClientError",
    "AuthenticationError",
    "NotAuthenticatedError",
    "ClientValidationError",
    "MissingCredentialsError",
    "NoFileSelectedError",
    "FileTooLargeError",
    "InvalidPageQueryError",
    "SignupCommand",
    "LoginCommand",
    "LogoutCommand",
    "RefreshCommand",
    "UploadCommand",
    "SetLimitCommand",
    "SetSortCommand",
    "NextPageCommand",
    "PrevPageCommand",
    "SelectFileCommand",
    "RenameFileCommand",
    "DeleteFileCommand",
    "DownloadFileCommand",
    "FileRecord",
    "FilePage",
    "LocalFile",
    "PageQuery",
    "SortOrder",
    "Session",
    "FileTokenStorage",
    "MemoryTokenStorage",
    "ClientView",
    "MemoryView",
    "Panel",
    "ThumbnailSlot",
    "format_error",
    "human_size",
    "StorageClient",
]
