"""Commands sent by UI adapters to the storage client."""

from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Union

from .platform.files.core.entities import LocalFile, SortOrder
from .platform.files.core.models import FileRecord


@dataclass(frozen=True)
class SignupCommand:
    email: str
    password: str


@dataclass(frozen=True)
class LoginCommand:
    email: str
    password: str


@dataclass(frozen=True)
class LogoutCommand:
    pass


@dataclass(frozen=True)
class RefreshCommand:
    pass


@dataclass(frozen=True)
class UploadCommand:
    """Upload the selected file; ``None`` means nothing is selected."""
    file: Optional[LocalFile] = None


@dataclass(frozen=True)
class SetLimitCommand:
    limit: int


@dataclass(frozen=True)
class SetSortCommand:
    sort: Union[SortOrder, str]


@dataclass(frozen=True)
class NextPageCommand:
    pass


@dataclass(frozen=True)
class PrevPageCommand:
    pass


@dataclass(frozen=True)
class SelectFileCommand:
    """Row click; image records open the preview."""
    record: FileRecord


@dataclass(frozen=True)
class RenameFileCommand:
    record: FileRecord
    new_name: Optional[str]


@dataclass(frozen=True)
class DeleteFileCommand:
    record: FileRecord


@dataclass(frozen=True)
class DownloadFileCommand:
    record: FileRecord
    destination: Optional[Path] = None


Command = Union[
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
]
