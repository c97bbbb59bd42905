"""File domain models and entities."""

from .models import FileRecord, FilePage, ThumbnailDescriptor, DownloadDescriptor
from .entities import SortOrder, PageQuery, LocalFile

__all__ = [
    "FileRecord",
    "FilePage",
    "ThumbnailDescriptor",
    "DownloadDescriptor",
    "SortOrder",
    "PageQuery",
    "LocalFile",
]
