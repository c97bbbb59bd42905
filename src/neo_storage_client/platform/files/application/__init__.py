"""File services."""

from .renderer import PageRenderer
from .pager import FileCollectionPager
from .file_size_validator import FileSizeValidator, FileSizeValidatorConfig, create_file_size_validator
from .upload_pipeline import UploadPipeline, UploadProgressStream
from .file_actions import FileActions

__all__ = [
    "PageRenderer",
    "FileCollectionPager",
    "FileSizeValidator",
    "FileSizeValidatorConfig",
    "create_file_size_validator",
    "UploadPipeline",
    "UploadProgressStream",
    "FileActions",
]
