"""File size validator.

Checks a selected file against the configured upload maximum before any
network call is made.
"""

from dataclasses import dataclass
from typing import Optional

from ....config.settings import DEFAULT_MAX_FILE_SIZE_BYTES
from ....core.exceptions import FileTooLargeError
from ....utils.formatting import human_size
from ..core.entities import LocalFile


@dataclass
class FileSizeValidatorConfig:
    """Configuration for file size validator."""

    max_file_size_bytes: int = DEFAULT_MAX_FILE_SIZE_BYTES


class FileSizeValidator:
    """File size validation service."""

    def __init__(self, config: Optional[FileSizeValidatorConfig] = None):
        self._config = config or FileSizeValidatorConfig()

    @property
    def max_size_label(self) -> str:
        return human_size(self._config.max_file_size_bytes)

    def validate(self, file: LocalFile) -> None:
        """Raise FileTooLargeError when ``file`` exceeds the maximum.

        A file of exactly the maximum size is accepted.
        """
        if file.size > self._config.max_file_size_bytes:
            raise FileTooLargeError(
                size=file.size,
                max_size=self._config.max_file_size_bytes,
                max_size_label=self.max_size_label,
                filename=file.name,
            )


def create_file_size_validator(max_file_size_bytes: int) -> FileSizeValidator:
    """Create file size validator."""
    return FileSizeValidator(FileSizeValidatorConfig(max_file_size_bytes=max_file_size_bytes))
