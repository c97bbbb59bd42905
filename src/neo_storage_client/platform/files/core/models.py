"""File service response models."""

from datetime import datetime
from typing import Any, List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator


class FileRecord(BaseModel):
    """Snapshot of one stored file's metadata at fetch time."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    id: Union[int, str] = Field(..., description="File identifier")
    display_name: str = Field(..., description="User-facing file name")
    size: int = Field(default=0, ge=0, description="Size in bytes")
    content_type: Optional[str] = Field(None, description="MIME type")
    created_at: datetime = Field(..., description="Upload timestamp")
    thumbnail_name: Optional[str] = Field(None, description="Derived thumbnail reference")

    @property
    def is_image(self) -> bool:
        """Whether the content type classifies the file as an image."""
        return bool(self.content_type) and self.content_type.startswith("image/")


class FilePage(BaseModel):
    """One page of the remote file collection."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    items: List[FileRecord] = Field(default_factory=list)
    total: int = Field(default=0, ge=0)

    @field_validator("items", mode="before")
    @classmethod
    def _null_items(cls, value: Any) -> Any:
        return [] if value is None else value

    @field_validator("total", mode="before")
    @classmethod
    def _null_total(cls, value: Any) -> Any:
        return 0 if value is None else value

    @classmethod
    def empty(cls) -> "FilePage":
        return cls(items=[], total=0)


class ThumbnailDescriptor(BaseModel):
    """Thumbnail lookup response."""

    model_config = ConfigDict(extra="ignore")

    url: Optional[str] = None


class DownloadDescriptor(BaseModel):
    """JSON-wrapped download locator."""

    model_config = ConfigDict(extra="ignore")

    url: Optional[str] = None
    filename: Optional[str] = None
    display_name: Optional[str] = None

