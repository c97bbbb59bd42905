"""Pagination query and local file entities."""

import io
import math
import mimetypes
from contextlib import contextmanager
from dataclasses import dataclass, replace
from enum import Enum
from pathlib import Path
from typing import BinaryIO, Dict, Iterator, Optional, Union

from ....core.exceptions import InvalidPageQueryError


class SortOrder(str, Enum):
    """Sort order of the listing by creation time."""
    ASC = "asc"
    DESC = "desc"


@dataclass(frozen=True)
class PageQuery:
    """Offset-based listing parameters."""

    limit: int = 10
    offset: int = 0
    sort: SortOrder = SortOrder.DESC

    def __post_init__(self):
        """Validate pagination parameters."""
        if isinstance(self.limit, bool) or not isinstance(self.limit, int) or self.limit < 1:
            raise InvalidPageQueryError(f"Limit must be a positive integer, got {self.limit!r}")
        if self.offset < 0:
            raise InvalidPageQueryError(f"Offset must be >= 0, got {self.offset!r}")
        if not isinstance(self.sort, SortOrder):
            try:
                object.__setattr__(self, "sort", SortOrder(self.sort))
            except ValueError:
                raise InvalidPageQueryError(f"Unsupported sort order: {self.sort!r}")

    @property
    def current_page(self) -> int:
        return self.offset // self.limit + 1

    def total_pages(self, total: int) -> int:
        return max(1, math.ceil((total or 0) / self.limit))

    def page_indicator(self, total: int) -> str:
        """Human-readable position, derived from offset, limit and total."""
        return f"Page {self.current_page} of {self.total_pages(total)}"

    def with_limit(self, limit: int) -> "PageQuery":
        return replace(self, limit=limit, offset=0)

    def with_sort(self, sort: Union[SortOrder, str]) -> "PageQuery":
        return replace(self, sort=sort, offset=0)

    def with_offset(self, offset: int) -> "PageQuery":
        return replace(self, offset=offset)

    def to_params(self) -> Dict[str, Union[int, str]]:
        """Query string parameters for the listing endpoint."""
        return {"limit": self.limit, "offset": self.offset, "sort": self.sort.value}


@dataclass(frozen=True)
class LocalFile:
    """A file selected for upload, backed by a path or in-memory bytes."""

    name: str
    size: int
    content_type: str = "application/octet-stream"
    path: Optional[Path] = None
    content: Optional[bytes] = None

    def __post_init__(self):
        if self.path is None and self.content is None:
            raise ValueError("LocalFile needs either a path or content")

    @classmethod
    def from_path(cls, path: Union[str, Path], content_type: Optional[str] = None) -> "LocalFile":
        path = Path(path)
        guessed, _ = mimetypes.guess_type(path.name)
        return cls(
            name=path.name,
            size=path.stat().st_size,
            content_type=content_type or guessed or "application/octet-stream",
            path=path,
        )

    @classmethod
    def from_bytes(cls, name: str, content: bytes, content_type: Optional[str] = None) -> "LocalFile":
        guessed, _ = mimetypes.guess_type(name)
        return cls(
            name=name,
            size=len(content),
            content_type=content_type or guessed or "application/octet-stream",
            content=content,
        )

    @contextmanager
    def open(self) -> Iterator[BinaryIO]:
        """Open the file contents for streaming."""
        if self.content is not None:
            yield io.BytesIO(self.content)
            return
        with open(self.path, "rb") as fp:
            yield fp
