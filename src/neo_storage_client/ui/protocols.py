"""View protocols the client core renders through.

The core never touches presentation elements directly. A UI adapter
implements these protocols and forwards user actions as commands.
"""

from enum import Enum
from typing import Protocol, Sequence, List, runtime_checkable

from ..platform.files.core.models import FileRecord

THUMBNAIL_PLACEHOLDER = "FILE"


class Panel(str, Enum):
    """Feedback areas of the client."""
    AUTH = "auth"
    UPLOAD = "upload"
    LIST = "list"


class AuthTab(str, Enum):
    """Auth form tabs."""
    SIGNUP = "signup"
    LOGIN = "login"


@runtime_checkable
class ThumbnailSlot(Protocol):
    """Thumbnail cell of one rendered row."""

    def show_loading(self) -> None:
        """Show the in-progress marker."""
        ...

    def show_placeholder(self) -> None:
        """Show the fixed textual placeholder."""
        ...

    def show_image(self, uri: str, alt: str) -> None:
        """Bind the cell to an image locator."""
        ...


@runtime_checkable
class ClientView(Protocol):
    """Presentation surface driven by the client core."""

    def set_feedback(self, panel: Panel, text: str) -> None:
        ...

    def set_auth_status(self, status: str, subject_label: str) -> None:
        ...

    def set_logout_visible(self, visible: bool) -> None:
        ...

    def set_upload_enabled(self, enabled: bool) -> None:
        ...

    def switch_auth_tab(self, tab: AuthTab) -> None:
        ...

    def render_rows(self, records: Sequence[FileRecord]) -> List[ThumbnailSlot]:
        """Replace the table body; return one thumbnail slot per record, in order."""
        ...

    def set_page_indicator(self, text: str) -> None:
        ...

    def show_upload_progress(self, percent: int, label: str = "") -> None:
        ...

    def clear_file_selection(self) -> None:
        ...

    def show_preview(self, uri: str, label: str) -> None:
        ...

    def hide_preview(self) -> None:
        ...

    def alert(self, message: str) -> None:
        """Blocking notice for row actions without a dedicated panel."""
        ...

    def set_max_size_label(self, text: str) -> None:
        ...

