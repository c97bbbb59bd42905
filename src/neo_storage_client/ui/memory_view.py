"""Recording view used for headless operation and tests."""

from typing import Dict, List, Optional, Sequence, Tuple

from ..platform.files.core.models import FileRecord
from .protocols import THUMBNAIL_PLACEHOLDER, AuthTab, Panel


class MemoryThumbnailSlot:
    """Thumbnail cell that remembers its current state."""

    def __init__(self, record: FileRecord):
        self.record = record
        self.state = "empty"
        self.text = ""
        self.uri: Optional[str] = None
        self.alt = ""

    def show_loading(self) -> None:
        self.state = "loading"
        self.text = "..."
        self.uri = None

    def show_placeholder(self) -> None:
        self.state = "placeholder"
        self.text = THUMBNAIL_PLACEHOLDER
        self.uri = None

    def show_image(self, uri: str, alt: str) -> None:
        self.state = "image"
        self.text = ""
        self.uri = uri
        self.alt = alt


class MemoryView:
    """ClientView that records everything it is asked to show."""

    def __init__(self):
        self.feedback: Dict[Panel, str] = {panel: "" for panel in Panel}
        self.feedback_history: List[Tuple[Panel, str]] = []
        self.auth_status = ""
        self.subject_label = ""
        self.logout_visible = False
        self.upload_enabled = False
        self.auth_tab = AuthTab.SIGNUP
        self.rows: List[FileRecord] = []
        self.slots: List[MemoryThumbnailSlot] = []
        self.render_count = 0
        self.page_indicator = ""
        self.progress = 0
        self.progress_label = ""
        self.progress_history: List[int] = []
        self.file_selection_cleared = 0
        self.preview: Optional[Tuple[str, str]] = None
        self.alerts: List[str] = []
        self.max_size_label = ""

    def set_feedback(self, panel: Panel, text: str) -> None:
        self.feedback[Panel(panel)] = text
        self.feedback_history.append((Panel(panel), text))

    def set_auth_status(self, status: str, subject_label: str) -> None:
        self.auth_status = status
        self.subject_label = subject_label

    def set_logout_visible(self, visible: bool) -> None:
        self.logout_visible = visible

    def set_upload_enabled(self, enabled: bool) -> None:
        self.upload_enabled = enabled

    def switch_auth_tab(self, tab: AuthTab) -> None:
        self.auth_tab = AuthTab(tab)

    def render_rows(self, records: Sequence[FileRecord]) -> List[MemoryThumbnailSlot]:
        self.rows = list(records)
        self.slots = [MemoryThumbnailSlot(record) for record in self.rows]
        self.render_count += 1
        return list(self.slots)

    def set_page_indicator(self, text: str) -> None:
        self.page_indicator = text

    def show_upload_progress(self, percent: int, label: str = "") -> None:
        self.progress = percent
        self.progress_label = label
        self.progress_history.append(percent)

    def clear_file_selection(self) -> None:
        self.file_selection_cleared += 1

    def show_preview(self, uri: str, label: str) -> None:
        self.preview = (uri, label)

    def hide_preview(self) -> None:
        self.preview = None

    def alert(self, message: str) -> None:
        self.alerts.append(message)

    def set_max_size_label(self, text: str) -> None:
        self.max_size_label = text
