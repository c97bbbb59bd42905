"""View boundary of the storage client."""

from .protocols import THUMBNAIL_PLACEHOLDER, AuthTab, ClientView, Panel, ThumbnailSlot
from .bindings import ANONYMOUS_STATUS, AUTHENTICATED_STATUS, apply_session, bind_session_affordances
from .memory_view import MemoryThumbnailSlot, MemoryView

__all__ = [
    "AuthTab",
    "ClientView",
    "Panel",
    "ThumbnailSlot",
    "THUMBNAIL_PLACEHOLDER",
    "ANONYMOUS_STATUS",
    "AUTHENTICATED_STATUS",
    "apply_session",
    "bind_session_affordances",
    "MemoryThumbnailSlot",
    "MemoryView",
]
