"""Session services."""

from .subject import derive_subject
from .session_store import SessionStore

__all__ = ["derive_subject", "SessionStore"]
