"""Session entity."""

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class Session:
    """Client-held authentication state.

    ``subject_id`` is always derived from ``token`` and never set on its own.
    """

    token: Optional[str] = None
    subject_id: Optional[str] = None

    @property
    def is_active(self) -> bool:
        return bool(self.token)

    @classmethod
    def anonymous(cls) -> "Session":
        return cls()
