"""Session protocols."""

from typing import Callable, Optional, Protocol, runtime_checkable

from .entities import Session


@runtime_checkable
class TokenStorage(Protocol):
    """Durable storage holding exactly one value: the bearer token."""

    def load(self) -> Optional[str]:
        """Return the persisted token, if any."""
        ...

    def save(self, token: str) -> None:
        """Persist ``token``, replacing any previous value."""
        ...

    def clear(self) -> None:
        """Remove the persisted token."""
        ...


SessionListener = Callable[[Session], None]
