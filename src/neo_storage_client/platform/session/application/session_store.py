"""Session store: single owner of the bearer token."""

import logging
from typing import Callable, Dict, List, Optional

from ..core.entities import Session
from ..core.protocols import SessionListener, TokenStorage
from .subject import derive_subject

logger = logging.getLogger(__name__)


class SessionStore:
    """Owns the auth token, persists it, and notifies listeners on change.

    Listeners run synchronously inside ``set_session`` so that dependent
    affordances (logout visibility, upload enablement) never drift from the
    stored state.
    """

    def __init__(self, storage: TokenStorage, listeners: Optional[List[SessionListener]] = None):
        """
        Initialize the store from durable storage.

        Args:
            storage: Durable token storage read once at startup
            listeners: Callbacks invoked with the new Session on every change
        """
        self._storage = storage
        self._listeners: List[SessionListener] = list(listeners or [])
        token = storage.load() or None
        self._session = Session.anonymous()
        if token:
            self._session = Session(token=token, subject_id=derive_subject(token))
            logger.debug("Restored persisted session")

    @staticmethod
    def derive_subject(token: Optional[str]) -> Optional[str]:
        return derive_subject(token)

    @property
    def is_active(self) -> bool:
        return self._session.is_active

    @property
    def token(self) -> Optional[str]:
        return self._session.token

    def get_session(self) -> Session:
        return self._session

    def set_session(self, token: Optional[str]) -> Session:
        """Replace the session, persist the change and notify listeners.

        A storage failure is logged; listeners still run with the new state.
        """
        token = token or None
        self._session = Session(token=token, subject_id=derive_subject(token)) if token else Session.anonymous()
        self._persist(token)

        if token:
            logger.info(f"Session established for subject {self._session.subject_id or '<unknown>'}")
        else:
            logger.info("Session cleared")

        for listener in list(self._listeners):
            listener(self._session)
        return self._session

    def _persist(self, token: Optional[str]) -> None:
        # The in-memory session stays authoritative when the store is unwritable
        try:
            if token:
                self._storage.save(token)
            else:
                self._storage.clear()
        except OSError as e:
            logger.error(f"Could not persist session change: {e}")

    def subscribe(self, listener: SessionListener) -> Callable[[], None]:
        """Register a change listener; returns a callable that unregisters it."""
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def auth_headers(self) -> Dict[str, str]:
        """Authorization header for the current session, or an empty dict."""
        if not self._session.token:
            return {}
        return {"Authorization": f"Bearer {self._session.token}"}
