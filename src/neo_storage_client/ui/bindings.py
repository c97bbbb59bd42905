"""Session-bound view affordances."""

from typing import Callable

from ..platform.session.application.session_store import SessionStore
from ..platform.session.core.entities import Session
from .protocols import ClientView

AUTHENTICATED_STATUS = "Authenticated"
ANONYMOUS_STATUS = "Not logged in"


def apply_session(view: ClientView, session: Session) -> None:
    """Push auth status, subject label, logout and upload state to the view."""
    active = session.is_active
    view.set_auth_status(
        AUTHENTICATED_STATUS if active else ANONYMOUS_STATUS,
        f"User: {session.subject_id}" if active and session.subject_id else "",
    )
    view.set_logout_visible(active)
    view.set_upload_enabled(active)


def bind_session_affordances(store: SessionStore, view: ClientView) -> Callable[[], None]:
    """Keep the view in step with ``store``; returns the unsubscribe callable."""
    return store.subscribe(lambda session: apply_session(view, session))
