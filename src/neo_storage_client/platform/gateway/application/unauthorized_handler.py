"""Debounced reaction to session expiry."""

import logging
from typing import Callable, List, Optional

from ....ui.protocols import ClientView, Panel
from ...session.application.session_store import SessionStore
from ..core.protocols import Clock, CooldownState
from ..infrastructure.clock import MonotonicClock

logger = logging.getLogger(__name__)

SESSION_EXPIRED_MESSAGE = "Session expired. Please log in."

ResetListener = Callable[[], None]


class UnauthorizedHandler:
    """
    Two-state machine (idle, cooling-down) that resets the client once per
    expiry event.

    Several in-flight requests can observe the same expired token at nearly
    the same time. The first trigger clears the session, runs the reset
    listeners and publishes the session-expired notice; triggers during the
    cooldown window have no effect at all. The return to idle is evaluated
    lazily against the injected clock, so it has no side effects.
    """

    def __init__(
        self,
        session_store: SessionStore,
        view: ClientView,
        clock: Optional[Clock] = None,
        cooldown_seconds: float = 0.5,
    ):
        self._session_store = session_store
        self._view = view
        self._clock = clock or MonotonicClock()
        self._cooldown_seconds = cooldown_seconds
        self._cooldown_until: Optional[float] = None
        self._reset_listeners: List[ResetListener] = []

    @property
    def state(self) -> CooldownState:
        if self._cooldown_until is not None and self._clock.now() >= self._cooldown_until:
            self._cooldown_until = None
        return CooldownState.IDLE if self._cooldown_until is None else CooldownState.COOLING_DOWN

    def add_reset_listener(self, listener: ResetListener) -> None:
        """Register a callback run on every idle -> cooling-down transition."""
        self._reset_listeners.append(listener)

    def trigger(self) -> bool:
        """Handle a detected expiry; returns True only if the reset ran."""
        if self.state is CooldownState.COOLING_DOWN:
            logger.debug("Unauthorized trigger ignored during cooldown")
            return False

        self._cooldown_until = self._clock.now() + self._cooldown_seconds
        logger.warning("Session rejected by the service; resetting client state")

        try:
            self._session_store.set_session(None)
        finally:
            # The reset completes even if a session listener fails
            for listener in list(self._reset_listeners):
                listener()
            self._view.set_feedback(Panel.AUTH, SESSION_EXPIRED_MESSAGE)
            self._view.set_feedback(Panel.LIST, SESSION_EXPIRED_MESSAGE)
            self._view.set_feedback(Panel.UPLOAD, "")
        return True
