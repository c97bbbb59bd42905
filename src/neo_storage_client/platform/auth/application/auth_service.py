"""Authentication flows against the storage service."""

import logging
from typing import Optional, Tuple

import httpx
from pydantic import ValidationError

from ....config.settings import ClientSettings
from ....core.exceptions import MissingCredentialsError
from ....ui.protocols import AuthTab, ClientView, Panel
from ....utils.errors import format_error, read_json_body
from ...files.application.pager import FileCollectionPager
from ...gateway.application.request_gateway import RequestGateway
from ...session.application.session_store import SessionStore
from ...session.core.entities import Session
from ..core.models import SignupRequest, TokenResponse

logger = logging.getLogger(__name__)

SIGNUP_SUCCESS_MESSAGE = "Account created. You can log in now."
SIGNUP_FAILED_MESSAGE = "Sign up failed."
LOGIN_SUCCESS_MESSAGE = "Logged in."
LOGIN_FAILED_MESSAGE = "Login failed."


def _credentials(email: Optional[str], password: Optional[str]) -> Tuple[str, str]:
    email = (email or "").strip()
    password = (password or "").strip()
    if not email or not password:
        raise MissingCredentialsError()
    return email, password


class AuthService:
    """
    Account flows that feed the session store.

    Outcomes are reported in the auth panel. Signup never establishes a
    session by itself; the user logs in afterwards.
    """

    def __init__(
        self,
        gateway: RequestGateway,
        session_store: SessionStore,
        pager: FileCollectionPager,
        view: ClientView,
        settings: ClientSettings,
    ):
        self._gateway = gateway
        self._session_store = session_store
        self._pager = pager
        self._view = view
        self._settings = settings

    async def signup(self, email: Optional[str], password: Optional[str]) -> bool:
        try:
            email, password = _credentials(email, password)
        except MissingCredentialsError as e:
            self._view.set_feedback(Panel.AUTH, e.message)
            return False

        payload = SignupRequest(email=email, password=password)
        try:
            response = await self._gateway.dispatch(
                self._settings.endpoint("/auth/signup"),
                "POST",
                json=payload.model_dump(),
            )
        except httpx.HTTPError:
            self._view.set_feedback(Panel.AUTH, SIGNUP_FAILED_MESSAGE)
            return False

        if not response.is_success:
            self._view.set_feedback(Panel.AUTH, format_error(read_json_body(response), SIGNUP_FAILED_MESSAGE))
            return False

        logger.info("Account created")
        self._view.set_feedback(Panel.AUTH, SIGNUP_SUCCESS_MESSAGE)
        self._view.switch_auth_tab(AuthTab.LOGIN)
        return True

    async def login(self, email: Optional[str], password: Optional[str]) -> Optional[Session]:
        """Exchange credentials for a bearer token and load the first page."""
        try:
            email, password = _credentials(email, password)
        except MissingCredentialsError as e:
            self._view.set_feedback(Panel.AUTH, e.message)
            return None

        try:
            response = await self._gateway.dispatch(
                self._settings.endpoint("/auth/login"),
                "POST",
                data={"username": email, "password": password},
            )
        except httpx.HTTPError:
            self._view.set_feedback(Panel.AUTH, LOGIN_FAILED_MESSAGE)
            return None

        body = read_json_body(response)
        if not response.is_success:
            self._view.set_feedback(Panel.AUTH, format_error(body, LOGIN_FAILED_MESSAGE))
            return None

        try:
            token = TokenResponse.model_validate(body)
        except ValidationError as e:
            logger.warning(f"Login response carried no usable token ({e.error_count()} validation errors)")
            self._view.set_feedback(Panel.AUTH, LOGIN_FAILED_MESSAGE)
            return None

        session = self._session_store.set_session(token.access_token)
        self._view.set_feedback(Panel.AUTH, LOGIN_SUCCESS_MESSAGE)
        await self._pager.refresh()
        return session

    async def logout(self) -> None:
        try:
            await self._gateway.dispatch(
                self._settings.endpoint("/auth/logout"),
                "POST",
                headers=self._session_store.auth_headers(),
            )
        except httpx.HTTPError as e:
            logger.info(f"Logout request failed, clearing local session anyway: {e}")

        self._session_store.set_session(None)
        self._pager.reset()
