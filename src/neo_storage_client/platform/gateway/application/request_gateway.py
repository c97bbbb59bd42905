"""Single funnel for outbound service calls."""

import logging
from typing import Any, Callable, Dict, Mapping, Optional, Union

import httpx

from ....utils.uuid import generate_request_id
from ...session.application.session_store import SessionStore
from ..core.protocols import CredentialsMode, REQUEST_ID_HEADER
from .unauthorized_handler import UnauthorizedHandler

logger = logging.getLogger(__name__)


class RequestGateway:
    """
    Wraps every call made through the shared HTTP client.

    Each request gets a fresh correlation id header. A 401 response seen
    while a session is believed active triggers the unauthorized handler;
    the response itself is always handed back untouched. HTTP error statuses
    never raise here, only transport failures (``httpx.HTTPError``) do.
    """

    def __init__(
        self,
        client: httpx.AsyncClient,
        session_store: SessionStore,
        unauthorized_handler: UnauthorizedHandler,
        request_id_factory: Callable[[], str] = generate_request_id,
    ):
        self._client = client
        self._session_store = session_store
        self._unauthorized_handler = unauthorized_handler
        self._request_id_factory = request_id_factory

    async def dispatch(
        self,
        url: str,
        method: str = "GET",
        *,
        headers: Optional[Mapping[str, str]] = None,
        params: Optional[Mapping[str, Any]] = None,
        json: Any = None,
        data: Optional[Mapping[str, Any]] = None,
        content: Optional[Union[bytes, str]] = None,
        credentials: CredentialsMode = CredentialsMode.INCLUDE,
        watch_session: bool = True,
    ) -> httpx.Response:
        """
        Send one request and inspect its status.

        Args:
            url: Absolute URL
            method: HTTP method
            headers: Extra request headers
            params: Query string parameters
            json: JSON body
            data: Form-encoded body
            content: Raw body
            credentials: ``include`` sends stored cookies, ``omit`` strips them
            watch_session: Whether a 401 should count as session expiry

        Returns:
            The unmodified response
        """
        request_headers: Dict[str, str] = dict(headers or {})
        request_id = self._request_id_factory()
        request_headers[REQUEST_ID_HEADER] = request_id

        request = self._client.build_request(
            method,
            url,
            headers=request_headers,
            params=params,
            json=json,
            data=data,
            content=content,
        )
        if CredentialsMode(credentials) is CredentialsMode.OMIT:
            request.headers.pop("Cookie", None)

        logger.debug(f"{method} {request.url.path} request_id={request_id}")
        try:
            response = await self._client.send(request)
        except httpx.HTTPError as e:
            logger.warning(f"{method} {request.url.path} failed in transport (request_id={request_id}): {e}")
            raise

        logger.debug(f"{method} {request.url.path} -> {response.status_code} request_id={request_id}")
        if (
            watch_session
            and response.status_code == httpx.codes.UNAUTHORIZED
            and self._session_store.is_active
        ):
            self._unauthorized_handler.trigger()
        return response
