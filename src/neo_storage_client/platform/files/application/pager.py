"""Paginated view of the remote file collection."""

import logging
from typing import Optional, Union

import httpx

from ....config.settings import ClientSettings
from ....ui.protocols import ClientView, Panel
from ....utils.errors import format_error, read_json_body
from ...gateway.application.request_gateway import RequestGateway
from ...gateway.application.unauthorized_handler import SESSION_EXPIRED_MESSAGE
from ...session.application.session_store import SessionStore
from ..core.entities import PageQuery, SortOrder
from ..core.models import FilePage
from .renderer import PageRenderer

logger = logging.getLogger(__name__)

LOGIN_PROMPT = "Log in to see your files."
LOADING_MESSAGE = "Loading..."
LIST_FAILED_MESSAGE = "Unable to load files."


class FileCollectionPager:
    """
    Holds the listing query and the last fetched page.

    Every successful fetch replaces the page wholesale and re-renders it.
    Each refresh is tagged with a generation; a response that arrives after
    a newer refresh or a reset is discarded.
    """

    def __init__(
        self,
        gateway: RequestGateway,
        session_store: SessionStore,
        renderer: PageRenderer,
        view: ClientView,
        settings: ClientSettings,
        query: Optional[PageQuery] = None,
    ):
        self._gateway = gateway
        self._session_store = session_store
        self._renderer = renderer
        self._view = view
        self._settings = settings
        self._query = query or PageQuery(limit=settings.default_page_size, sort=SortOrder(settings.default_sort))
        self._page = FilePage.empty()
        self._generation = 0

    @property
    def query(self) -> PageQuery:
        return self._query

    @property
    def page(self) -> FilePage:
        return self._page

    @property
    def page_indicator(self) -> str:
        return self._query.page_indicator(self._page.total)

    async def refresh(self) -> Optional[FilePage]:
        """Fetch the page described by the current query."""
        self._generation += 1
        generation = self._generation

        if not self._session_store.is_active:
            self._view.set_feedback(Panel.LIST, LOGIN_PROMPT)
            self._show(FilePage.empty())
            return None

        self._view.set_feedback(Panel.LIST, LOADING_MESSAGE)
        query = self._query
        try:
            response = await self._gateway.dispatch(
                self._settings.endpoint("/files"),
                params=query.to_params(),
                headers=self._session_store.auth_headers(),
            )
        except httpx.HTTPError:
            if generation == self._generation:
                self._view.set_feedback(Panel.LIST, LIST_FAILED_MESSAGE)
            return None

        if generation != self._generation:
            logger.debug(f"Discarding stale listing response (offset={query.offset}, limit={query.limit})")
            return None

        if response.status_code == httpx.codes.UNAUTHORIZED:
            # Reached only when the handler was already cooling down
            self._view.set_feedback(Panel.LIST, SESSION_EXPIRED_MESSAGE)
            return None

        body = read_json_body(response)
        if not response.is_success:
            self._view.set_feedback(Panel.LIST, format_error(body, LIST_FAILED_MESSAGE))
            return None

        try:
            page = FilePage.model_validate(body)
        except ValueError as e:
            logger.warning(f"Malformed listing response: {e}")
            self._view.set_feedback(Panel.LIST, LIST_FAILED_MESSAGE)
            return None

        if len(page.items) > query.limit:
            logger.warning(f"Service returned {len(page.items)} items for limit {query.limit}; truncating")
            page = page.model_copy(update={"items": page.items[:query.limit]})

        self._show(page)
        self._view.set_feedback(Panel.LIST, "")
        return page

    async def set_limit(self, limit: int) -> Optional[FilePage]:
        self._query = self._query.with_limit(limit)
        return await self.refresh()

    async def set_sort(self, sort: Union[SortOrder, str]) -> Optional[FilePage]:
        self._query = self._query.with_sort(sort)
        return await self.refresh()

    async def next_page(self) -> Optional[FilePage]:
        """Advance one page; no-op once the next offset reaches the total."""
        next_offset = self._query.offset + self._query.limit
        if next_offset >= self._page.total:
            return None
        self._query = self._query.with_offset(next_offset)
        return await self.refresh()

    async def prev_page(self) -> Optional[FilePage]:
        self._query = self._query.with_offset(max(0, self._query.offset - self._query.limit))
        return await self.refresh()

    def reset(self) -> None:
        """Back to offset 0 with an empty page; in-flight responses are dropped."""
        self._generation += 1
        self._query = self._query.with_offset(0)
        self._show(FilePage.empty())

    def _show(self, page: FilePage) -> None:
        self._page = page
        self._renderer.render(page, self._query)
