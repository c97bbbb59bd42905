"""Page rendering with resource cleanup."""

import asyncio
import logging
from typing import Awaitable, List, Set

from ....ui.protocols import ClientView, ThumbnailSlot
from ...resources.application.preview_resolver import PreviewResolver
from ...resources.application.thumbnail_resolver import ThumbnailResolver
from ..core.entities import PageQuery
from ..core.models import FilePage

logger = logging.getLogger(__name__)


class PageRenderer:
    """
    Renders a page of rows in a fixed order: clear the preview, release all
    thumbnail handles, build the rows, then start one thumbnail fetch per
    row. The fetches finish in any order; each only updates its own slot.
    """

    def __init__(self, view: ClientView, thumbnails: ThumbnailResolver, preview: PreviewResolver):
        self._view = view
        self._thumbnails = thumbnails
        self._preview = preview
        self._pending: Set[asyncio.Task] = set()

    def render(self, page: FilePage, query: PageQuery) -> List[ThumbnailSlot]:
        self._preview.clear()
        self._thumbnails.clear()

        slots = self._view.render_rows(page.items)
        for record, slot in zip(page.items, slots):
            if record.thumbnail_name:
                slot.show_loading()
                self._schedule(self._thumbnails.fetch_for(record, slot))
            else:
                slot.show_placeholder()

        self._view.set_page_indicator(query.page_indicator(page.total))
        return slots

    def _schedule(self, fetch: Awaitable) -> None:
        task = asyncio.ensure_future(fetch)
        self._pending.add(task)
        task.add_done_callback(self._on_fetch_done)

    def _on_fetch_done(self, task: asyncio.Task) -> None:
        self._pending.discard(task)
        if not task.cancelled() and task.exception() is not None:
            logger.error(f"Thumbnail fetch crashed: {task.exception()!r}")

    @property
    def pending_count(self) -> int:
        return len(self._pending)

    async def drain(self) -> None:
        """Wait until every scheduled thumbnail fetch has finished."""
        while self._pending:
            await asyncio.gather(*list(self._pending), return_exceptions=True)
