"""Per-row thumbnail fetching."""

import logging
from typing import Awaitable, Optional

import httpx

from ....config.settings import ClientSettings
from ....ui.protocols import THUMBNAIL_PLACEHOLDER, ThumbnailSlot
from ....utils.errors import read_json_body
from ...files.core.models import FileRecord, ThumbnailDescriptor
from ...gateway.application.request_gateway import RequestGateway
from ...session.application.session_store import SessionStore
from ..core.entities import ObjectHandle
from ..infrastructure.object_url_store import ObjectUrlStore
from .registry import ResourceRegistry

logger = logging.getLogger(__name__)


class ThumbnailResolver:
    """
    Resolves a row's thumbnail locator and binds it to the row's slot.

    Failures of any kind degrade to the placeholder. Each fetch only touches
    its own slot. A fetch that completes after ``clear()`` belongs to a page
    that is no longer rendered and is dropped without registering anything.
    """

    def __init__(
        self,
        gateway: RequestGateway,
        session_store: SessionStore,
        registry: ResourceRegistry,
        store: ObjectUrlStore,
        settings: ClientSettings,
    ):
        self._gateway = gateway
        self._session_store = session_store
        self._registry = registry
        self._store = store
        self._settings = settings
        self._generation = 0

    def clear(self) -> int:
        """Revoke all thumbnail handles and invalidate in-flight fetches."""
        self._generation += 1
        return self._registry.revoke_all()

    def fetch_for(self, record: FileRecord, slot: ThumbnailSlot) -> Awaitable[Optional[ObjectHandle]]:
        """Start resolving ``record``'s thumbnail into ``slot``.

        The render generation is captured when this is called, not when the
        returned coroutine first runs.
        """
        return self._fetch(record, slot, self._generation)

    async def _fetch(self, record: FileRecord, slot: ThumbnailSlot, generation: int) -> Optional[ObjectHandle]:
        if not record.thumbnail_name:
            slot.show_placeholder()
            return None

        try:
            response = await self._gateway.dispatch(
                self._settings.endpoint(f"/files/{record.id}/thumbnail"),
                headers=self._session_store.auth_headers(),
            )
        except httpx.HTTPError:
            return self._fallback(record, slot, generation)

        if not response.is_success:
            return self._fallback(record, slot, generation)

        try:
            descriptor = ThumbnailDescriptor.model_validate(read_json_body(response))
        except ValueError:
            return self._fallback(record, slot, generation)
        if not descriptor.url:
            return self._fallback(record, slot, generation)

        if generation != self._generation:
            logger.debug(f"Dropping thumbnail for {record.id} from a previous render")
            return None

        handle = self._store.external(descriptor.url)
        self._registry.set(record.id, handle)
        slot.show_image(handle.uri, f"Thumbnail {record.display_name}")
        return handle

    def _fallback(self, record: FileRecord, slot: ThumbnailSlot, generation: int) -> None:
        if generation == self._generation:
            logger.debug(f"Thumbnail unavailable for {record.id}")
            slot.show_placeholder()
        return None
