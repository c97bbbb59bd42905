"""Preview of the selected image file."""

import logging
from typing import Optional, Tuple

import httpx

from ....config.settings import ClientSettings
from ....ui.protocols import ClientView
from ....utils.errors import read_json_body
from ...files.core.models import DownloadDescriptor, FileRecord
from ...gateway.application.request_gateway import RequestGateway
from ...gateway.core.protocols import CredentialsMode
from ...session.application.session_store import SessionStore
from ..core.entities import ObjectHandle
from ..infrastructure.object_url_store import ObjectUrlStore
from .registry import PREVIEW_KEY, ResourceRegistry

logger = logging.getLogger(__name__)


class PreviewResolver:
    """Fetches an image file into a local handle and displays it.

    At most one preview handle is live; showing a new one revokes the old.
    Any failure clears the preview rather than leaving a partial state.
    """

    def __init__(
        self,
        gateway: RequestGateway,
        session_store: SessionStore,
        registry: ResourceRegistry,
        store: ObjectUrlStore,
        view: ClientView,
        settings: ClientSettings,
    ):
        self._gateway = gateway
        self._session_store = session_store
        self._registry = registry
        self._store = store
        self._view = view
        self._settings = settings
        self._generation = 0

    def clear(self) -> None:
        self._generation += 1
        self._registry.revoke(PREVIEW_KEY)
        self._view.hide_preview()

    async def show(self, record: FileRecord) -> Optional[ObjectHandle]:
        if not record.is_image:
            self.clear()
            return None

        self._generation += 1
        generation = self._generation
        try:
            payload = await self._fetch_bytes(record)
        except (httpx.HTTPError, ValueError) as e:
            logger.debug(f"Preview of {record.id} failed: {e}")
            payload = None

        if generation != self._generation:
            logger.debug(f"Dropping preview of {record.id}; view changed while loading")
            return None
        if payload is None:
            self.clear()
            return None

        data, content_type = payload
        handle = self._store.create(data, content_type)
        self._registry.set(PREVIEW_KEY, handle)
        self._view.show_preview(handle.uri, record.display_name)
        return handle

    async def _fetch_bytes(self, record: FileRecord) -> Optional[Tuple[bytes, Optional[str]]]:
        response = await self._gateway.dispatch(
            self._settings.endpoint(f"/files/{record.id}/download"),
            headers=self._session_store.auth_headers(),
        )
        if not response.is_success:
            return None

        content_type = response.headers.get("content-type", "")
        if "application/json" not in content_type:
            return response.content, content_type or record.content_type

        descriptor = DownloadDescriptor.model_validate(read_json_body(response))
        if not descriptor.url:
            return None

        file_response = await self._gateway.dispatch(
            descriptor.url,
            credentials=CredentialsMode.OMIT,
            watch_session=False,
        )
        if not file_response.is_success:
            return None
        return file_response.content, file_response.headers.get("content-type") or record.content_type
