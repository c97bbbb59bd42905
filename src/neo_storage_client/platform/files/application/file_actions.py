"""Row-level file actions: rename, delete, download."""

import logging
from pathlib import Path
from typing import Optional

import httpx

from ....config.settings import ClientSettings
from ....ui.protocols import ClientView
from ....utils.errors import format_error, read_json_body
from ...gateway.application.request_gateway import RequestGateway
from ...gateway.core.protocols import CredentialsMode
from ...session.application.session_store import SessionStore
from ..core.models import DownloadDescriptor, FileRecord
from .pager import FileCollectionPager

logger = logging.getLogger(__name__)

RENAME_FAILED_MESSAGE = "Rename failed"
DELETE_FAILED_MESSAGE = "Delete failed"
DOWNLOAD_FAILED_MESSAGE = "Download failed"
DOWNLOAD_URL_MISSING_MESSAGE = "Download URL is missing."


class FileActions:
    """Row actions. Results are never patched locally; success refetches the page."""

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

    def _file_url(self, record: FileRecord, suffix: str = "") -> str:
        return self._settings.endpoint(f"/files/{record.id}{suffix}")

    async def rename(self, record: FileRecord, new_name: Optional[str]) -> bool:
        if not new_name or new_name == record.display_name:
            return False
        try:
            response = await self._gateway.dispatch(
                self._file_url(record),
                "PUT",
                headers=self._session_store.auth_headers(),
                json={"display_name": new_name},
            )
        except httpx.HTTPError:
            self._view.alert(RENAME_FAILED_MESSAGE)
            return False

        if not response.is_success:
            self._view.alert(format_error(read_json_body(response), RENAME_FAILED_MESSAGE))
            return False

        logger.info(f"Renamed file {record.id}")
        await self._pager.refresh()
        return True

    async def delete(self, record: FileRecord) -> bool:
        try:
            response = await self._gateway.dispatch(
                self._file_url(record),
                "DELETE",
                headers=self._session_store.auth_headers(),
            )
        except httpx.HTTPError:
            self._view.alert(DELETE_FAILED_MESSAGE)
            return False

        if response.status_code != httpx.codes.NO_CONTENT:
            self._view.alert(format_error(read_json_body(response), DELETE_FAILED_MESSAGE))
            return False

        logger.info(f"Deleted file {record.id}")
        await self._pager.refresh()
        return True

    async def download(self, record: FileRecord, destination: Optional[Path] = None) -> Optional[Path]:
        """Save the file under ``destination`` (default: configured download dir)."""
        try:
            response = await self._gateway.dispatch(
                self._file_url(record, "/download"),
                headers=self._session_store.auth_headers(),
            )
        except httpx.HTTPError:
            self._view.alert(f"{DOWNLOAD_FAILED_MESSAGE}.")
            return None

        if not response.is_success:
            self._view.alert(format_error(read_json_body(response), DOWNLOAD_FAILED_MESSAGE))
            return None

        if "application/json" not in response.headers.get("content-type", ""):
            return self._save(record.display_name or "download", response.content, destination)

        try:
            descriptor = DownloadDescriptor.model_validate(read_json_body(response))
        except ValueError:
            descriptor = DownloadDescriptor()
        if not descriptor.url:
            self._view.alert(DOWNLOAD_URL_MISSING_MESSAGE)
            return None

        suggested_name = (
            descriptor.display_name or record.display_name or descriptor.filename or "download"
        )
        try:
            file_response = await self._gateway.dispatch(
                descriptor.url,
                credentials=CredentialsMode.OMIT,
                watch_session=False,
            )
        except httpx.HTTPError as e:
            self._view.alert(f"{DOWNLOAD_FAILED_MESSAGE}. {e}".rstrip())
            return None

        if not file_response.is_success:
            self._view.alert(f"{DOWNLOAD_FAILED_MESSAGE}. {file_response.text}".rstrip())
            return None

        return self._save(suggested_name, file_response.content, destination)

    def _save(self, name: str, content: bytes, destination: Optional[Path]) -> Optional[Path]:
        directory = Path(destination or self._settings.download_dir)
        safe_name = Path(name).name or "download"
        target = directory / safe_name
        counter = 1
        while target.exists():
            target = directory / f"{Path(safe_name).stem} ({counter}){Path(safe_name).suffix}"
            counter += 1

        try:
            directory.mkdir(parents=True, exist_ok=True)
            target.write_bytes(content)
        except OSError as e:
            logger.error(f"Could not save download to {target}: {e}")
            self._view.alert(f"{DOWNLOAD_FAILED_MESSAGE}. {e}")
            return None

        logger.info(f"Downloaded {len(content)} bytes to {target}")
        return target
