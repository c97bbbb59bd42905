"""Single-file upload with progress reporting."""

import logging
from typing import AsyncIterator, Callable, Optional

import httpx

from ....config.settings import ClientSettings
from ....core.exceptions import FileTooLargeError, NoFileSelectedError, NotAuthenticatedError
from ....ui.protocols import ClientView, Panel
from ....utils.errors import format_error, read_json_body
from ....utils.formatting import progress_percent
from ....utils.uuid import generate_request_id
from ...gateway.application.unauthorized_handler import SESSION_EXPIRED_MESSAGE, UnauthorizedHandler
from ...gateway.core.protocols import REQUEST_ID_HEADER
from ...session.application.session_store import SessionStore
from ..core.entities import LocalFile
from ..core.models import FileRecord
from .file_size_validator import FileSizeValidator, create_file_size_validator
from .pager import FileCollectionPager

logger = logging.getLogger(__name__)

UPLOAD_FIELD_NAME = "file"
UPLOAD_FAILED_MESSAGE = "Upload failed."
UPLOAD_COMPLETE_MESSAGE = "Upload complete."
LOGIN_FIRST_MESSAGE = "Please log in first."
LOGIN_BEFORE_UPLOAD_ALERT = "Please log in before uploading."
NO_FILE_MESSAGE = "Choose a file first."

ProgressCallback = Callable[[int, int], None]


class UploadProgressStream(httpx.AsyncByteStream):
    """Wraps a request body stream and reports bytes handed to the transport."""

    def __init__(self, stream: httpx.AsyncByteStream, total: int, on_progress: ProgressCallback):
        self._stream = stream
        self._total = total
        self._on_progress = on_progress

    async def __aiter__(self) -> AsyncIterator[bytes]:
        loaded = 0
        async for chunk in self._stream:
            loaded += len(chunk)
            yield chunk
            self._on_progress(loaded, self._total)

    async def aclose(self) -> None:
        await self._stream.aclose()


class UploadPipeline:
    """
    Uploads one file as a multipart request.

    This path talks to the HTTP client directly instead of the shared
    gateway because it wraps the request body to observe upload progress.
    It still sends the bearer token and a correlation id, and routes a 401
    to the unauthorized handler. There is no automatic retry.
    """

    def __init__(
        self,
        client: httpx.AsyncClient,
        session_store: SessionStore,
        unauthorized_handler: UnauthorizedHandler,
        pager: FileCollectionPager,
        view: ClientView,
        settings: ClientSettings,
        size_validator: Optional[FileSizeValidator] = None,
        request_id_factory: Callable[[], str] = generate_request_id,
    ):
        self._client = client
        self._session_store = session_store
        self._unauthorized_handler = unauthorized_handler
        self._pager = pager
        self._view = view
        self._settings = settings
        self._size_validator = size_validator or create_file_size_validator(settings.max_file_size_bytes)
        self._request_id_factory = request_id_factory

    @property
    def max_size_label(self) -> str:
        return self._size_validator.max_size_label

    def check_preconditions(self, file: Optional[LocalFile]) -> LocalFile:
        """Client-side checks run before any network call.

        Raises:
            NotAuthenticatedError: No session is active
            NoFileSelectedError: Nothing was selected
            FileTooLargeError: The file exceeds the configured maximum
        """
        if not self._session_store.is_active:
            raise NotAuthenticatedError(LOGIN_FIRST_MESSAGE)
        if file is None:
            raise NoFileSelectedError(NO_FILE_MESSAGE)
        self._size_validator.validate(file)
        return file

    async def upload(self, file: Optional[LocalFile]) -> Optional[FileRecord]:
        """Upload ``file``; returns the stored record on success."""
        try:
            file = self.check_preconditions(file)
        except NotAuthenticatedError as e:
            self._view.set_feedback(Panel.AUTH, e.message)
            self._view.alert(LOGIN_BEFORE_UPLOAD_ALERT)
            return None
        except NoFileSelectedError as e:
            self._view.set_feedback(Panel.UPLOAD, e.message)
            return None
        except FileTooLargeError as e:
            logger.info(f"Rejected {e.details['filename']}: {e.size} bytes exceeds {e.max_size}")
            self._view.set_feedback(Panel.UPLOAD, e.message)
            self._view.show_upload_progress(0, "")
            return None

        self._view.show_upload_progress(0, "")
        self._view.set_feedback(Panel.UPLOAD, "")

        request_id = self._request_id_factory()
        headers = {
            "Authorization": f"Bearer {self._session_store.token}",
            REQUEST_ID_HEADER: request_id,
        }
        logger.info(f"Uploading {file.name} ({file.size} bytes) request_id={request_id}")
        try:
            with file.open() as fp:
                request = self._client.build_request(
                    "POST",
                    self._settings.endpoint("/files/upload"),
                    headers=headers,
                    files={UPLOAD_FIELD_NAME: (file.name, fp, file.content_type)},
                )
                total = int(request.headers.get("Content-Length") or 0)
                if total:
                    request.stream = UploadProgressStream(request.stream, total, self._report_progress)
                response = await self._client.send(request)
        except (httpx.HTTPError, OSError) as e:
            logger.warning(f"Upload of {file.name} failed (request_id={request_id}): {e}")
            self._view.set_feedback(Panel.UPLOAD, UPLOAD_FAILED_MESSAGE)
            return None

        if response.status_code == httpx.codes.UNAUTHORIZED:
            self._unauthorized_handler.trigger()
            self._view.set_feedback(Panel.UPLOAD, SESSION_EXPIRED_MESSAGE)
            self._view.show_upload_progress(0, "")
            return None

        body = read_json_body(response)
        if not response.is_success:
            self._view.set_feedback(Panel.UPLOAD, format_error(body, UPLOAD_FAILED_MESSAGE))
            return None

        self._view.set_feedback(Panel.UPLOAD, UPLOAD_COMPLETE_MESSAGE)
        self._view.clear_file_selection()
        self._view.show_upload_progress(0, "")
        try:
            record = FileRecord.model_validate(body)
        except ValueError:
            record = None
        await self._pager.refresh()
        return record

    def _report_progress(self, loaded: int, total: int) -> None:
        percent = progress_percent(loaded, total)
        self._view.show_upload_progress(percent, f"{percent}%")
