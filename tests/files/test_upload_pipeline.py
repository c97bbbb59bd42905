"""Tests for uploads."""

import httpx
import pytest

from neo_storage_client.core.exceptions import FileTooLargeError
from neo_storage_client.platform.files.application.file_size_validator import create_file_size_validator
from neo_storage_client.platform.files.application.upload_pipeline import (
    LOGIN_BEFORE_UPLOAD_ALERT,
    LOGIN_FIRST_MESSAGE,
    NO_FILE_MESSAGE,
    UPLOAD_COMPLETE_MESSAGE,
    UPLOAD_FAILED_MESSAGE,
)
from neo_storage_client.platform.files.core.entities import LocalFile
from neo_storage_client.platform.gateway.application.unauthorized_handler import SESSION_EXPIRED_MESSAGE
from neo_storage_client.ui.protocols import Panel


@pytest.fixture
def accepting_service(service, file_json, page_json):
    service.add("POST", "/files/upload", httpx.Response(201, json=file_json(99, name="a.txt")))
    service.add("GET", "/files", httpx.Response(200, json=page_json(1, 1)))
    return service


class TestFileSizeValidator:

    def test_exact_maximum_is_accepted(self):
        validator = create_file_size_validator(1024)
        validator.validate(LocalFile.from_bytes("a.bin", b"x" * 1024))

    def test_one_byte_over_is_rejected(self):
        validator = create_file_size_validator(1024)
        with pytest.raises(FileTooLargeError) as exc_info:
            validator.validate(LocalFile.from_bytes("a.bin", b"x" * 1025))

        assert exc_info.value.message == "File is too large. Max size is 1.0 KB."
        assert exc_info.value.size == 1025

    def test_label_uses_binary_units(self):
        assert create_file_size_validator(50 * 1024 * 1024).max_size_label == "50 MB"


class TestUploadPipeline:

    @pytest.mark.asyncio
    async def test_requires_session(self, storage_client, service, view):
        result = await storage_client.uploads.upload(LocalFile.from_bytes("a.txt", b"hello"))

        assert result is None
        assert service.requests == []
        assert view.feedback[Panel.AUTH] == LOGIN_FIRST_MESSAGE
        assert view.alerts == [LOGIN_BEFORE_UPLOAD_ALERT]

    @pytest.mark.asyncio
    async def test_requires_file(self, logged_in_client, service, view):
        assert await logged_in_client.uploads.upload(None) is None
        assert service.requests == []
        assert view.feedback[Panel.UPLOAD] == NO_FILE_MESSAGE

    @pytest.mark.asyncio
    async def test_oversized_file_never_reaches_network(self, logged_in_client, service, view):
        await logged_in_client.uploads.upload(LocalFile.from_bytes("big.bin", b"x" * 1025))

        assert service.requests == []
        assert view.feedback[Panel.UPLOAD] == "File is too large. Max size is 1.0 KB."
        assert view.progress == 0

    @pytest.mark.asyncio
    async def test_file_at_maximum_is_uploaded(self, logged_in_client, accepting_service, view, token):
        record = await logged_in_client.uploads.upload(LocalFile.from_bytes("a.txt", b"x" * 1024))

        assert record is not None
        assert record.id == 99
        request = accepting_service.calls("POST", "/files/upload")[0]
        assert request.headers["Authorization"] == f"Bearer {token}"
        assert request.headers["X-Request-ID"]
        assert b'name="file"; filename="a.txt"' in request.content

    @pytest.mark.asyncio
    async def test_success_reports_progress_and_refreshes(self, logged_in_client, accepting_service, view):
        await logged_in_client.uploads.upload(LocalFile.from_bytes("a.txt", b"hello world"))

        assert 100 in view.progress_history
        assert view.progress_history[0] == 0
        assert view.progress == 0
        assert all(0 <= p <= 100 for p in view.progress_history)
        assert view.feedback[Panel.UPLOAD] == UPLOAD_COMPLETE_MESSAGE
        assert view.file_selection_cleared == 1
        assert len(accepting_service.calls("GET", "/files")) == 1
        assert [row.id for row in view.rows] == [1]

    @pytest.mark.asyncio
    async def test_upload_from_disk(self, logged_in_client, accepting_service, tmp_path):
        path = tmp_path / "notes.txt"
        path.write_bytes(b"on disk")

        record = await logged_in_client.uploads.upload(LocalFile.from_path(path))

        assert record.id == 99
        assert b"on disk" in accepting_service.calls("POST", "/files/upload")[0].content

    @pytest.mark.asyncio
    async def test_error_body_is_shown(self, logged_in_client, service, view):
        service.add("POST", "/files/upload", httpx.Response(415, json={"detail": "Unsupported type"}))

        assert await logged_in_client.uploads.upload(LocalFile.from_bytes("a.exe", b"MZ")) is None
        assert view.feedback[Panel.UPLOAD] == "Unsupported type"
        assert service.calls("GET", "/files") == []

    @pytest.mark.asyncio
    async def test_opaque_failure_uses_fallback(self, logged_in_client, service, view):
        service.add("POST", "/files/upload", httpx.Response(500, text="oops"))

        await logged_in_client.uploads.upload(LocalFile.from_bytes("a.txt", b"x"))

        assert view.feedback[Panel.UPLOAD] == UPLOAD_FAILED_MESSAGE

    @pytest.mark.asyncio
    async def test_transport_failure_uses_fallback(self, logged_in_client, service, view):
        def unreachable(request):
            raise httpx.ReadTimeout("timed out", request=request)

        service.add("POST", "/files/upload", unreachable)

        await logged_in_client.uploads.upload(LocalFile.from_bytes("a.txt", b"x"))

        assert view.feedback[Panel.UPLOAD] == UPLOAD_FAILED_MESSAGE

    @pytest.mark.asyncio
    async def test_unauthorized_expires_session(self, logged_in_client, service, view):
        service.add("POST", "/files/upload", httpx.Response(401, json={"detail": "expired"}))

        await logged_in_client.uploads.upload(LocalFile.from_bytes("a.txt", b"x"))

        assert not logged_in_client.session_store.is_active
        assert view.feedback[Panel.UPLOAD] == SESSION_EXPIRED_MESSAGE
        assert view.feedback[Panel.AUTH] == SESSION_EXPIRED_MESSAGE
        assert view.progress == 0
        assert not view.upload_enabled
