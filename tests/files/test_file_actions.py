"""Tests for rename, delete and download."""

import json

import httpx
import pytest

from neo_storage_client.platform.files.application.file_actions import (
    DELETE_FAILED_MESSAGE,
    DOWNLOAD_URL_MISSING_MESSAGE,
    RENAME_FAILED_MESSAGE,
)
from neo_storage_client.platform.files.core.models import FileRecord


@pytest.fixture
def record(file_json):
    return FileRecord.model_validate(file_json(5, name="report.pdf", content_type="application/pdf"))


@pytest.fixture
def listing(service, page_json):
    service.add("GET", "/files", httpx.Response(200, json=page_json(1, 1)))


class TestRename:

    @pytest.mark.asyncio
    @pytest.mark.parametrize("new_name", [None, "", "report.pdf"])
    async def test_unchanged_name_is_a_no_op(self, logged_in_client, service, record, new_name):
        assert await logged_in_client.files.rename(record, new_name) is False
        assert service.requests == []

    @pytest.mark.asyncio
    async def test_success_refreshes(self, logged_in_client, service, view, record, listing):
        service.add("PUT", "/files/5", httpx.Response(200, json={}))

        assert await logged_in_client.files.rename(record, "final.pdf") is True

        request = service.calls("PUT", "/files/5")[0]
        assert json.loads(request.content) == {"display_name": "final.pdf"}
        assert len(service.calls("GET", "/files")) == 1
        assert view.alerts == []

    @pytest.mark.asyncio
    async def test_failure_alerts(self, logged_in_client, service, view, record):
        service.add("PUT", "/files/5", httpx.Response(409, json={"message": "Name taken"}))
        await logged_in_client.files.rename(record, "dup.pdf")

        service.add("PUT", "/files/5", httpx.Response(500))
        await logged_in_client.files.rename(record, "dup.pdf")

        assert view.alerts == ["Name taken", RENAME_FAILED_MESSAGE]
        assert service.calls("GET", "/files") == []


class TestDelete:

    @pytest.mark.asyncio
    async def test_no_content_refreshes(self, logged_in_client, service, view, record, listing):
        service.add("DELETE", "/files/5", httpx.Response(204))

        assert await logged_in_client.files.delete(record) is True
        assert len(service.calls("GET", "/files")) == 1

    @pytest.mark.asyncio
    async def test_other_status_alerts(self, logged_in_client, service, view, record):
        service.add("DELETE", "/files/5", httpx.Response(404, json={"detail": "File not found"}))
        await logged_in_client.files.delete(record)

        service.add("DELETE", "/files/5", httpx.Response(200))
        await logged_in_client.files.delete(record)

        assert view.alerts == ["File not found", DELETE_FAILED_MESSAGE]


class TestDownload:

    @pytest.mark.asyncio
    async def test_binary_response_is_saved(self, logged_in_client, service, record, tmp_path):
        service.add(
            "GET", "/files/5/download", httpx.Response(200, content=b"%PDF", headers={"content-type": "application/pdf"})
        )

        path = await logged_in_client.files.download(record, tmp_path)

        assert path == tmp_path / "report.pdf"
        assert path.read_bytes() == b"%PDF"

    @pytest.mark.asyncio
    async def test_descriptor_prefers_display_name(self, logged_in_client, service, record, settings):
        service.add(
            "GET",
            "/files/5/download",
            httpx.Response(
                200,
                json={"url": "http://cdn.test/objects/abc", "filename": "abc.pdf", "display_name": "Q3 report.pdf"},
            ),
        )
        service.add("GET", "/objects/abc", httpx.Response(200, content=b"remote"))

        path = await logged_in_client.files.download(record)

        assert path == settings.download_dir / "Q3 report.pdf"
        assert path.read_bytes() == b"remote"
        assert "Authorization" not in service.calls("GET", "/objects/abc")[0].headers

    @pytest.mark.asyncio
    async def test_name_falls_back_to_record(self, logged_in_client, service, record, tmp_path):
        service.add("GET", "/files/5/download", httpx.Response(200, json={"url": "http://cdn.test/o", "filename": "o.pdf"}))
        service.add("GET", "/o", httpx.Response(200, content=b"x"))

        path = await logged_in_client.files.download(record, tmp_path)

        assert path.name == "report.pdf"

    @pytest.mark.asyncio
    async def test_existing_file_is_not_overwritten(self, logged_in_client, service, record, tmp_path):
        (tmp_path / "report.pdf").write_bytes(b"old")
        service.add("GET", "/files/5/download", httpx.Response(200, content=b"new"))

        path = await logged_in_client.files.download(record, tmp_path)

        assert path == tmp_path / "report (1).pdf"
        assert (tmp_path / "report.pdf").read_bytes() == b"old"

    @pytest.mark.asyncio
    async def test_path_components_are_stripped(self, logged_in_client, service, record, tmp_path):
        service.add(
            "GET",
            "/files/5/download",
            httpx.Response(200, json={"url": "http://cdn.test/o", "display_name": "../../etc/passwd"}),
        )
        service.add("GET", "/o", httpx.Response(200, content=b"x"))

        path = await logged_in_client.files.download(record, tmp_path)

        assert path == tmp_path / "passwd"

    @pytest.mark.asyncio
    async def test_missing_url_alerts(self, logged_in_client, service, view, record, tmp_path):
        service.add("GET", "/files/5/download", httpx.Response(200, json={"filename": "x.pdf"}))

        assert await logged_in_client.files.download(record, tmp_path) is None
        assert view.alerts == [DOWNLOAD_URL_MISSING_MESSAGE]

    @pytest.mark.asyncio
    async def test_failed_secondary_fetch_alerts_with_body(self, logged_in_client, service, view, record, tmp_path):
        service.add("GET", "/files/5/download", httpx.Response(200, json={"url": "http://cdn.test/o"}))
        service.add("GET", "/o", httpx.Response(403, text="AccessDenied"))

        assert await logged_in_client.files.download(record, tmp_path) is None
        assert view.alerts == ["Download failed. AccessDenied"]
        assert logged_in_client.session_store.is_active

    @pytest.mark.asyncio
    async def test_error_status_alerts(self, logged_in_client, service, view, record, tmp_path):
        service.add("GET", "/files/5/download", httpx.Response(404, json={"detail": "File not found"}))

        await logged_in_client.files.download(record, tmp_path)

        assert view.alerts == ["File not found"]
        assert list(tmp_path.iterdir()) == []
