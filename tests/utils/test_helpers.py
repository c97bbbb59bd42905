"""Tests for formatting, error extraction and id helpers."""

import uuid
from datetime import datetime, timezone

import httpx
import pytest

from neo_storage_client.core.exceptions import FileTooLargeError, describe_error
from neo_storage_client.utils.errors import DEFAULT_ERROR_MESSAGE, format_error, read_json_body
from neo_storage_client.utils.formatting import human_size, progress_percent
from neo_storage_client.utils.uuid import generate_request_id, uuid_v7_timestamp


class TestHumanSize:

    @pytest.mark.parametrize(
        "num_bytes, expected",
        [
            (0, "0 B"),
            (None, "0 B"),
            (1, "1 B"),
            (1023, "1023 B"),
            (1024, "1.0 KB"),
            (1536, "1.5 KB"),
            (10 * 1024, "10 KB"),
            (1024 * 1024, "1.0 MB"),
            (50 * 1024 * 1024, "50 MB"),
            (3 * 1024 ** 3, "3.0 GB"),
            (2048 * 1024 ** 3, "2048 GB"),
        ],
    )
    def test_binary_scaling(self, num_bytes, expected):
        assert human_size(num_bytes) == expected


class TestProgressPercent:

    def test_whole_numbers(self):
        assert progress_percent(0, 200) == 0
        assert progress_percent(1, 200) == 1  # 0.5 rounds up
        assert progress_percent(100, 200) == 50
        assert progress_percent(200, 200) == 100

    def test_unknown_total(self):
        assert progress_percent(10, 0) == 0


class TestFormatError:

    def test_string_detail(self):
        assert format_error({"detail": "Email taken"}) == "Email taken"

    def test_precedence_detail_message_error(self):
        assert format_error({"error": "c", "message": "b", "detail": "a"}) == "a"
        assert format_error({"error": "c", "message": "b"}) == "b"
        assert format_error({"error": "c"}) == "c"

    def test_object_with_msg(self):
        assert format_error({"detail": {"msg": "Bad input"}}) == "Bad input"

    def test_list_joined(self):
        data = {"detail": [{"msg": "field required"}, {"msg": "too short"}, "plain"]}
        assert format_error(data) == "field required; too short; plain"

    def test_structured_without_msg_is_serialized(self):
        assert format_error({"detail": {"code": 7}}) == '{"code":7}'

    def test_fallbacks(self):
        assert format_error(None, "Upload failed.") == "Upload failed."
        assert format_error({}, "Upload failed.") == "Upload failed."
        assert format_error("oops") == DEFAULT_ERROR_MESSAGE
        assert format_error({"detail": ""}, "Login failed.") == "Login failed."
        assert format_error({"detail": []}, "Login failed.") == "Login failed."


class TestReadJsonBody:

    def test_json_body(self):
        assert read_json_body(httpx.Response(400, json={"detail": "x"})) == {"detail": "x"}

    def test_non_json_body(self):
        assert read_json_body(httpx.Response(500, text="<html>oops</html>")) == {}

    def test_empty_body(self):
        assert read_json_body(httpx.Response(502)) == {}


def test_request_ids_are_unique():
    ids = {generate_request_id() for _ in range(100)}
    assert len(ids) == 100


def test_request_ids_are_time_ordered_uuid7():
    request_id = generate_request_id()

    assert uuid.UUID(request_id).version == 7
    created = uuid_v7_timestamp(request_id)
    assert abs((datetime.now(timezone.utc) - created).total_seconds()) < 60
    assert uuid_v7_timestamp(str(uuid.uuid4())) is None
    assert uuid_v7_timestamp("not-a-uuid") is None


def test_client_errors_describe_themselves():
    error = FileTooLargeError(size=2048, max_size=1024, max_size_label="1.0 KB", filename="a.bin")

    assert str(error) == "File is too large. Max size is 1.0 KB."
    assert describe_error(error) == {
        "code": "FileTooLargeError",
        "message": "File is too large. Max size is 1.0 KB.",
        "details": {"size": 2048, "max_size": 1024, "filename": "a.bin"},
    }
