"""Utility helpers for the storage client."""

from .uuid import generate_uuid_v7, generate_request_id, uuid_v7_timestamp
from .formatting import human_size, progress_percent
from .errors import format_error, read_json_body, DEFAULT_ERROR_MESSAGE

__all__ = [
    "generate_uuid_v7",
    "generate_request_id",
    "uuid_v7_timestamp",
    "human_size",
    "progress_percent",
    "format_error",
    "read_json_body",
    "DEFAULT_ERROR_MESSAGE",
]
