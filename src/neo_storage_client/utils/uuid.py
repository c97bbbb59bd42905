"""Time-ordered identifiers for correlation ids and object handles."""

import os
import time
import uuid
from datetime import datetime, timezone
from typing import Optional


def generate_uuid_v7() -> str:
    """
    Generate a UUIDv7 (48-bit millisecond timestamp followed by random bits).

    Ids sort by creation time, so request ids and handle URIs read in order
    in the logs.

    Returns:
        String representation of UUIDv7
    """
    timestamp_ms = time.time_ns() // 1_000_000
    value = (timestamp_ms & ((1 << 48) - 1)) << 80 | int.from_bytes(os.urandom(10), "big")

    # Version 7 in bits 76-79, RFC 4122 variant in bits 62-63
    value = (value & ~(0xF << 76)) | (0x7 << 76)
    value = (value & ~(0x3 << 62)) | (0x2 << 62)
    return str(uuid.UUID(int=value))


def uuid_v7_timestamp(value: str) -> Optional[datetime]:
    """Creation time embedded in a UUIDv7 string, or None for other ids."""
    try:
        parsed = uuid.UUID(value)
    except (TypeError, ValueError):
        return None
    if parsed.version != 7:
        return None
    return datetime.fromtimestamp((parsed.int >> 80) / 1000, tz=timezone.utc)


def generate_request_id() -> str:
    """Generate a correlation id for the X-Request-ID header."""
    return generate_uuid_v7()
