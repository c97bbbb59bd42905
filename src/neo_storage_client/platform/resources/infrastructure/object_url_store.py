"""In-process object URL store."""

import logging
from typing import Dict, Optional

from ....utils.uuid import generate_uuid_v7
from ..core.entities import ObjectHandle

logger = logging.getLogger(__name__)

BLOB_SCHEME = "blob:"


class ObjectUrlStore:
    """Mints ``blob:`` URIs over byte payloads and releases them on revoke."""

    def __init__(self):
        self._objects: Dict[str, bytes] = {}
        self.created_count = 0
        self.revoked_count = 0

    def create(self, data: bytes, content_type: str = "application/octet-stream") -> ObjectHandle:
        uri = f"{BLOB_SCHEME}{generate_uuid_v7()}"
        self._objects[uri] = bytes(data)
        self.created_count += 1
        logger.debug(f"Created object handle {uri} ({len(data)} bytes)")
        return ObjectHandle(uri=uri, is_local=True, content_type=content_type, size=len(data))

    @staticmethod
    def external(uri: str) -> ObjectHandle:
        """Wrap a remote locator; revoking it only updates bookkeeping."""
        return ObjectHandle(uri=uri, is_local=False)

    def read(self, uri: str) -> Optional[bytes]:
        """Bytes behind a live local URI, or None once revoked."""
        return self._objects.get(uri)

    def revoke(self, handle: ObjectHandle) -> bool:
        """Release a handle. Returns False if it was already revoked."""
        if handle.revoked:
            return False
        handle.revoked = True
        if handle.is_local:
            self._objects.pop(handle.uri, None)
        self.revoked_count += 1
        logger.debug(f"Revoked object handle {handle.uri}")
        return True

    @property
    def live_count(self) -> int:
        """Number of local handles still holding bytes."""
        return len(self._objects)
