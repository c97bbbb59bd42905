"""Single-owner registry of object handles."""

import logging
from typing import Dict, Hashable, Iterator, Optional

from ..core.entities import ObjectHandle
from ..infrastructure.object_url_store import ObjectUrlStore

logger = logging.getLogger(__name__)

PREVIEW_KEY = "preview"


class ResourceRegistry:
    """Maps a logical key to at most one live handle.

    Replacing a key revokes the previous handle first; removing a key revokes
    its handle. Every handle is revoked exactly once.
    """

    def __init__(self, store: ObjectUrlStore, name: str = "resources"):
        self._store = store
        self._name = name
        self._handles: Dict[Hashable, ObjectHandle] = {}

    def set(self, key: Hashable, handle: ObjectHandle) -> None:
        previous = self._handles.get(key)
        if previous is handle:
            return
        if previous is not None:
            self._store.revoke(previous)
        self._handles[key] = handle

    def get(self, key: Hashable) -> Optional[ObjectHandle]:
        return self._handles.get(key)

    def revoke(self, key: Hashable) -> bool:
        handle = self._handles.pop(key, None)
        if handle is None:
            return False
        return self._store.revoke(handle)

    def revoke_all(self) -> int:
        """Revoke every live handle; returns how many were released."""
        handles = list(self._handles.values())
        self._handles.clear()
        released = sum(1 for handle in handles if self._store.revoke(handle))
        if released:
            logger.debug(f"Released {released} handle(s) from {self._name}")
        return released

    def __len__(self) -> int:
        return len(self._handles)

    def __contains__(self, key: Hashable) -> bool:
        return key in self._handles

    def __iter__(self) -> Iterator[Hashable]:
        return iter(list(self._handles))


class ResourceLifecycle:
    """The two process-wide registries: per-row thumbnails and the preview."""

    def __init__(self, store: Optional[ObjectUrlStore] = None):
        self.store = store or ObjectUrlStore()
        self.thumbnails = ResourceRegistry(self.store, name="thumbnails")
        self.preview = ResourceRegistry(self.store, name="preview")

    def clear_all(self) -> int:
        return self.preview.revoke_all() + self.thumbnails.revoke_all()
