"""Object handle storage."""

from .object_url_store import ObjectUrlStore, BLOB_SCHEME

__all__ = ["ObjectUrlStore", "BLOB_SCHEME"]
