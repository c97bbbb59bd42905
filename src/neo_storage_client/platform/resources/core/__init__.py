"""Object handle entity."""

from .entities import ObjectHandle

__all__ = ["ObjectHandle"]
