"""Object handle entity."""

from dataclasses import dataclass


@dataclass(eq=False)
class ObjectHandle:
    """A revocable reference usable as a displayable URI.

    Local handles (``blob:`` URIs) own bytes held by the object store. Remote
    handles wrap a service-provided locator and own nothing locally.
    """

    uri: str
    is_local: bool = True
    content_type: str = "application/octet-stream"
    size: int = 0
    revoked: bool = False
