"""Handle registries and resolvers."""

from .registry import ResourceRegistry, ResourceLifecycle, PREVIEW_KEY
from .thumbnail_resolver import ThumbnailResolver, THUMBNAIL_PLACEHOLDER
from .preview_resolver import PreviewResolver

__all__ = [
    "ResourceRegistry",
    "ResourceLifecycle",
    "PREVIEW_KEY",
    "ThumbnailResolver",
    "THUMBNAIL_PLACEHOLDER",
    "PreviewResolver",
]
