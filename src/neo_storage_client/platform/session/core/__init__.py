"""Session entities and protocols."""

from .entities import Session
from .protocols import TokenStorage, SessionListener

__all__ = ["Session", "TokenStorage", "SessionListener"]
