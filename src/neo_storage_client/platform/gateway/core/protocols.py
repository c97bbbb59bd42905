"""Gateway protocols and enums."""

from enum import Enum
from typing import Protocol, runtime_checkable

REQUEST_ID_HEADER = "X-Request-ID"


class CredentialsMode(str, Enum):
    """Whether stored cookies travel with a request."""
    INCLUDE = "include"
    OMIT = "omit"


class CooldownState(str, Enum):
    """Session-expiry handler states."""
    IDLE = "idle"
    COOLING_DOWN = "cooling-down"


@runtime_checkable
class Clock(Protocol):
    """Monotonic time source in seconds."""

    def now(self) -> float:
        ...
