"""Gateway protocols and enums."""

from .protocols import Clock, CredentialsMode, CooldownState, REQUEST_ID_HEADER

__all__ = ["Clock", "CredentialsMode", "CooldownState", "REQUEST_ID_HEADER"]
