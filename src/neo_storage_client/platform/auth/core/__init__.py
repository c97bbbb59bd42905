"""Auth service models."""

from .models import SignupRequest, TokenResponse

__all__ = ["SignupRequest", "TokenResponse"]
