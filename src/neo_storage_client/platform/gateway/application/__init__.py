"""Gateway services."""

from .request_gateway import RequestGateway
from .unauthorized_handler import UnauthorizedHandler, SESSION_EXPIRED_MESSAGE

__all__ = ["RequestGateway", "UnauthorizedHandler", "SESSION_EXPIRED_MESSAGE"]
