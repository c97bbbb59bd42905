"""Token storage backends."""

from .token_storage import FileTokenStorage, MemoryTokenStorage, TOKEN_KEY

__all__ = ["FileTokenStorage", "MemoryTokenStorage", "TOKEN_KEY"]
