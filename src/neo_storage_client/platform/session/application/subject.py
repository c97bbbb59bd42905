"""Best-effort subject extraction from a bearer token."""

import json
import logging
from typing import Optional

from jose.utils import base64url_decode

logger = logging.getLogger(__name__)


def derive_subject(token: Optional[str]) -> Optional[str]:
    """Return the ``sub`` claim of a three-segment token, or None.

    The payload is decoded without any signature check. The result is a
    display label only; malformed tokens yield None instead of raising.
    """
    if not token:
        return None

    segments = token.split(".")
    if len(segments) != 3 or not segments[1]:
        return None

    try:
        payload = base64url_decode(segments[1].encode("ascii"))
        claims = json.loads(payload)
    except (ValueError, TypeError):
        logger.debug("Token payload could not be decoded")
        return None

    if not isinstance(claims, dict):
        return None
    subject = claims.get("sub")
    if subject is None or subject == "":
        return None
    return str(subject)
