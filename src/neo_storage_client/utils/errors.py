"""Helpers for turning service error bodies into user-facing messages."""

import json
import logging
from typing import Any

import httpx

logger = logging.getLogger(__name__)

DEFAULT_ERROR_MESSAGE = "Something went wrong."


def _dumps(value: Any) -> str:
    return json.dumps(value, separators=(",", ":"), default=str)


def _is_blank(value: Any) -> bool:
    # Empty lists and dicts still carry a shape worth rendering
    return value is None or value is False or value == "" or (
        isinstance(value, (int, float)) and not isinstance(value, bool) and value == 0
    )


def _render_item(item: Any) -> str:
    if not item:
        return ""
    if isinstance(item, str):
        return item
    if isinstance(item, dict):
        if item.get("msg"):
            return str(item["msg"])
        if item.get("message"):
            return str(item["message"])
    return _dumps(item)


def format_error(data: Any, fallback: str = DEFAULT_ERROR_MESSAGE) -> str:
    """Extract the most specific message from an error body.

    Looks at ``detail``, then ``message``, then ``error``. The value may be a
    string, an object carrying ``msg``, or a list of such values which are
    joined with ``"; "``. Anything unusable yields ``fallback``.
    """
    if not data or not isinstance(data, dict):
        return fallback

    detail = None
    for key in ("detail", "message", "error"):
        if data.get(key) is not None:
            detail = data[key]
            break

    if _is_blank(detail):
        return fallback
    if isinstance(detail, str):
        return detail
    if isinstance(detail, list):
        parts = [part for part in (_render_item(item) for item in detail) if part]
        return "; ".join(parts) or fallback
    if isinstance(detail, dict) and detail.get("msg"):
        return str(detail["msg"])
    return _dumps(detail)


def read_json_body(response: httpx.Response) -> Any:
    """Decode a response body as JSON, returning ``{}`` when it is not JSON."""
    try:
        return response.json()
    except (ValueError, UnicodeDecodeError):
        logger.debug(f"Response body (status {response.status_code}) is not JSON")
        return {}
