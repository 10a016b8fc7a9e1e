"""
Utility Functions
Wire helpers for the search client.
"""

import base64
from typing import Any, List, Optional


def encode_basic_credentials(key: str, secret: str) -> str:
    """
    Encode a key/secret pair for HTTP Basic authentication.

    Args:
        key: Consumer key
        secret: Consumer secret

    Returns:
        base64 of ``key:secret``
    """
    raw = f"{key}:{secret}".encode("utf-8")
    return base64.b64encode(raw).decode("ascii")


def bearer_token_from(payload: Any) -> Optional[str]:
    """
    Extract the access token from a token endpoint response.

    Args:
        payload: Decoded JSON body

    Returns:
        The token when ``token_type`` is ``bearer``, None otherwise
    """
    if not isinstance(payload, dict):
        return None
    if payload.get("token_type") != "bearer":
        return None
    token = payload.get("access_token")
    if not isinstance(token, str) or not token:
        return None
    return token


def upstream_errors(payload: Any) -> List[dict]:
    """Return the ``errors`` list of an API error body, or an empty list."""
    if isinstance(payload, dict) and isinstance(payload.get("errors"), list):
        return [e for e in payload["errors"] if isinstance(e, dict)]
    return []


def error_message(payload: Any, default: str) -> str:
    """
    Summarise an API error body.

    Args:
        payload: Decoded JSON body (may be None)
        default: Message used when the body carries no error messages

    Returns:
        Messages joined with ``; ``
    """
    messages = [str(e["message"]) for e in upstream_errors(payload) if e.get("message")]
    if not messages:
        return default
    return "; ".join(messages)


def format_status(status: dict, max_length: int = 280) -> str:
    """
    Format a search result for display.

    Args:
        status: Status object as returned by the search endpoint
        max_length: Truncate the text after this many characters

    Returns:
        ``@screen_name: text`` on one line
    """
    user = status.get("user") or {}
    name = user.get("screen_name") or "unknown"
    text = (status.get("full_text") or status.get("text") or "").replace("\n", " ").strip()
    if len(text) > max_length:
        text = text[: max_length - 1] + "…"
    return f"@{name}: {text}"
