"""
HTTP request utilities for product collectors.

Provides header building and a single-attempt JSON fetch helper.
"""

import logging
from typing import Optional, Dict, Any, Callable

import requests


UNREADABLE_BODY_TEXT = "Could not read error response text."


class HttpStatusError(RuntimeError):
    """Raised when an API responds with a non-success HTTP status."""

    def __init__(self, message: str, url: str, status_code: int, response_text: str):
        super().__init__(message)
        self.url = url
        self.status_code = status_code
        self.response_text = response_text


def build_browser_headers(
    origin: str,
    referer: Optional[str] = None,
    user_agent: Optional[str] = None
) -> Dict[str, str]:
    """
    Build browser-like HTTP headers for a JSON API.

    Args:
        origin: Origin URL (e.g., "https://example.com")
        referer: Referer URL (defaults to origin + "/")
        user_agent: User agent string (defaults to Safari on macOS)

    Returns:
        Dictionary of HTTP headers
    """
    if user_agent is None:
        user_agent = (
            "Mozilla/5.0 (Macintosh; Intel Mac OS X 10_15_7) "
            "AppleWebKit/605.1.15 (KHTML, like Gecko) "
            "Version/18.6 Safari/605.1.15"
        )

    if referer is None:
        referer = origin.rstrip("/") + "/"

    return {
        "User-Agent": user_agent,
        "Referer": referer,
        "Accept": "application/json, text/plain;q=0.9, */*;q=0.8",
        "Accept-Language": "en-US,en;q=0.9",
        "Cache-Control": "no-cache",
        "Pragma": "no-cache",
    }


def _read_error_text(response) -> str:
    """Read a failed response body, falling back to a placeholder."""
    try:
        return response.text
    except Exception:
        return UNREADABLE_BODY_TEXT


def fetch_json(
    url: str,
    error_message_prefix: str = "Error fetching data from API",
    http_get: Callable[..., Any] = requests.get,
    timeout: Optional[float] = None
) -> Any:
    """
    Fetch a URL once and parse the response body as JSON.

    Args:
        url: URL to fetch
        error_message_prefix: Prefix for the error message on HTTP failure
        http_get: HTTP GET function (requests.get or Session.get)
        timeout: Request timeout in seconds (None waits indefinitely)

    Returns:
        Parsed JSON data

    Raises:
        HttpStatusError: If the response status is outside 200-299
        ValueError: If the body is not valid JSON (raised by the decoder)
    """
    logging.info(f"Fetching data from: {url}")
    response = http_get(url, timeout=timeout)

    status = response.status_code
    if not 200 <= status < 300:
        error_text = _read_error_text(response)
        raise HttpStatusError(
            f"{error_message_prefix} ({url}): HTTP status {status}. Response: {error_text}",
            url=url,
            status_code=status,
            response_text=error_text,
        )

    return response.json()
