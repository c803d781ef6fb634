"""
Shared utilities for product collectors.

This package provides common functionality used across multiple collectors.
"""

from .http_utils import (
    HttpStatusError,
    build_browser_headers,
    fetch_json,
)

__all__ = [
    # HTTP utilities
    "HttpStatusError",
    "build_browser_headers",
    "fetch_json",
]
