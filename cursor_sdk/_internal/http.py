"""Shared HTTP client configuration."""

import httpx

from cursor_sdk.config import CursorConfig


def create_http_client(config: CursorConfig) -> httpx.Client:
    """Create configured HTTP client.

    The dispatcher builds absolute URLs and attaches auth and identifying
    headers per request, so the transport only carries the timeout.

    Args:
        config: Client settings.

    Returns:
        Configured httpx.Client instance.
    """
    return httpx.Client(timeout=config.timeout_seconds)
