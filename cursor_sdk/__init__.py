"""Cursor SDK for Python.

Typed client for the Cursor Background Agents API plus webhook signature
verification.

Public API:
    CursorClient - Endpoint wrappers (agents, repositories, models, me)
    CursorConfig - Immutable client settings
    webhooks - Signature verification and ASGI guard

Internal (not for direct use):
    _internal.dispatch - Request dispatch and response mapping
"""

from cursor_sdk._version import __version__
from cursor_sdk.client import CursorClient, get_cursor_client
from cursor_sdk.config import CursorConfig
from cursor_sdk.exceptions import (
    CursorAPIError,
    CursorConfigError,
    CursorDecodeError,
    CursorError,
    CursorTransportError,
    WebhookSignatureError,
)
from cursor_sdk.webhooks import (
    WebhookSignatureMiddleware,
    compute_signature,
    guard,
    parse_webhook_event,
    verify_signature,
)

__all__ = [
    "__version__",
    "CursorClient",
    "CursorConfig",
    "get_cursor_client",
    "CursorError",
    "CursorAPIError",
    "CursorDecodeError",
    "CursorTransportError",
    "CursorConfigError",
    "WebhookSignatureError",
    "WebhookSignatureMiddleware",
    "compute_signature",
    "guard",
    "parse_webhook_event",
    "verify_signature",
]
