"""Webhook signature verification for Cursor agent notifications.

Cursor signs each delivery with HMAC-SHA256 over the raw request body, keyed
with the secret passed in ``LaunchWebhook.secret``, and sends the result as
``X-Webhook-Signature: sha256=<lowercase hex>``.

Two layers are provided:

- ``verify_signature`` is a pure predicate, usable from any framework.
- ``WebhookSignatureMiddleware`` (or ``guard``) wraps an ASGI app, rejects
  unsigned or mis-signed requests with 401, and replays the untouched body
  to the app otherwise.

Example:
    from starlette.applications import Starlette
    from cursor_sdk.webhooks import guard

    app = guard(os.environ["CURSOR_WEBHOOK_SECRET"], Starlette(routes=[...]))
"""

import hashlib
import hmac
import sys

from pydantic import ValidationError
from starlette.datastructures import Headers
from starlette.responses import PlainTextResponse
from starlette.types import ASGIApp, Message, Receive, Scope, Send

from cursor_sdk.exceptions import CursorDecodeError, WebhookSignatureError
from cursor_sdk.models import WebhookEvent

SIGNATURE_HEADER = "X-Webhook-Signature"
SIGNATURE_PREFIX = "sha256="


def _key(secret: str | bytes) -> bytes:
    return secret.encode("utf-8") if isinstance(secret, str) else secret


def compute_signature(secret: str | bytes, body: bytes) -> str:
    """Compute the signature header value for a body.

    Args:
        secret: Shared webhook secret.
        body: Exact request body bytes.

    Returns:
        Signature in format "sha256=<hex_digest>".
    """
    digest = hmac.new(_key(secret), body, hashlib.sha256).hexdigest()
    return f"{SIGNATURE_PREFIX}{digest}"


def verify_signature(secret: str | bytes, body: bytes, signature_header: str | None) -> bool:
    """Check a webhook signature header against the raw body.

    The header must start with the literal ``sha256=`` prefix; anything else
    is rejected. The digest comparison is constant-time.

    Args:
        secret: Shared webhook secret. An empty secret is not refused here.
        body: Request body exactly as received, before any JSON parsing.
        signature_header: Value of the ``X-Webhook-Signature`` header.

    Returns:
        True if the signature matches, False otherwise.
    """
    if not signature_header or not signature_header.startswith(SIGNATURE_PREFIX):
        return False
    supplied = signature_header[len(SIGNATURE_PREFIX):].encode("utf-8")
    expected = hmac.new(_key(secret), body, hashlib.sha256).hexdigest().encode("ascii")
    return hmac.compare_digest(supplied, expected)


def parse_webhook_event(
    secret: str | bytes, body: bytes, signature_header: str | None
) -> WebhookEvent:
    """Verify a delivery and decode its payload.

    Raises:
        WebhookSignatureError: If the signature does not verify.
        CursorDecodeError: If the signed payload is not a valid event.
    """
    if not verify_signature(secret, body, signature_header):
        raise WebhookSignatureError("invalid webhook signature")
    try:
        return WebhookEvent.model_validate_json(body)
    except ValidationError as e:
        raise CursorDecodeError(
            f"Failed to decode webhook event: {e}",
            body=body.decode("utf-8", errors="replace"),
        ) from e


class WebhookSignatureMiddleware:
    """ASGI middleware that only lets correctly signed requests through.

    The whole body is buffered, since the signature covers all of it, and
    then handed to the wrapped app unchanged.
    """

    def __init__(self, app: ASGIApp, secret: str | bytes, *, debug: bool = False) -> None:
        self.app = app
        self._secret = _key(secret)
        self._debug = debug

    def _log_debug(self, message: str) -> None:
        """Log a debug message to stderr if debug mode is enabled."""
        if self._debug:
            print(f"[cursor-sdk:webhooks] {message}", file=sys.stderr)

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        if scope["type"] != "http":
            await self.app(scope, receive, send)
            return

        body = await _read_body(receive)
        if body is None:
            self._log_debug(f"Client disconnected while reading {scope.get('path')}")
            response = PlainTextResponse("failed to read body", status_code=400)
            await response(scope, receive, send)
            return

        signature = Headers(scope=scope).get(SIGNATURE_HEADER)
        if not verify_signature(self._secret, body, signature):
            self._log_debug(f"Rejected {scope.get('path')}: invalid signature")
            response = PlainTextResponse("invalid signature", status_code=401)
            await response(scope, receive, send)
            return

        await self.app(scope, _replay_body(body, receive), send)


def guard(secret: str | bytes, app: ASGIApp, *, debug: bool = False) -> WebhookSignatureMiddleware:
    """Wrap ``app`` so it only sees requests with a valid signature."""
    return WebhookSignatureMiddleware(app, secret, debug=debug)


async def _read_body(receive: Receive) -> bytes | None:
    """Read the complete request body, or None if the client went away first."""
    chunks: list[bytes] = []
    while True:
        message = await receive()
        if message["type"] == "http.disconnect":
            return None
        chunks.append(message.get("body", b""))
        if not message.get("more_body", False):
            return b"".join(chunks)


def _replay_body(body: bytes, receive: Receive) -> Receive:
    """Return a receive callable that yields ``body`` once, then defers to ``receive``."""
    delivered = False

    async def replay() -> Message:
        nonlocal delivered
        if not delivered:
            delivered = True
            return {"type": "http.request", "body": body, "more_body": False}
        return await receive()

    return replay
