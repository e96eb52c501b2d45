"""Public exceptions for the Cursor SDK."""

import json


class CursorError(Exception):
    """Base exception for all Cursor SDK errors."""


class CursorAPIError(CursorError):
    """Non-2xx response from the Cursor API.

    Carries the literal status code and the raw response body. The API
    documents an error shape of ``{"error": {"message": str, "code": str}}``
    but does not guarantee it, so ``message`` and ``code`` are best-effort
    and may be ``None``.
    """

    def __init__(self, status_code: int, body: str) -> None:
        self.status_code = status_code
        self.body = body
        self.message, self.code = _parse_error_body(body)
        super().__init__(self._describe())

    def _describe(self) -> str:
        if self.code:
            return f"API error: status={self.status_code} code={self.code} message={self.message}"
        if self.message:
            return f"API error: status={self.status_code} message={self.message}"
        return f"API error: status={self.status_code} body={self.body}"


class CursorDecodeError(CursorError):
    """A 2xx response (or webhook payload) whose body could not be decoded."""

    def __init__(self, message: str, status_code: int | None = None, body: str = "") -> None:
        super().__init__(message)
        self.status_code = status_code
        self.body = body


class CursorTransportError(CursorError):
    """Network-level failure (DNS, connection refused, timeout)."""


class CursorConfigError(CursorError):
    """Configuration error (invalid explicit settings)."""


class WebhookSignatureError(CursorError):
    """Webhook signature missing, malformed, or not matching the secret."""


def _parse_error_body(body: str) -> tuple[str | None, str | None]:
    """Extract message and code from the documented error shape, if present."""
    try:
        data = json.loads(body)
    except ValueError:
        return None, None
    if not isinstance(data, dict):
        return None, None
    error = data.get("error")
    if not isinstance(error, dict):
        return None, None
    message = error.get("message")
    code = error.get("code")
    return (
        message if isinstance(message, str) and message else None,
        code if isinstance(code, str) and code else None,
    )
