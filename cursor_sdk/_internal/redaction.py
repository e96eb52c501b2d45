"""Redaction of sensitive values before they reach debug output."""

from typing import Any

REDACT_KEYS: frozenset[str] = frozenset({
    "apikey",
    "api_key",
    "token",
    "secret",
    "password",
    "authorization",
})

REDACTED_VALUE = "[REDACTED]"


def redact_payload(payload: Any) -> Any:
    """Recursively redact sensitive keys from a JSON-compatible value.

    Creates a copy - the original payload is never mutated. Key matching is
    case-insensitive, so both ``apiKey`` and ``api_key`` are caught.

    Args:
        payload: The value to redact sensitive entries from.

    Returns:
        A new value with sensitive entries replaced by "[REDACTED]".
    """
    if isinstance(payload, dict):
        result = {}
        for key, value in payload.items():
            key_lower = key.lower() if isinstance(key, str) else key
            if key_lower in REDACT_KEYS:
                result[key] = REDACTED_VALUE
            else:
                result[key] = redact_payload(value)
        return result
    elif isinstance(payload, list):
        return [redact_payload(item) for item in payload]
    else:
        return payload
