"""Request dispatch and response mapping for the Cursor API.

Every endpoint wrapper funnels through ``Dispatcher.dispatch``: it builds the
authenticated request, sends it once, and maps the response to either a
decoded value or one of the SDK exceptions. Nothing here is retried.
"""

import json
import sys
from collections.abc import Mapping
from typing import Any, TypeVar, overload
from urllib.parse import quote

import httpx
from pydantic import BaseModel, TypeAdapter, ValidationError

from cursor_sdk._internal.http import create_http_client
from cursor_sdk._internal.redaction import redact_payload
from cursor_sdk.config import CursorConfig
from cursor_sdk.exceptions import CursorAPIError, CursorDecodeError, CursorTransportError

T = TypeVar("T")

# float, httpx.Timeout, None, or httpx.USE_CLIENT_DEFAULT
TimeoutArg = Any


def escape_path_segment(segment: str) -> str:
    """Percent-escape a single path segment, including any "/".

    Raises:
        ValueError: If the segment is empty, "." or "..", which would change
            the path structure instead of naming a resource.
    """
    if segment in ("", ".", ".."):
        raise ValueError(f"invalid path segment: {segment!r}")
    return quote(segment, safe="")


def build_query(query: Mapping[str, Any] | None) -> dict[str, str]:
    """Encode query parameters, dropping empty and zero values.

    ``None``, ``""``, ``0`` and ``False`` are omitted rather than sent, so an
    unset limit never restricts results server-side. Insertion order is kept.
    """
    if not query:
        return {}
    params: dict[str, str] = {}
    for key, value in query.items():
        if value is None or value == "" or value is False or value == 0:
            continue
        if value is True:
            params[key] = "true"
        else:
            params[key] = str(value)
    return params


def serialize_body(body: BaseModel | Mapping[str, Any]) -> dict[str, Any]:
    """Dump a request body to its JSON wire form (camelCase, unset fields omitted)."""
    if isinstance(body, BaseModel):
        return body.model_dump(mode="json", by_alias=True, exclude_none=True)
    return dict(body)


class Dispatcher:
    """Builds, sends and maps a single Cursor API request.

    The dispatcher holds only the frozen config and the httpx client, so one
    instance can serve any number of concurrent calls.
    """

    def __init__(
        self,
        config: CursorConfig,
        http_client: httpx.Client | None = None,
    ) -> None:
        """Initialize the dispatcher.

        Args:
            config: Client settings.
            http_client: Optional pre-configured httpx client. When omitted,
                one is created from ``config`` and owned by this dispatcher.
        """
        self._config = config
        self._owns_http_client = http_client is None
        self._http_client = http_client or create_http_client(config)

    @property
    def config(self) -> CursorConfig:
        return self._config

    def close(self) -> None:
        """Close the underlying httpx client if this dispatcher created it."""
        if self._owns_http_client:
            self._http_client.close()

    def _log_debug(self, message: str) -> None:
        """Log a debug message to stderr if debug mode is enabled."""
        if self._config.debug:
            print(f"[cursor-sdk] {message}", file=sys.stderr)

    def _url(self, path: str) -> str:
        return self._config.base_url.rstrip("/") + "/" + path.lstrip("/")

    def _headers(self, *, has_body: bool) -> dict[str, str]:
        headers = {
            "Authorization": f"Bearer {self._config.api_key.get_secret_value()}",
            "Accept": "application/json",
            "User-Agent": self._config.user_agent,
        }
        if has_body:
            headers["Content-Type"] = "application/json"
        return headers

    @overload
    def dispatch(
        self,
        method: str,
        path: str,
        *,
        query: Mapping[str, Any] | None = ...,
        body: BaseModel | Mapping[str, Any] | None = ...,
        result_type: type[T],
        timeout: TimeoutArg = ...,
    ) -> T: ...

    @overload
    def dispatch(
        self,
        method: str,
        path: str,
        *,
        query: Mapping[str, Any] | None = ...,
        body: BaseModel | Mapping[str, Any] | None = ...,
        result_type: None = ...,
        timeout: TimeoutArg = ...,
    ) -> None: ...

    def dispatch(
        self,
        method: str,
        path: str,
        *,
        query: Mapping[str, Any] | None = None,
        body: BaseModel | Mapping[str, Any] | None = None,
        result_type: Any = None,
        timeout: TimeoutArg = httpx.USE_CLIENT_DEFAULT,
    ) -> Any:
        """Send one request and map the response.

        Args:
            method: HTTP method, passed through as-is.
            path: Slash-rooted path. User-derived segments must already be
                escaped with ``escape_path_segment``.
            query: Optional query parameters; see ``build_query``.
            body: Optional pydantic model or mapping sent as JSON.
            result_type: Type to decode a 2xx body into. When None the body
                is read and discarded.
            timeout: Per-call timeout override.

        Returns:
            The decoded body, or None when ``result_type`` is None.

        Raises:
            CursorTransportError: The request could not be completed.
            CursorAPIError: The response status was outside [200, 300).
            CursorDecodeError: A 2xx body could not be decoded into ``result_type``.
        """
        params = build_query(query)
        payload = serialize_body(body) if body is not None else None

        request = self._http_client.build_request(
            method,
            self._url(path),
            params=params or None,
            json=payload,
            headers=self._headers(has_body=payload is not None),
            timeout=timeout,
        )
        self._log_debug(f"{method} {request.url}")
        if payload is not None:
            self._log_debug(f"Request body: {json.dumps(redact_payload(payload))}")

        try:
            # Non-streaming send reads the whole body and releases the connection.
            response = self._http_client.send(request)
        except httpx.TransportError as e:
            self._log_debug(f"{method} {path} transport error: {e!r}")
            raise CursorTransportError(f"{method} {path} failed: {e}") from e

        self._log_debug(f"{method} {path} -> {response.status_code}")

        if not (200 <= response.status_code < 300):
            raise CursorAPIError(response.status_code, response.text)

        if result_type is None:
            return None

        try:
            return TypeAdapter(result_type).validate_json(response.content)
        except ValidationError as e:
            raise CursorDecodeError(
                f"Failed to decode {method} {path} response: {e}",
                status_code=response.status_code,
                body=response.text,
            ) from e
