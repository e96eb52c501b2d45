"""Client configuration for the Cursor SDK."""

import os

from pydantic import BaseModel, ConfigDict, Field, SecretStr, ValidationError

from cursor_sdk._version import __version__
from cursor_sdk.exceptions import CursorConfigError

DEFAULT_BASE_URL = "https://api.cursor.com"
DEFAULT_USER_AGENT = f"cursor-sdk/{__version__}"
DEFAULT_TIMEOUT_SECONDS = 60.0


class CursorConfig(BaseModel):
    """Immutable settings for a Cursor client.

    An empty API key is accepted; the API rejects it with a 401 on the first
    request.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    api_key: SecretStr = SecretStr("")
    base_url: str = DEFAULT_BASE_URL
    user_agent: str = DEFAULT_USER_AGENT
    timeout_seconds: float = Field(default=DEFAULT_TIMEOUT_SECONDS, gt=0)
    debug: bool = False

    @classmethod
    def create(
        cls,
        api_key: str = "",
        *,
        base_url: str | None = None,
        user_agent: str | None = None,
        timeout_seconds: float | None = None,
        debug: bool = False,
    ) -> "CursorConfig":
        """Build a config from explicit values, falling back to defaults.

        Raises:
            CursorConfigError: If a supplied value is invalid (e.g. a
                non-positive timeout).
        """
        try:
            return cls(
                api_key=SecretStr(api_key),
                base_url=base_url or DEFAULT_BASE_URL,
                user_agent=user_agent or DEFAULT_USER_AGENT,
                timeout_seconds=(
                    DEFAULT_TIMEOUT_SECONDS if timeout_seconds is None else timeout_seconds
                ),
                debug=debug,
            )
        except ValidationError as e:
            raise CursorConfigError(str(e)) from e

    @classmethod
    def from_env(cls) -> "CursorConfig":
        """Create a config from environment variables.

        Environment variables:
            CURSOR_API_KEY: The API key.
            CURSOR_BASE_URL: API base URL (default: https://api.cursor.com).
            CURSOR_USER_AGENT: User-Agent header value.
            CURSOR_TIMEOUT_SECONDS: Request timeout; ignored unless a positive number.
            CURSOR_DEBUG: Set to "1" to enable debug logging.

        Returns:
            A CursorConfig. Empty variables fall back to defaults.
        """
        timeout_seconds = None
        raw_timeout = os.environ.get("CURSOR_TIMEOUT_SECONDS", "")
        if raw_timeout:
            try:
                parsed = float(raw_timeout)
            except ValueError:
                parsed = 0.0
            if parsed > 0:
                timeout_seconds = parsed

        return cls.create(
            os.environ.get("CURSOR_API_KEY", ""),
            base_url=os.environ.get("CURSOR_BASE_URL"),
            user_agent=os.environ.get("CURSOR_USER_AGENT"),
            timeout_seconds=timeout_seconds,
            debug=os.environ.get("CURSOR_DEBUG", "") == "1",
        )
