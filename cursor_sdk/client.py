"""User-facing client for the Cursor Background Agents API.

Example usage:
    from cursor_sdk import CursorClient
    from cursor_sdk.models import LaunchRequest, Prompt, Source

    with CursorClient.from_env() as client:
        agent = client.launch_agent(
            LaunchRequest(
                prompt=Prompt(text="Add a README"),
                source=Source(repository="https://github.com/acme/widgets"),
            )
        )
        print(client.get_agent(agent.id).status)
"""

import httpx

from cursor_sdk._internal.dispatch import Dispatcher, escape_path_segment
from cursor_sdk.config import CursorConfig
from cursor_sdk.models import (
    Agent,
    Conversation,
    DeleteResponse,
    FollowupRequest,
    FollowupResponse,
    LaunchRequest,
    ListAgentsResponse,
    ListModelsResponse,
    ListRepositoriesResponse,
    MeResponse,
)


class CursorClient:
    """Typed client for the Cursor Background Agents API.

    Every method issues exactly one request and raises on failure:
    ``CursorAPIError`` for non-2xx responses, ``CursorDecodeError`` for
    undecodable 2xx bodies and ``CursorTransportError`` for network errors.
    Nothing is retried.

    Use `CursorClient.from_env()` to create a client from environment variables.
    """

    def __init__(
        self,
        api_key: str = "",
        *,
        base_url: str | None = None,
        user_agent: str | None = None,
        timeout_seconds: float | None = None,
        http_client: httpx.Client | None = None,
        debug: bool = False,
        config: CursorConfig | None = None,
    ) -> None:
        """Initialize the client.

        Args:
            api_key: Cursor API key. An empty key is accepted and rejected
                by the API with a 401.
            base_url: API base URL (default: https://api.cursor.com).
            user_agent: User-Agent header value.
            timeout_seconds: Request timeout in seconds.
            http_client: Optional pre-configured httpx client. The caller
                keeps ownership and must close it.
            debug: Enable debug logging to stderr.
            config: Complete settings; when given, the individual setting
                arguments above are ignored.
        """
        if config is None:
            config = CursorConfig.create(
                api_key,
                base_url=base_url,
                user_agent=user_agent,
                timeout_seconds=timeout_seconds,
                debug=debug,
            )
        self._dispatcher = Dispatcher(config, http_client)

    @classmethod
    def from_config(
        cls, config: CursorConfig, http_client: httpx.Client | None = None
    ) -> "CursorClient":
        """Create a client from an existing config."""
        return cls(config=config, http_client=http_client)

    @classmethod
    def from_env(cls) -> "CursorClient":
        """Create a client from CURSOR_* environment variables.

        See ``CursorConfig.from_env`` for the supported variables.
        """
        return cls.from_config(CursorConfig.from_env())

    @property
    def config(self) -> CursorConfig:
        return self._dispatcher.config

    def close(self) -> None:
        """Release the HTTP connection pool."""
        self._dispatcher.close()

    def __enter__(self) -> "CursorClient":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    # =========================================================================
    # Agents
    # =========================================================================

    def launch_agent(self, request: LaunchRequest) -> Agent:
        """Start a new background agent."""
        return self._dispatcher.dispatch("POST", "/v0/agents", body=request, result_type=Agent)

    def add_followup(self, agent_id: str, request: FollowupRequest) -> str:
        """Send additional instructions to a running agent.

        Returns:
            The agent ID echoed by the API.
        """
        path = f"/v0/agents/{escape_path_segment(agent_id)}/followup"
        out = self._dispatcher.dispatch("POST", path, body=request, result_type=FollowupResponse)
        return out.id

    def get_agent(self, agent_id: str) -> Agent:
        """Retrieve the current status of an agent."""
        path = f"/v0/agents/{escape_path_segment(agent_id)}"
        return self._dispatcher.dispatch("GET", path, result_type=Agent)

    def list_agents(self, limit: int = 0, cursor: str | None = None) -> ListAgentsResponse:
        """List agents with optional pagination.

        Args:
            limit: Maximum number of agents to return. 0 or less leaves it to the API.
            cursor: ``next_cursor`` from a previous page.
        """
        return self._dispatcher.dispatch(
            "GET",
            "/v0/agents",
            query={"limit": limit if limit > 0 else None, "cursor": cursor},
            result_type=ListAgentsResponse,
        )

    def delete_agent(self, agent_id: str) -> str:
        """Terminate and delete an agent.

        Returns:
            The ID of the deleted agent.
        """
        path = f"/v0/agents/{escape_path_segment(agent_id)}"
        out = self._dispatcher.dispatch("DELETE", path, result_type=DeleteResponse)
        return out.id

    def get_conversation(self, agent_id: str) -> Conversation:
        """Return the conversation history of an agent."""
        path = f"/v0/agents/{escape_path_segment(agent_id)}/conversation"
        return self._dispatcher.dispatch("GET", path, result_type=Conversation)

    # =========================================================================
    # Account
    # =========================================================================

    def list_repositories(self) -> ListRepositoriesResponse:
        """List GitHub repositories available to the API key's user.

        This endpoint is strictly rate limited per minute and per hour. A
        429 surfaces as ``CursorAPIError``; retry policy is up to the caller.
        """
        return self._dispatcher.dispatch(
            "GET", "/v0/repositories", result_type=ListRepositoriesResponse
        )

    def list_models(self) -> ListModelsResponse:
        """List model names accepted by ``launch_agent``."""
        return self._dispatcher.dispatch("GET", "/v0/models", result_type=ListModelsResponse)

    def me(self) -> MeResponse:
        """Return metadata about the API key in use."""
        return self._dispatcher.dispatch("GET", "/v0/me", result_type=MeResponse)


def get_cursor_client() -> CursorClient:
    """Get a Cursor client configured from environment variables.

    Returns:
        A configured CursorClient instance.
    """
    return CursorClient.from_env()
