"""Public Pydantic models for the Cursor Background Agents API."""

from cursor_sdk.models.account import (
    ListModelsResponse,
    ListRepositoriesResponse,
    MeResponse,
    Repository,
)
from cursor_sdk.models.agents import (
    AGENT_STATUS_CREATING,
    AGENT_STATUS_ERROR,
    AGENT_STATUS_EXPIRED,
    AGENT_STATUS_FINISHED,
    AGENT_STATUS_RUNNING,
    Agent,
    AgentStatus,
    Conversation,
    DeleteResponse,
    Dimension,
    FollowupRequest,
    FollowupResponse,
    Image,
    LaunchRequest,
    LaunchTarget,
    LaunchWebhook,
    ListAgentsResponse,
    Message,
    MessageType,
    Prompt,
    Source,
    Target,
)
from cursor_sdk.models.base import CursorModel
from cursor_sdk.models.webhooks import EVENT_STATUS_CHANGE, WebhookEvent

__all__ = [
    "AGENT_STATUS_CREATING",
    "AGENT_STATUS_ERROR",
    "AGENT_STATUS_EXPIRED",
    "AGENT_STATUS_FINISHED",
    "AGENT_STATUS_RUNNING",
    "EVENT_STATUS_CHANGE",
    "Agent",
    "AgentStatus",
    "Conversation",
    "CursorModel",
    "DeleteResponse",
    "Dimension",
    "FollowupRequest",
    "FollowupResponse",
    "Image",
    "LaunchRequest",
    "LaunchTarget",
    "LaunchWebhook",
    "ListAgentsResponse",
    "ListModelsResponse",
    "ListRepositoriesResponse",
    "MeResponse",
    "Message",
    "MessageType",
    "Prompt",
    "Repository",
    "Source",
    "Target",
    "WebhookEvent",
]
