"""Pydantic models for background agents and their conversations.

Field names are snake_case in Python and camelCase on the wire.
"""

from datetime import datetime
from typing import Literal

from pydantic import Field

from cursor_sdk.models.base import CursorModel

# =============================================================================
# Constants
# =============================================================================

AgentStatus = Literal["RUNNING", "FINISHED", "ERROR", "CREATING", "EXPIRED"]

AGENT_STATUS_RUNNING = "RUNNING"
AGENT_STATUS_FINISHED = "FINISHED"
AGENT_STATUS_ERROR = "ERROR"
AGENT_STATUS_CREATING = "CREATING"
AGENT_STATUS_EXPIRED = "EXPIRED"

MessageType = Literal["user_message", "assistant_message"]

# =============================================================================
# Shared Models
# =============================================================================


class Source(CursorModel):
    """Input repository and ref the agent works from."""

    repository: str
    ref: str | None = None


class Target(CursorModel):
    """Output branch and pull request details.

    ``pr_url`` stays None until the agent has opened a pull request.
    """

    branch_name: str | None = None
    url: str | None = None
    pr_url: str | None = None
    auto_create_pr: bool | None = None


class Dimension(CursorModel):
    width: int
    height: int


class Image(CursorModel):
    """Base64-encoded image passed as visual context."""

    data: str
    dimension: Dimension | None = None


class Prompt(CursorModel):
    """Instructions for the agent, with optional images."""

    text: str
    images: list[Image] | None = None


# =============================================================================
# Response Models
# =============================================================================


class Agent(CursorModel):
    """A background agent task."""

    id: str
    name: str | None = None
    status: AgentStatus | str
    source: Source
    target: Target
    summary: str | None = None
    created_at: datetime


class Message(CursorModel):
    id: str
    type: MessageType | str
    text: str


class Conversation(CursorModel):
    """Chat history of an agent."""

    id: str
    messages: list[Message] = Field(default_factory=list)


class ListAgentsResponse(CursorModel):
    agents: list[Agent] = Field(default_factory=list)
    next_cursor: str | None = None


class FollowupResponse(CursorModel):
    id: str


class DeleteResponse(CursorModel):
    id: str


# =============================================================================
# Request Models
# =============================================================================


class LaunchTarget(CursorModel):
    """Branch and pull request behavior for a new agent."""

    auto_create_pr: bool | None = None
    branch_name: str | None = None


class LaunchWebhook(CursorModel):
    """Webhook delivery settings for a new agent.

    ``secret`` signs deliveries; see ``cursor_sdk.webhooks``.
    """

    url: str
    secret: str | None = None


class LaunchRequest(CursorModel):
    """Payload for launching a new background agent.

    Required fields:
        prompt: Instructions for the agent
        source: Repository (and optional ref) to work on

    Optional fields:
        model: Model name; the API picks a default when omitted
        target: Branch / pull request settings
        webhook: Status-change notification settings
    """

    prompt: Prompt
    source: Source
    model: str | None = None
    target: LaunchTarget | None = None
    webhook: LaunchWebhook | None = None


class FollowupRequest(CursorModel):
    """Additional instructions for a running agent."""

    prompt: Prompt
