"""Pydantic model for webhook notification payloads."""

from datetime import datetime

from cursor_sdk.models.agents import AgentStatus, Source, Target
from cursor_sdk.models.base import CursorModel

EVENT_STATUS_CHANGE = "statusChange"


class WebhookEvent(CursorModel):
    """Payload delivered when an agent changes status."""

    event: str
    timestamp: datetime
    id: str
    status: AgentStatus | str
    source: Source
    target: Target
    summary: str | None = None
