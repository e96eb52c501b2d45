"""Pydantic models for repositories, models and API key metadata."""

from datetime import datetime

from pydantic import Field

from cursor_sdk.models.base import CursorModel


class Repository(CursorModel):
    """A GitHub repository reachable through the Cursor integration."""

    owner: str
    name: str
    repository: str


class ListRepositoriesResponse(CursorModel):
    repositories: list[Repository] = Field(default_factory=list)


class ListModelsResponse(CursorModel):
    models: list[str] = Field(default_factory=list)


class MeResponse(CursorModel):
    """Metadata about the API key in use."""

    api_key_name: str
    created_at: datetime
    user_email: str | None = None
