"""Shared base for Cursor API wire models."""

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class CursorModel(BaseModel):
    """Base model mapping snake_case attributes to camelCase wire names.

    Unknown fields in responses are ignored so additive API changes do not
    break decoding.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
    )
