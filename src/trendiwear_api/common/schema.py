"""Shared Pydantic schema utilities."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class BaseSchema(BaseModel):
    """Base class for all API schemas.

    Fields are exposed in camelCase on the wire while snake_case names are
    still accepted on input.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
        use_enum_values=True,
        extra="ignore",
    )


class MessageOut(BaseSchema):
    message: str


__all__ = ["BaseSchema", "MessageOut"]
