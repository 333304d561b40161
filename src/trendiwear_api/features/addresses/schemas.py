from __future__ import annotations

from datetime import datetime
from uuid import UUID

from pydantic import Field

from trendiwear_api.common.schema import BaseSchema
from trendiwear_api.models import AddressType


class AddressOut(BaseSchema):
    id: UUID
    user_id: UUID
    type: AddressType
    first_name: str
    last_name: str
    street: str
    city: str
    state: str | None = None
    zip_code: str | None = None
    country: str
    phone: str | None = None
    is_default: bool
    created_at: datetime
    updated_at: datetime


class AddressList(BaseSchema):
    addresses: list[AddressOut]


class AddressCreate(BaseSchema):
    type: AddressType = AddressType.HOME
    first_name: str = Field(min_length=1, max_length=100)
    last_name: str = Field(min_length=1, max_length=100)
    street: str = Field(min_length=1, max_length=255)
    city: str = Field(min_length=1, max_length=100)
    state: str | None = Field(default=None, max_length=100)
    zip_code: str | None = Field(default=None, max_length=20)
    country: str | None = Field(default=None, max_length=100)
    phone: str | None = Field(default=None, max_length=40)
    is_default: bool = False


class AddressUpdate(BaseSchema):
    type: AddressType | None = None
    first_name: str | None = Field(default=None, min_length=1, max_length=100)
    last_name: str | None = Field(default=None, min_length=1, max_length=100)
    street: str | None = Field(default=None, min_length=1, max_length=255)
    city: str | None = Field(default=None, min_length=1, max_length=100)
    state: str | None = Field(default=None, max_length=100)
    zip_code: str | None = Field(default=None, max_length=20)
    country: str | None = Field(default=None, min_length=1, max_length=100)
    phone: str | None = Field(default=None, max_length=40)
    is_default: bool | None = None


__all__ = ["AddressCreate", "AddressList", "AddressOut", "AddressUpdate"]
