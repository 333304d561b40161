from __future__ import annotations

from datetime import datetime
from uuid import UUID

from pydantic import EmailStr, Field

from trendiwear_api.common.pagination import Page
from trendiwear_api.common.schema import BaseSchema
from trendiwear_api.models import UserRole


class UserSummary(BaseSchema):
    """Compact user view embedded in other resources."""

    id: UUID
    first_name: str | None = None
    last_name: str | None = None
    profile_image: str | None = None


class UserOut(BaseSchema):
    id: UUID
    email: str
    first_name: str | None = None
    last_name: str | None = None
    phone: str | None = None
    profile_image: str | None = None
    role: UserRole
    is_active: bool
    created_at: datetime
    updated_at: datetime


class UserCounts(BaseSchema):
    orders: int = 0
    products: int = 0
    reviews: int = 0


class UserListItem(UserOut):
    counts: UserCounts = Field(default_factory=UserCounts)


class UserPage(Page[UserListItem]):
    pass


class UserCreate(BaseSchema):
    email: EmailStr
    first_name: str | None = Field(default=None, max_length=100)
    last_name: str | None = Field(default=None, max_length=100)
    phone: str | None = Field(default=None, max_length=40)
    profile_image: str | None = None
    role: UserRole = UserRole.CUSTOMER


class UserUpdate(BaseSchema):
    first_name: str | None = Field(default=None, max_length=100)
    last_name: str | None = Field(default=None, max_length=100)
    phone: str | None = Field(default=None, max_length=40)
    profile_image: str | None = None
    role: UserRole | None = None
    is_active: bool | None = None


__all__ = [
    "UserCounts",
    "UserCreate",
    "UserListItem",
    "UserOut",
    "UserPage",
    "UserSummary",
    "UserUpdate",
]
