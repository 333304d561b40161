from __future__ import annotations

from datetime import datetime
from uuid import UUID

from pydantic import Field

from trendiwear_api.common.pagination import Page
from trendiwear_api.common.schema import BaseSchema
from trendiwear_api.features.users.schemas import UserSummary


class BlogOut(BaseSchema):
    id: UUID
    author_id: UUID
    title: str
    slug: str
    excerpt: str | None = None
    content: str
    cover_image: str | None = None
    tags: list[str] = Field(default_factory=list)
    is_published: bool
    is_featured: bool
    published_at: datetime | None = None
    view_count: int
    author: UserSummary | None = None
    created_at: datetime
    updated_at: datetime


class BlogPage(Page[BlogOut]):
    pass


class BlogCreate(BaseSchema):
    title: str = Field(min_length=1, max_length=255)
    slug: str | None = Field(default=None, max_length=280)
    excerpt: str | None = None
    content: str = Field(min_length=1)
    cover_image: str | None = Field(default=None, max_length=1024)
    tags: list[str] = Field(default_factory=list)
    is_published: bool = False
    is_featured: bool = False


class BlogUpdate(BaseSchema):
    title: str | None = Field(default=None, min_length=1, max_length=255)
    excerpt: str | None = None
    content: str | None = Field(default=None, min_length=1)
    cover_image: str | None = Field(default=None, max_length=1024)
    tags: list[str] | None = None
    is_published: bool | None = None
    is_featured: bool | None = None


__all__ = ["BlogCreate", "BlogOut", "BlogPage", "BlogUpdate"]
