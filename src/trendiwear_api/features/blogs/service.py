"""Editorial blog posts written by professionals and administrators."""

from __future__ import annotations

import logging
from uuid import UUID

from fastapi import HTTPException, status
from sqlalchemy import or_, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from trendiwear_api.common.filters import json_list_contains_any
from trendiwear_api.common.logging import log_context
from trendiwear_api.common.pagination import PageParams, paginate_query
from trendiwear_api.common.text import like_pattern, slug_candidates, slugify
from trendiwear_api.core.auth.errors import PermissionDeniedError
from trendiwear_api.core.http.dependencies import ensure_owner_or_admin, is_admin
from trendiwear_api.db import utc_now
from trendiwear_api.models import Blog, User, UserRole

from .schemas import BlogCreate, BlogOut, BlogPage, BlogUpdate

logger = logging.getLogger(__name__)

_NOT_NULL = {"title", "content", "tags", "is_published", "is_featured"}


class BlogsService:
    def __init__(self, *, session: AsyncSession) -> None:
        self._session = session

    async def list_blogs(
        self,
        *,
        params: PageParams,
        viewer: User | None = None,
        published_only: bool = True,
        author_id: UUID | None = None,
        featured: bool = False,
        search: str | None = None,
        tags: list[str] | None = None,
    ) -> BlogPage:
        """Page through posts, featured first.

        Drafts are listed only when ``published_only`` is off, and then only
        the viewer's own unless the viewer is an administrator.
        """

        stmt = select(Blog)
        if published_only or viewer is None:
            stmt = stmt.where(Blog.is_published.is_(True))
        elif not is_admin(viewer):
            stmt = stmt.where(or_(Blog.is_published.is_(True), Blog.author_id == viewer.id))
        if author_id is not None:
            stmt = stmt.where(Blog.author_id == author_id)
        if featured:
            stmt = stmt.where(Blog.is_featured.is_(True))
        if search:
            pattern = like_pattern(search)
            stmt = stmt.where(
                or_(
                    Blog.title.ilike(pattern, escape="\\"),
                    Blog.excerpt.ilike(pattern, escape="\\"),
                    Blog.content.ilike(pattern, escape="\\"),
                )
            )
        if tags:
            stmt = stmt.where(json_list_contains_any(Blog.tags, tags))

        result = await paginate_query(
            self._session,
            stmt,
            params=params,
            order_by=[Blog.is_featured.desc(), Blog.created_at.desc(), Blog.id],
        )
        items = [BlogOut.model_validate(row) for row in result.rows]
        logger.info(
            "blogs.list.success",
            extra=log_context(count=len(items), total=result.pagination.total),
        )
        return BlogPage(items=items, pagination=result.pagination)

    async def get_blog(self, *, blog_id: UUID, viewer: User | None = None) -> BlogOut:
        """Return a post and count the view; drafts are visible to their author and admins."""

        blog = await self._get_or_404(blog_id)
        if not blog.is_published and not (
            viewer is not None and (viewer.id == blog.author_id or is_admin(viewer))
        ):
            raise HTTPException(status.HTTP_404_NOT_FOUND, detail="Blog not found")

        await self._session.execute(
            update(Blog)
            .where(Blog.id == blog_id)
            .values(view_count=Blog.view_count + 1)
            .execution_options(synchronize_session=False)
        )
        return await self._fresh(blog_id)

    async def create_blog(self, *, payload: BlogCreate, author: User) -> BlogOut:
        if UserRole(author.role) is not UserRole.PROFESSIONAL and not is_admin(author):
            raise PermissionDeniedError(
                "Only professionals and admins can create blogs",
                required_roles=[UserRole.PROFESSIONAL.value, UserRole.ADMIN.value],
            )
        base = slugify(payload.slug or payload.title)
        if payload.slug and await self._slug_taken(base):
            raise HTTPException(status.HTTP_409_CONFLICT, detail="Slug already in use")
        if payload.is_featured and not is_admin(author):
            raise PermissionDeniedError("Only administrators can feature posts")

        data = payload.model_dump(exclude={"slug"})
        blog = Blog(
            **data,
            author_id=author.id,
            slug=base if payload.slug else await self._unique_slug(base),
            published_at=utc_now() if payload.is_published else None,
        )
        self._session.add(blog)
        await self._session.flush()

        logger.info(
            "blogs.create.success",
            extra=log_context(blog_id=str(blog.id), user_id=str(author.id), slug=blog.slug),
        )
        return await self._fresh(blog.id)

    async def update_blog(self, *, blog_id: UUID, payload: BlogUpdate, actor: User) -> BlogOut:
        blog = await self._get_or_404(blog_id)
        ensure_owner_or_admin(actor, blog.author_id)

        updates = {
            key: value
            for key, value in payload.model_dump(exclude_unset=True).items()
            if not (value is None and key in _NOT_NULL)
        }
        if "is_featured" in updates and not is_admin(actor):
            raise PermissionDeniedError("Only administrators can feature posts")
        if updates.get("is_published") and not blog.is_published:
            blog.published_at = utc_now()
        for key, value in updates.items():
            setattr(blog, key, value)
        await self._session.flush()

        logger.info(
            "blogs.update.success",
            extra=log_context(blog_id=str(blog.id), fields=",".join(sorted(updates))),
        )
        return await self._fresh(blog.id)

    async def delete_blog(self, *, blog_id: UUID, actor: User) -> None:
        blog = await self._get_or_404(blog_id)
        ensure_owner_or_admin(actor, blog.author_id)
        await self._session.delete(blog)
        await self._session.flush()
        logger.info(
            "blogs.delete.success",
            extra=log_context(blog_id=str(blog_id), user_id=str(actor.id)),
        )

    async def _slug_taken(self, slug: str) -> bool:
        result = await self._session.execute(select(Blog.id).where(Blog.slug == slug))
        return result.first() is not None

    async def _unique_slug(self, base: str) -> str:
        candidates = slug_candidates(base)
        while True:
            candidate = next(candidates)
            if not await self._slug_taken(candidate):
                return candidate

    async def _get_or_404(self, blog_id: UUID) -> Blog:
        blog = await self._session.get(Blog, blog_id)
        if blog is None:
            raise HTTPException(status.HTTP_404_NOT_FOUND, detail="Blog not found")
        return blog

    async def _fresh(self, blog_id: UUID) -> BlogOut:
        stmt = select(Blog).where(Blog.id == blog_id).execution_options(populate_existing=True)
        return BlogOut.model_validate((await self._session.execute(stmt)).scalar_one())


__all__ = ["BlogsService"]
