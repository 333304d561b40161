from __future__ import annotations

from typing import Annotated
from uuid import UUID

from fastapi import APIRouter, Depends, Path, Query, status

from trendiwear_api.api.deps import get_blogs_service
from trendiwear_api.common.filters import split_csv
from trendiwear_api.common.pagination import PageParams, page_params
from trendiwear_api.common.schema import MessageOut
from trendiwear_api.core.http import CurrentUser, OptionalUser

from .schemas import BlogCreate, BlogOut, BlogPage, BlogUpdate
from .service import BlogsService

router = APIRouter(prefix="/blogs", tags=["blogs"])

BlogsServiceDep = Annotated[BlogsService, Depends(get_blogs_service)]
BLOG_ID_PARAM = Annotated[UUID, Path(description="Blog identifier.")]


@router.get("", response_model=BlogPage, summary="List blog posts")
async def list_blogs(
    viewer: OptionalUser,
    service: BlogsServiceDep,
    page: Annotated[PageParams, Depends(page_params(10))],
    published: bool = True,
    author_id: Annotated[UUID | None, Query(alias="authorId")] = None,
    featured: bool = False,
    search: Annotated[str | None, Query(max_length=128)] = None,
    tags: Annotated[str | None, Query(description="Comma-separated tags.")] = None,
) -> BlogPage:
    return await service.list_blogs(
        params=page,
        viewer=viewer,
        published_only=published,
        author_id=author_id,
        featured=featured,
        search=search,
        tags=split_csv(tags),
    )


@router.get(
    "/{blog_id}",
    response_model=BlogOut,
    summary="Read a blog post",
    responses={status.HTTP_404_NOT_FOUND: {"description": "Blog not found."}},
)
async def get_blog(
    viewer: OptionalUser,
    blog_id: BLOG_ID_PARAM,
    service: BlogsServiceDep,
) -> BlogOut:
    return await service.get_blog(blog_id=blog_id, viewer=viewer)


@router.post(
    "",
    response_model=BlogOut,
    status_code=status.HTTP_201_CREATED,
    summary="Write a blog post (professional or administrator)",
    responses={status.HTTP_409_CONFLICT: {"description": "Slug already in use."}},
)
async def create_blog(
    author: CurrentUser,
    payload: BlogCreate,
    service: BlogsServiceDep,
) -> BlogOut:
    return await service.create_blog(payload=payload, author=author)


@router.put(
    "/{blog_id}",
    response_model=BlogOut,
    summary="Update a blog post (author or administrator)",
    responses={
        status.HTTP_403_FORBIDDEN: {"description": "Only the author or an administrator."},
        status.HTTP_404_NOT_FOUND: {"description": "Blog not found."},
    },
)
async def update_blog(
    actor: CurrentUser,
    blog_id: BLOG_ID_PARAM,
    payload: BlogUpdate,
    service: BlogsServiceDep,
) -> BlogOut:
    return await service.update_blog(blog_id=blog_id, payload=payload, actor=actor)


@router.delete(
    "/{blog_id}",
    response_model=MessageOut,
    summary="Delete a blog post (author or administrator)",
    responses={status.HTTP_404_NOT_FOUND: {"description": "Blog not found."}},
)
async def delete_blog(
    actor: CurrentUser,
    blog_id: BLOG_ID_PARAM,
    service: BlogsServiceDep,
) -> MessageOut:
    await service.delete_blog(blog_id=blog_id, actor=actor)
    return MessageOut(message="Blog deleted successfully")


__all__ = ["router"]
