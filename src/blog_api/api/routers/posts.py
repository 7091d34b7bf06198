"""
blog_api.api.routers.posts

Post endpoints.

Responsibilities:
- ADMIN-gated create/update/delete under `/api/posts/v1`.
- Public paged listing, listing by category, and versioned single-post reads.
"""

from __future__ import annotations

from typing import Any

from fastapi import APIRouter, Depends, Header, Query
from starlette.status import HTTP_201_CREATED

from blog_api.api.deps import post_service, settings_dep
from blog_api.auth.deps import require_roles
from blog_api.auth.models import Role
from blog_api.db.paging import PageRequest, SortDirection
from blog_api.schemas import (
    PostDto,
    PostPage,
    PostPayload,
    post_page_to_response,
    post_to_dto,
    project_post,
)
from blog_api.services.posts import PostService
from blog_api.settings import Settings

router = APIRouter(prefix="/api/posts", tags=["posts"])

_admin_only = [Depends(require_roles(Role.admin))]


@router.post(
    "/v1",
    response_model=PostDto,
    status_code=HTTP_201_CREATED,
    dependencies=_admin_only,
)
async def create_post(
    body: PostPayload,
    svc: PostService = Depends(post_service),
) -> PostDto:
    return post_to_dto(await svc.create(body))


@router.get("/v1", response_model=PostPage)
async def list_posts(
    page_no: int = Query(default=0, ge=0, alias="pageNo"),
    page_size: int | None = Query(default=None, gt=0, alias="pageSize"),
    sort_by: str = Query(default="id", min_length=1, alias="sortBy"),
    sort_dir: str = Query(default="asc", alias="sortDir"),
    svc: PostService = Depends(post_service),
    settings: Settings = Depends(settings_dep),
) -> PostPage:
    page = PageRequest(
        page_number=page_no,
        page_size=page_size or settings.default_page_size,
        sort_by=sort_by,
        direction=SortDirection.parse(sort_dir),
    )
    return post_page_to_response(await svc.list_paged(page))


@router.get("/v1/category/{category_id}", response_model=list[PostDto])
async def list_posts_by_category(
    category_id: int,
    svc: PostService = Depends(post_service),
) -> list[PostDto]:
    return [post_to_dto(p) for p in await svc.list_for_category(category_id)]


@router.put("/v1/{post_id}", response_model=PostDto, dependencies=_admin_only)
async def update_post(
    post_id: int,
    body: PostPayload,
    svc: PostService = Depends(post_service),
) -> PostDto:
    return post_to_dto(await svc.update(post_id, body))


@router.delete("/v1/{post_id}", dependencies=_admin_only)
async def delete_post(
    post_id: int,
    svc: PostService = Depends(post_service),
) -> dict[str, str]:
    await svc.delete(post_id)
    return {"message": "Post deleted successfully"}


@router.get("/{post_id}")
async def get_post(
    post_id: int,
    version: str = Header(default="1", alias="VERSION"),
    svc: PostService = Depends(post_service),
) -> dict[str, Any]:
    # The representation depends on the VERSION header, so serialize here.
    dto = post_to_dto(await svc.get(post_id))
    return project_post(dto, version).model_dump(by_alias=True)
