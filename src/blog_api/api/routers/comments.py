"""
blog_api.api.routers.comments

Comment endpoints nested under a post.

Responsibilities:
- Create and list comments of a post.
- Get/update/delete a single comment; ownership is checked by the service guard.
"""

from __future__ import annotations

from fastapi import APIRouter, Depends
from starlette.status import HTTP_201_CREATED

from blog_api.api.deps import comment_service
from blog_api.schemas import CommentDto, CommentPayload, comment_to_dto
from blog_api.services.comments import CommentService

router = APIRouter(prefix="/api/posts/{post_id}/comments", tags=["comments"])


@router.post("", response_model=CommentDto, status_code=HTTP_201_CREATED)
async def create_comment(
    post_id: int,
    body: CommentPayload,
    svc: CommentService = Depends(comment_service),
) -> CommentDto:
    return comment_to_dto(await svc.create(post_id, body))


@router.get("", response_model=list[CommentDto])
async def list_comments(
    post_id: int,
    svc: CommentService = Depends(comment_service),
) -> list[CommentDto]:
    return [comment_to_dto(c) for c in await svc.list_for_post(post_id)]


@router.get("/{comment_id}", response_model=CommentDto)
async def get_comment(
    post_id: int,
    comment_id: int,
    svc: CommentService = Depends(comment_service),
) -> CommentDto:
    return comment_to_dto(await svc.get(post_id, comment_id))


@router.put("/{comment_id}", response_model=CommentDto)
async def update_comment(
    post_id: int,
    comment_id: int,
    body: CommentPayload,
    svc: CommentService = Depends(comment_service),
) -> CommentDto:
    return comment_to_dto(await svc.update(post_id, comment_id, body))


@router.delete("/{comment_id}")
async def delete_comment(
    post_id: int,
    comment_id: int,
    svc: CommentService = Depends(comment_service),
) -> dict[str, str]:
    await svc.delete(post_id, comment_id)
    return {"message": "Comment deleted successfully"}
