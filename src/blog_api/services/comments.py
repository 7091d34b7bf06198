"""
blog_api.services.comments

Comment use cases.

Responsibilities:
- Create comments under an existing post (parent taken from the path).
- List a post's comments.
- Get/update/delete a comment through the shared ownership guard.
"""

from __future__ import annotations

from sqlalchemy.ext.asyncio import AsyncSession

from blog_api.db.models import Comment
from blog_api.db.repositories.comments import CommentRepo
from blog_api.db.repositories.posts import PostRepo
from blog_api.errors import ResourceNotFound
from blog_api.observability.logging import get_logger
from blog_api.schemas import CommentPayload
from blog_api.services.comment_guard import ensure_belongs

log = get_logger(__name__)


class CommentService:
    def __init__(self, *, session: AsyncSession) -> None:
        self._session = session
        self._posts = PostRepo(session)
        self._comments = CommentRepo(session)

    async def create(self, post_id: int, payload: CommentPayload) -> Comment:
        post = await self._posts.get(post_id)
        if post is None:
            raise ResourceNotFound("post", post_id)
        comment = await self._comments.add(
            post=post,
            name=payload.name,
            email=str(payload.email),
            body=payload.body,
        )
        await self._session.commit()
        log.info("comment_created", post_id=post_id, comment_id=comment.id)
        return comment

    async def list_for_post(self, post_id: int) -> list[Comment]:
        if await self._posts.get(post_id) is None:
            raise ResourceNotFound("post", post_id)
        return await self._comments.list_for_post(post_id)

    async def get(self, post_id: int, comment_id: int) -> Comment:
        return await self._guard(post_id, comment_id)

    async def update(self, post_id: int, comment_id: int, payload: CommentPayload) -> Comment:
        comment = await self._guard(post_id, comment_id)
        await self._comments.update(
            comment,
            name=payload.name,
            email=str(payload.email),
            body=payload.body,
        )
        await self._session.commit()
        log.info("comment_updated", post_id=post_id, comment_id=comment_id)
        return comment

    async def delete(self, post_id: int, comment_id: int) -> None:
        comment = await self._guard(post_id, comment_id)
        await self._comments.delete(comment)
        await self._session.commit()
        log.info("comment_deleted", post_id=post_id, comment_id=comment_id)

    async def _guard(self, post_id: int, comment_id: int) -> Comment:
        return await ensure_belongs(
            posts=self._posts,
            comments=self._comments,
            post_id=post_id,
            comment_id=comment_id,
        )
