"""
blog_api.db.repositories.comments

Repository for `Comment` entities.

Responsibilities:
- Create comments under a loaded post.
- Fetch single comments and list a post's comments.
- Update comment text fields and delete comments.
"""

from __future__ import annotations

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from blog_api.db.models import Comment, Post


class CommentRepo:
    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def add(self, *, post: Post, name: str, email: str, body: str) -> Comment:
        comment = Comment(name=name, email=email, body=body, post_id=post.id)
        # Keep the loaded collection in sync for callers sharing this session.
        post.comments.append(comment)
        await self._session.flush()
        return comment

    async def get(self, comment_id: int) -> Comment | None:
        return await self._session.get(Comment, comment_id)

    async def list_for_post(self, post_id: int) -> list[Comment]:
        stmt = select(Comment).where(Comment.post_id == post_id).order_by(Comment.id)
        return list((await self._session.execute(stmt)).scalars().all())

    async def update(self, comment: Comment, *, name: str, email: str, body: str) -> Comment:
        # post_id is deliberately not updatable.
        comment.name = name
        comment.email = email
        comment.body = body
        await self._session.flush()
        return comment

    async def delete(self, comment: Comment) -> None:
        await self._session.delete(comment)
        await self._session.flush()
