"""
blog_api.services.posts

Post use cases.

Responsibilities:
- Create/update posts only against an existing category.
- Fetch, delete, and list posts (paged, or by category).
"""

from __future__ import annotations

from sqlalchemy.ext.asyncio import AsyncSession

from blog_api.db.models import Post
from blog_api.db.paging import PagedResult, PageRequest
from blog_api.db.repositories.categories import CategoryRepo
from blog_api.db.repositories.posts import PostRepo
from blog_api.errors import ResourceNotFound
from blog_api.observability.logging import get_logger
from blog_api.schemas import PostPayload

log = get_logger(__name__)


class PostService:
    def __init__(self, *, session: AsyncSession) -> None:
        self._session = session
        self._posts = PostRepo(session)
        self._categories = CategoryRepo(session)

    async def create(self, payload: PostPayload) -> Post:
        await self._require_category(payload.category_id)
        post = await self._posts.add(
            title=payload.title,
            description=payload.description,
            content=payload.content,
            category_id=payload.category_id,
        )
        await self._session.commit()
        log.info("post_created", post_id=post.id, category_id=post.category_id)
        return post

    async def get(self, post_id: int) -> Post:
        post = await self._posts.get(post_id)
        if post is None:
            raise ResourceNotFound("post", post_id)
        return post

    async def list_paged(self, page: PageRequest) -> PagedResult[Post]:
        return await self._posts.scan_paged(page)

    async def list_for_category(self, category_id: int) -> list[Post]:
        await self._require_category(category_id)
        return await self._posts.list_for_category(category_id)

    async def update(self, post_id: int, payload: PostPayload) -> Post:
        post = await self.get(post_id)
        await self._require_category(payload.category_id)
        await self._posts.update(
            post,
            title=payload.title,
            description=payload.description,
            content=payload.content,
            category_id=payload.category_id,
        )
        await self._session.commit()
        log.info("post_updated", post_id=post_id)
        return post

    async def delete(self, post_id: int) -> None:
        post = await self.get(post_id)
        await self._posts.delete(post)
        await self._session.commit()
        log.info("post_deleted", post_id=post_id)

    async def _require_category(self, category_id: int) -> None:
        if await self._categories.get(category_id) is None:
            raise ResourceNotFound("category", category_id)
