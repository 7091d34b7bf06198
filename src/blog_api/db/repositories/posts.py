"""
blog_api.db.repositories.posts

Repository for `Post` entities.

Responsibilities:
- Create, fetch, update, and delete posts.
- List posts of a category.
- Run sorted, paged scans over all posts.
"""

from __future__ import annotations

from pydantic.alias_generators import to_snake
from sqlalchemy import asc, desc, func, inspect, select
from sqlalchemy.ext.asyncio import AsyncSession

from blog_api.db.models import Post
from blog_api.db.paging import PagedResult, PageRequest, SortDirection
from blog_api.errors import InvalidSortField


class PostRepo:
    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def add(self, *, title: str, description: str, content: str, category_id: int) -> Post:
        post = Post(
            title=title,
            description=description,
            content=content,
            category_id=category_id,
            comments=[],
        )
        self._session.add(post)
        await self._session.flush()
        return post

    async def get(self, post_id: int) -> Post | None:
        # populate_existing refreshes the comments collection of an already-loaded post.
        return await self._session.get(Post, post_id, populate_existing=True)

    async def list_for_category(self, category_id: int) -> list[Post]:
        stmt = select(Post).where(Post.category_id == category_id).order_by(Post.id)
        return list((await self._session.execute(stmt)).scalars().all())

    async def scan_paged(self, page: PageRequest) -> PagedResult[Post]:
        column = _sort_column(page.sort_by)
        order = desc(column) if page.direction is SortDirection.desc else asc(column)

        total = (await self._session.execute(select(func.count()).select_from(Post))).scalar_one()
        # Secondary key on id keeps pages stable when the sort column has duplicates.
        stmt = (
            select(Post)
            .order_by(order, asc(Post.id))
            .offset(page.offset)
            .limit(page.page_size)
        )
        rows = list((await self._session.execute(stmt)).scalars().all())
        return PagedResult(
            content=rows,
            page_number=page.page_number,
            page_size=page.page_size,
            total_elements=int(total),
        )

    async def update(
        self,
        post: Post,
        *,
        title: str,
        description: str,
        content: str,
        category_id: int,
    ) -> Post:
        post.title = title
        post.description = description
        post.content = content
        post.category_id = category_id
        await self._session.flush()
        return post

    async def delete(self, post: Post) -> None:
        # Comments go with the post (cascade="all, delete-orphan").
        await self._session.delete(post)
        await self._session.flush()


def _sort_column(sort_by: str):
    # Accept both attribute names (category_id) and wire names (categoryId).
    columns = inspect(Post).columns
    for key in (sort_by, to_snake(sort_by)):
        if key in columns:
            return columns[key]
    raise InvalidSortField(sort_by)
