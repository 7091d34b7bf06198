"""
blog_api.db.repositories.categories

Repository for `Category` entities.

Responsibilities:
- Create, fetch, update, and delete categories.
- List all categories in id order.
"""

from __future__ import annotations

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from blog_api.db.models import Category


class CategoryRepo:
    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def add(self, *, name: str, description: str | None) -> Category:
        category = Category(name=name, description=description)
        self._session.add(category)
        await self._session.flush()
        return category

    async def get(self, category_id: int) -> Category | None:
        return await self._session.get(Category, category_id)

    async def list_all(self) -> list[Category]:
        stmt = select(Category).order_by(Category.id)
        return list((await self._session.execute(stmt)).scalars().all())

    async def update(self, category: Category, *, name: str, description: str | None) -> Category:
        category.name = name
        category.description = description
        await self._session.flush()
        return category

    async def delete(self, category: Category) -> None:
        await self._session.delete(category)
        await self._session.flush()
