"""
blog_api.services.categories

Category orchestration.

Responsibilities:
- Add, fetch, list, update, and delete categories.
- Own the transaction boundary for category mutations.
"""

from __future__ import annotations

from sqlalchemy.ext.asyncio import AsyncSession

from blog_api.db.models import Category
from blog_api.db.repositories.categories import CategoryRepo
from blog_api.errors import ResourceNotFound
from blog_api.observability.logging import get_logger
from blog_api.schemas import CategoryPayload

log = get_logger(__name__)


class CategoryService:
    def __init__(self, *, session: AsyncSession) -> None:
        self._session = session
        self._categories = CategoryRepo(session)

    async def add(self, payload: CategoryPayload) -> Category:
        category = await self._categories.add(name=payload.name, description=payload.description)
        await self._session.commit()
        log.info("category_created", category_id=category.id)
        return category

    async def get(self, category_id: int) -> Category:
        category = await self._categories.get(category_id)
        if category is None:
            raise ResourceNotFound("category", category_id)
        return category

    async def list_all(self) -> list[Category]:
        return await self._categories.list_all()

    async def update(self, category_id: int, payload: CategoryPayload) -> Category:
        category = await self.get(category_id)
        await self._categories.update(
            category, name=payload.name, description=payload.description
        )
        await self._session.commit()
        log.info("category_updated", category_id=category_id)
        return category

    async def delete(self, category_id: int) -> None:
        # Posts still referencing the category are not checked here.
        category = await self.get(category_id)
        await self._categories.delete(category)
        await self._session.commit()
        log.info("category_deleted", category_id=category_id)
